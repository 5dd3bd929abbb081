"""
Tests for the frequency-response summary.
"""

import numpy as np
import pytest

from firdes import filter_response, fir_kaiser_window


def test_kaiser_lowpass_response():
    h = fir_kaiser_window(61, 0.25, 60.0, 0.0)
    stats = filter_response(h)

    assert stats['dc_gain'] == pytest.approx(np.sum(h))
    assert stats['dc_gain_db'] == pytest.approx(20 * np.log10(abs(np.sum(h))), abs=1e-6)
    assert stats['symmetry_error'] < 1e-14
    # sinc(fc t) has its band edge at fc/2 cycles/sample
    assert 0.08 < stats['f_3db'] < 0.125
    assert stats['peak_sidelobe_db'] < -40.0


def test_impulse_has_no_band_edge():
    stats = filter_response([1.0])
    assert stats['f_3db'] is None
    assert stats['peak_sidelobe_db'] is None
    np.testing.assert_allclose(stats['mag_db'], 0.0, atol=1e-9)


def test_grid_size():
    stats = filter_response(fir_kaiser_window(15, 0.5, 40.0), n_freqs=512)
    assert stats['freqs'].shape == (512,)
    assert stats['freqs'][0] == 0.0
    assert stats['freqs'][-1] < 0.5
