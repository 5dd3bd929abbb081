"""
Tests for the offset Kaiser window.
"""

import numpy as np
import pytest

from firdes import DomainError, kaiser, kaiser_window


def test_window_peaks_at_centre():
    w = kaiser_window(9, 6.0)
    assert w[4] == pytest.approx(1.0)
    assert np.all(w <= 1.0)
    np.testing.assert_allclose(w, w[::-1], rtol=0, atol=1e-15)


def test_window_edges_stay_positive():
    # Normalising by n keeps the edge taps above zero
    w = kaiser_window(8, 10.0, 0.5)
    assert np.all(w > 0)


def test_zero_beta_is_rectangular():
    np.testing.assert_allclose(kaiser_window(12, 0.0, 0.3), np.ones(12))


def test_sample_and_full_forms_agree():
    n, beta, mu = 13, 5.0, -0.4
    w = kaiser_window(n, beta, mu)
    for i in range(n):
        assert kaiser(i, n, beta, mu) == pytest.approx(w[i], rel=1e-12)


@pytest.mark.parametrize("n, mu", [(0, 0.0), (5, 0.75), (5, -0.6)])
def test_window_rejects_invalid_input(n, mu):
    with pytest.raises(DomainError):
        kaiser_window(n, 4.0, mu)
    with pytest.raises(DomainError):
        kaiser(0, n, 4.0, mu)


@pytest.mark.parametrize("i", [-1, 5, 12])
def test_sample_index_outside_window(i):
    with pytest.raises(DomainError):
        kaiser(i, 5, 4.0)
