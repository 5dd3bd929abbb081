"""
Tests for the command line front end.
"""

import numpy as np
import pytest

from firdes import fir_kaiser_window
from firdes.cli import main


def test_estimate(capsys):
    assert main(["estimate", "--bandwidth", "0.1", "--slsl", "60"]) == 0
    assert capsys.readouterr().out.strip() == "37"


def test_beta(capsys):
    assert main(["beta", "--slsl", "60"]) == 0
    assert capsys.readouterr().out.strip() == "5.653260"


def test_kaiser_prints_taps(capsys):
    assert main(["kaiser", "--taps", "25", "--cutoff", "0.25", "--slsl", "60",
                 "--isi", "4", "3"]) == 0
    taps = np.array([float(x) for x in capsys.readouterr().out.split()])
    np.testing.assert_allclose(taps, fir_kaiser_window(25, 0.25, 60.0, 0.0), rtol=1e-15)


def test_kaiser_estimates_length(capsys):
    assert main(["kaiser", "--bandwidth", "0.1", "--cutoff", "0.25"]) == 0
    assert len(capsys.readouterr().out.split()) == 37


def test_doppler_prints_taps(capsys):
    assert main(["doppler", "--taps", "11", "--fd", "0.05", "--rice-k", "2", "--theta", "0.3"]) == 0
    assert len(capsys.readouterr().out.split()) == 11


def test_invalid_offset_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["kaiser", "--taps", "5", "--cutoff", "0.25", "--mu", "0.6"])
    assert exc.value.code == 2
    assert "out of range" in capsys.readouterr().err


def test_isi_length_mismatch_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["kaiser", "--taps", "24", "--cutoff", "0.25", "--isi", "4", "3"])
    assert exc.value.code == 2
