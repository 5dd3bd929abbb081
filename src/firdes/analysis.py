#!/usr/bin/env python3
"""
Filter self-analysis: lagged autocorrelation and inter-symbol interference.
"""

from __future__ import annotations
import logging
from typing import NamedTuple, Optional, Sequence

import numpy as np

from .errors import DomainError, DegenerateFilterError

log = logging.getLogger(__name__)


class IsiResult(NamedTuple):
    """Mean-squared and maximum inter-symbol interference."""
    mse: float
    max: float


def _check_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DomainError(f"{name} must be an integer (got {value!r})")
    return int(value)


def filter_autocorr(h: Sequence[float], h_len: Optional[int] = None, lag: int = 0) -> float:
    """
    Compute auto-correlation of filter at a specific lag.

    Parameters
    ----------
    h : sequence of float
        Filter coefficients
    h_len : int, optional
        Number of coefficients to use (defaults to len(h)). Taps past the
        end of ``h`` count as zero.
    lag : int
        Auto-correlation lag in samples, may be negative

    Returns
    -------
    float
        sum(h[i] * h[i-lag]) for i in [lag, h_len)
    """
    h = np.asarray(h, dtype=np.float64)
    if h_len is None:
        h_len = len(h)
    h_len = min(max(_check_int("h_len", h_len), 0), len(h))

    # auto-correlation is even symmetric
    lag = abs(_check_int("lag", lag))

    if lag >= h_len:
        return 0.0

    return float(np.dot(h[lag:h_len], h[:h_len - lag]))


def filter_isi(h: Sequence[float], k: int, m: int) -> IsiResult:
    """
    Compute inter-symbol interference, both MSE and maximum.

    Parameters
    ----------
    h : sequence of float
        Filter coefficients, length 2*k*m+1
    k : int
        Over-sampling rate (samples/symbol)
    m : int
        Filter delay (symbols)

    Returns
    -------
    IsiResult
        (mse, max) of the normalized symbol-spaced autocorrelation
    """
    k = _check_int("over-sampling rate k", k)
    m = _check_int("filter delay m", m)
    if k < 1:
        raise DomainError(f"over-sampling rate must be at least 1 (k={k})")
    if m < 1:
        raise DomainError(f"filter delay must be at least 1 symbol (m={m})")

    h = np.asarray(h, dtype=np.float64)
    h_len = 2 * k * m + 1
    if len(h) != h_len:
        raise DomainError(f"filter has {len(h)} taps, expected 2*k*m+1 = {h_len}")

    rxx0 = filter_autocorr(h, h_len, 0)
    if rxx0 == 0.0:
        raise DegenerateFilterError("filter has zero energy; ISI is undefined")

    e = np.abs([filter_autocorr(h, h_len, i * k) / rxx0 for i in range(1, 2 * m + 1)])

    isi_mse = float(np.sum(e * e) / (2 * m))
    isi_max = float(np.max(e))
    log.debug("ISI over %d symbols (k=%d): mse=%.3e max=%.3e", 2 * m, k, isi_mse, isi_max)
    return IsiResult(isi_mse, isi_max)
