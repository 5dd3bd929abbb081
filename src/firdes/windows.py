#!/usr/bin/env python3
"""
Kaiser window with fractional sample offset.

The window is centred on (n-1)/2 - mu and normalised by n rather than n-1,
so a taper shifted by |mu| <= 0.5 never leaves the support of I0.
"""

from __future__ import annotations

import numpy as np
from scipy.special import i0 as bessel_i0

from .errors import DomainError


def _validate(n: int, mu: float) -> None:
    if n <= 0:
        raise DomainError(f"window length must be greater than zero (n={n})")
    if not -0.5 <= mu <= 0.5:
        raise DomainError(f"mu ({mu:12.4e}) out of range [-0.5,0.5]")


def _weights(i, n: int, beta: float, mu: float):
    t = i - (n - 1) / 2 + mu
    r = 2 * t / n
    # Rounding can push r*r a hair above 1 at the edges
    arg = np.sqrt(np.clip(1 - r * r, 0.0, None))
    return bessel_i0(beta * arg) / bessel_i0(beta)


def kaiser_window(n: int, beta: float, mu: float = 0.0) -> np.ndarray:
    """
    Return the full n-point Kaiser window.

    Parameters
    ----------
    n : int
        Window length
    beta : float
        Shape parameter
    mu : float
        Fractional sample offset in [-0.5, 0.5]

    Returns
    -------
    np.ndarray
        Window weights, peak value 1 at t = 0
    """
    _validate(n, mu)
    return _weights(np.arange(n, dtype=np.float64), n, beta, mu)


def kaiser(i: int, n: int, beta: float, mu: float = 0.0) -> float:
    """Kaiser window weight of sample ``i`` of an ``n``-point window."""
    _validate(n, mu)
    if not 0 <= i < n:
        raise DomainError(f"sample index {i} outside window [0,{n})")
    return float(_weights(i, n, beta, mu))
