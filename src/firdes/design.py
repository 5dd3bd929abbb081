#!/usr/bin/env python3
"""
Closed-form FIR Designer – Kaiser windowed sinc & Doppler fading
================================================================

Length and window-shape estimation plus two coefficient designers:

- estimate_req_filter_len: tap count from transition bandwidth and
  sidelobe suppression level
- kaiser_beta_slsl: Kaiser's empirical beta for a sidelobe level
- fir_kaiser_window: Kaiser-windowed sinc lowpass with fractional delay
- fir_design_doppler: Bessel (diffuse) + Rice (line-of-sight) fading filter

Designers validate every parameter before touching the output buffer, so a
failed call leaves ``out`` exactly as it was.
"""

from __future__ import annotations
import logging
import math
from typing import Optional, Union, Sequence

import numpy as np
from scipy.special import j0 as bessel_j0

from . import config
from .config import KaiserFilterSpec, DopplerFilterSpec
from .errors import DomainError
from .windows import kaiser_window

log = logging.getLogger(__name__)


# ───────────────────────── helpers ────────────────────────── #

def _check_length(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise DomainError(f"filter length must be an integer (got {n!r})")
    if n <= 0:
        raise DomainError("filter length must be greater than zero")
    return int(n)


def _check_out(out: Optional[Sequence[float]], n: int) -> None:
    if out is not None and len(out) != n:
        raise DomainError(f"output buffer holds {len(out)} values, expected {n}")


def _emit(h: np.ndarray, out: Optional[Sequence[float]]) -> np.ndarray:
    if out is not None:
        out[:] = h
    return h


# ─────────────────────── estimators ─────────────────────── #

def estimate_req_filter_len(b: float, slsl: float) -> int:
    """
    Estimate the required filter length.

    Parameters
    ----------
    b : float
        Transition bandwidth, 0 < b <= 0.5
    slsl : float
        Sidelobe suppression level [dB], > 0

    Returns
    -------
    int
        Estimated number of taps
    """
    if not 0.0 < b <= 0.5:
        raise DomainError(f"invalid bandwidth : {b}")
    if not slsl > 0.0:
        raise DomainError(f"invalid sidelobe level : {slsl}")

    if slsl < config.SLSL_MIN:
        return config.DEGENERATE_FILTER_LEN

    # round half away from zero; the quotient is non-negative here
    h_len = int(math.floor((slsl - config.SLSL_MIN) / (config.LENGTH_SLOPE * b) + 0.5))
    log.debug("Estimated %d taps for b=%.4f, slsl=%.1f dB", h_len, b, slsl)
    return h_len


def kaiser_beta_slsl(slsl: float) -> float:
    """
    Kaiser window beta for a sidelobe suppression level.

    Uses Kaiser's piecewise empirical formula (see P.P. Vaidyanathan,
    "Multirate Systems and Filter Banks"). Only |slsl| matters.
    """
    a = abs(slsl)
    if a > config.KAISER_SLSL_HIGH:
        return config.KAISER_HIGH_GAIN * (a - config.KAISER_HIGH_OFFSET)
    elif a > config.KAISER_SLSL_LOW:
        x = a - config.KAISER_SLSL_LOW
        return config.KAISER_MID_GAIN * x ** config.KAISER_MID_EXPONENT + config.KAISER_MID_SLOPE * x
    else:
        return 0.0


# ─────────────────────── design routines ─────────────────────── #

def fir_kaiser_window(n: int,
                      fc: float,
                      slsl: float,
                      mu: float = 0.0,
                      out: Optional[Sequence[float]] = None) -> np.ndarray:
    """
    Design a lowpass FIR using a Kaiser window.

    Parameters
    ----------
    n : int
        Filter length
    fc : float
        Cutoff frequency in [0, 1]
    slsl : float
        Sidelobe suppression level (dB attenuation)
    mu : float
        Fractional sample offset in [-0.5, 0.5]
    out : sequence, optional
        Caller-owned buffer of length n, filled on success

    Returns
    -------
    np.ndarray
        The n filter coefficients
    """
    if not -0.5 <= mu <= 0.5:
        raise DomainError(f"mu ({mu:12.4e}) out of range [-0.5,0.5]")
    if not 0.0 <= fc <= 1.0:
        raise DomainError(f"cutoff frequency ({fc:12.4e}) out of range [0.0,1.0]")
    n = _check_length(n)
    _check_out(out, n)

    beta = kaiser_beta_slsl(slsl)
    log.debug("Kaiser design: n=%d fc=%.4f slsl=%.1f dB mu=%.3f -> beta=%.4f",
              n, fc, slsl, mu, beta)

    t = np.arange(n, dtype=np.float64) - (n - 1) / 2 + mu
    h = np.sinc(fc * t) * kaiser_window(n, beta, mu)
    return _emit(h, out)


def fir_design_doppler(n: int,
                       fd: float,
                       K: float,
                       theta: float,
                       out: Optional[Sequence[float]] = None,
                       beta: float = config.DOPPLER_WINDOW_BETA) -> np.ndarray:
    """
    Design a Doppler fading filter.

    Parameters
    ----------
    n : int
        Filter length
    fd : float
        Normalized Doppler frequency (0 < fd < 0.5)
    K : float
        Rice fading factor (K >= 0)
    theta : float
        Line-of-sight component angle of arrival
    out : sequence, optional
        Caller-owned buffer of length n, filled on success
    beta : float
        Kaiser window shape parameter

    Returns
    -------
    np.ndarray
        The n filter coefficients
    """
    n = _check_length(n)
    _check_out(out, n)
    if K == -1:
        raise DomainError("Rice factor K=-1 makes K/(K+1) undefined")

    # Out-of-range values are evaluated as given
    if not 0.0 < fd < 0.5:
        log.warning("Doppler frequency %.4f outside (0, 0.5)", fd)
    if K < 0:
        log.warning("Rice factor %.4f is negative", K)

    t = np.arange(n, dtype=np.float64) - (n - 1) / 2

    # Bessel
    J = config.DOPPLER_GAIN * bessel_j0(np.abs(2 * np.pi * fd * t))

    # Rice-K component
    r = config.DOPPLER_GAIN * K / (K + 1) * np.cos(2 * np.pi * fd * t * np.cos(theta))

    w = kaiser_window(n, beta, 0.0)

    h = (J + r) * w
    return _emit(h, out)


def design_from_spec(spec: Union[KaiserFilterSpec, DopplerFilterSpec],
                     out: Optional[Sequence[float]] = None) -> np.ndarray:
    """Design the filter described by a spec dataclass."""
    if isinstance(spec, KaiserFilterSpec):
        n = spec.n
        if n is None:
            if spec.bandwidth is None:
                raise DomainError("Kaiser spec needs either a length or a transition bandwidth")
            n = estimate_req_filter_len(spec.bandwidth, spec.slsl)
            log.info("Estimated length %d taps from bandwidth %.4f", n, spec.bandwidth)
        return fir_kaiser_window(n, spec.fc, spec.slsl, spec.mu, out=out)

    if isinstance(spec, DopplerFilterSpec):
        return fir_design_doppler(spec.n, spec.fd, spec.K, spec.theta, out=out, beta=spec.beta)

    raise TypeError(f"unsupported filter spec: {type(spec).__name__}")
