#!/usr/bin/env python3
"""
Formula constants and dataclass filter specifications.

The constants are the fixed numbers of the closed-form design formulas.
They are exposed so callers designing other filter families can override
them per call instead of editing the formulas.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


# ───────────────────── length estimation ───────────────────── #

# Below this attenuation (dB) the empirical length formula is invalid
SLSL_MIN = 8.0
# Length returned for attenuation below SLSL_MIN
DEGENERATE_FILTER_LEN = 2
# Denominator slope: N ≈ (slsl - 8) / (14 * b)
LENGTH_SLOPE = 14.0

# ──────────────────────── Kaiser beta ──────────────────────── #

KAISER_SLSL_HIGH = 50.0
KAISER_SLSL_LOW = 21.0
KAISER_HIGH_GAIN = 0.1102
KAISER_HIGH_OFFSET = 8.7
KAISER_MID_GAIN = 0.5842
KAISER_MID_EXPONENT = 0.4
KAISER_MID_SLOPE = 0.07886

# ─────────────────────── Doppler filter ────────────────────── #

# Kaiser shape used by the Doppler designer, independent of any sidelobe spec
DOPPLER_WINDOW_BETA = 4.0
# Gain applied to both the Bessel and the line-of-sight component
DOPPLER_GAIN = 1.5


# ───────────────────────── Data structures ────────────────────────── #

@dataclass
class KaiserFilterSpec:
    """Kaiser-windowed sinc lowpass design.

    When ``n`` is None the length is estimated from ``bandwidth``.
    """
    fc: float
    slsl: float
    mu: float = 0.0
    n: Optional[int] = None
    bandwidth: Optional[float] = None  # transition bandwidth, (0, 0.5]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'KaiserFilterSpec':
        return cls(**d)


@dataclass
class DopplerFilterSpec:
    """Doppler/Rice fading filter design."""
    n: int
    fd: float  # normalized Doppler frequency
    K: float  # Rice factor
    theta: float  # line-of-sight angle of arrival [rad]
    beta: float = DOPPLER_WINDOW_BETA

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'DopplerFilterSpec':
        return cls(**d)
