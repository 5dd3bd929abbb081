"""
Error types raised by the design and analysis routines.
"""


class FilterDesignError(ValueError):
    """Base class for invalid filter design or analysis requests."""


class DomainError(FilterDesignError):
    """A design parameter lies outside its validity domain."""


class DegenerateFilterError(FilterDesignError):
    """Coefficients are numerically degenerate (e.g. zero energy)."""
