"""
firdes - Closed-form FIR coefficient design and filter analysis.
"""

from .analysis import IsiResult, filter_autocorr, filter_isi
from .config import KaiserFilterSpec, DopplerFilterSpec
from .design import (
    estimate_req_filter_len,
    kaiser_beta_slsl,
    fir_kaiser_window,
    fir_design_doppler,
    design_from_spec,
)
from .errors import FilterDesignError, DomainError, DegenerateFilterError
from .verification import filter_response
from .windows import kaiser, kaiser_window

__version__ = "0.1.0"
__all__ = [
    "estimate_req_filter_len",
    "kaiser_beta_slsl",
    "fir_kaiser_window",
    "fir_design_doppler",
    "design_from_spec",
    "filter_autocorr",
    "filter_isi",
    "IsiResult",
    "KaiserFilterSpec",
    "DopplerFilterSpec",
    "FilterDesignError",
    "DomainError",
    "DegenerateFilterError",
    "filter_response",
    "kaiser",
    "kaiser_window",
]
