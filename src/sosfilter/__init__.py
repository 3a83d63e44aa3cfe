"""Butterworth IIR filter design as cascaded second-order sections."""

from importlib import metadata

from .analysis import evaluate_sections, evaluate_zpk, frequency_response, impulse_response, zero_phase_filter
from .config import FilterConfig
from .design import (
    ZPK,
    analog_lowpass,
    bilinear_transform,
    cplxpair,
    lp2bp,
    lp2bs,
    lp2hp,
    lp2lp,
    zpk2sos,
    zpk2tf,
)
from .errors import ConjugatePairMismatch, DesignErrorKind, FilterDesignError, NonRealCoefficients
from .filters import BandType, Biquad, ButterworthCascade, DesignResult, design_butterworth, try_design
from .logging_utils import configure_logging, log_event

try:
    __version__ = metadata.version("sosfilter")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "ZPK",
    "analog_lowpass",
    "lp2lp",
    "lp2hp",
    "lp2bp",
    "lp2bs",
    "bilinear_transform",
    "cplxpair",
    "zpk2tf",
    "zpk2sos",
    "BandType",
    "Biquad",
    "ButterworthCascade",
    "DesignResult",
    "design_butterworth",
    "try_design",
    "FilterConfig",
    "FilterDesignError",
    "DesignErrorKind",
    "ConjugatePairMismatch",
    "NonRealCoefficients",
    "evaluate_zpk",
    "evaluate_sections",
    "frequency_response",
    "impulse_response",
    "zero_phase_filter",
    "configure_logging",
    "log_event",
    "__version__",
]
