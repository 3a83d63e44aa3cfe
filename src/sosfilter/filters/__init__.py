"""Stateful sample-by-sample filters."""

from .base import BaseFilter, FilterChain
from .biquad import Biquad
from .butterworth import BandType, ButterworthCascade, DesignResult, design_butterworth, try_design

__all__ = [
    "BaseFilter",
    "FilterChain",
    "Biquad",
    "BandType",
    "ButterworthCascade",
    "DesignResult",
    "design_butterworth",
    "try_design",
]
