"""Failure kinds raised while designing a filter."""

from __future__ import annotations

from enum import Enum


class DesignErrorKind(str, Enum):
    CONJUGATE_PAIR_MISMATCH = "conjugate_pair_mismatch"
    NON_REAL_COEFFICIENTS = "non_real_coefficients"


class FilterDesignError(Exception):
    """Base exception for filter design errors.

    Every design failure is a deterministic function of its input, so callers
    should not retry. ``kind`` identifies which failure occurred.
    """

    kind: DesignErrorKind

    def __init__(self, message: str, kind: DesignErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class ConjugatePairMismatch(FilterDesignError, ValueError):
    """Raised when a complex value has no matching conjugate in its set."""

    def __init__(self, message: str = "Array contains complex value with no matching conjugate") -> None:
        super().__init__(message, DesignErrorKind.CONJUGATE_PAIR_MISMATCH)


class NonRealCoefficients(FilterDesignError, ArithmeticError):
    """Raised when a section's polynomial coefficients come out complex.

    This indicates a defect in the pairing step; valid Butterworth designs
    never trigger it.
    """

    def __init__(self, message: str = "Filter coefficients are complex") -> None:
        super().__init__(message, DesignErrorKind.NON_REAL_COEFFICIENTS)
