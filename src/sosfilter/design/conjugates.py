"""Conjugate-pair validation for root sets."""

from __future__ import annotations

import logging
from typing import Iterable

from ..errors import ConjugatePairMismatch
from .zpk import TOLERANCE

logger = logging.getLogger(__name__)


def cplxpair(values: Iterable[complex], tol: float = TOLERANCE) -> tuple[list[complex], list[complex]]:
    """Split ``values`` into reals and one representative per conjugate pair.

    Values are sorted by real then imaginary part. Anything within ``tol`` of
    the real axis is treated as real (its imaginary part is dropped). For every
    element with positive imaginary part some element with negative imaginary
    part must lie within ``tol`` of its conjugate; the first such element
    found is accepted, no globally optimal matching is attempted.

    Returns ``(reals, positives)``. Raises ``ConjugatePairMismatch`` when the
    set is not closed under conjugation.
    """

    ordered = sorted((complex(v) for v in values), key=lambda c: (c.real, c.imag))

    reals: list[complex] = []
    positives: list[complex] = []
    negatives: list[complex] = []
    for value in ordered:
        if abs(value.imag) < tol:
            reals.append(complex(value.real))
        elif value.imag > 0:
            positives.append(value)
        else:
            negatives.append(value)

    if len(positives) != len(negatives):
        logger.debug("cplxpair: %d positive vs %d negative imaginary values", len(positives), len(negatives))
        raise ConjugatePairMismatch()

    for value in positives:
        if not any(abs(value - other.conjugate()) < tol for other in negatives):
            logger.debug("cplxpair: no conjugate found for %s", value)
            raise ConjugatePairMismatch(f"Complex value {value} has no matching conjugate")

    return reals, positives
