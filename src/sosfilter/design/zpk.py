"""Zero-pole-gain representation shared by every design stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, MutableSequence, Sequence

import numpy as np

TOLERANCE = 100 * np.finfo(float).eps


@dataclass(frozen=True)
class ZPK:
    """Transfer function as roots and a leading scale factor.

    Stages never mutate a ZPK; each transform returns a new value.
    """

    zeros: tuple[complex, ...] = ()
    poles: tuple[complex, ...] = ()
    gain: float = 1.0

    @classmethod
    def create(cls, zeros: Iterable[complex] = (), poles: Iterable[complex] = (), gain: float = 1.0) -> "ZPK":
        return cls(
            zeros=tuple(complex(z) for z in zeros),
            poles=tuple(complex(p) for p in poles),
            gain=float(gain),
        )

    @property
    def degree(self) -> int:
        """Number of zeros at infinity (poles minus finite zeros)."""
        return len(self.poles) - len(self.zeros)

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray, float]:
        return (
            np.asarray(self.zeros, dtype=complex),
            np.asarray(self.poles, dtype=complex),
            self.gain,
        )


def is_real(value: complex, tol: float = TOLERANCE) -> bool:
    return abs(complex(value).imag) < tol


def count_real(values: Sequence[complex]) -> int:
    return sum(1 for v in values if is_real(v))


def pop_nearest(values: MutableSequence[complex], target: complex, *, real: bool) -> complex:
    """Remove and return the real (or complex) element of ``values`` closest to ``target``.

    Ties keep the earliest element. Raises ``ValueError`` when no element of the
    requested kind remains.
    """

    best_idx = -1
    best_dist = float("inf")
    for idx, value in enumerate(values):
        if is_real(value) != real:
            continue
        dist = abs(value - target)
        if dist < best_dist:
            best_idx, best_dist = idx, dist
    if best_idx < 0:
        kind = "real" if real else "complex"
        raise ValueError(f"No {kind} value left to pair with {target}")
    return values.pop(best_idx)
