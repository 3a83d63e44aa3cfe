"""Second-order recursive filter section."""

from __future__ import annotations

from typing import Sequence

from .base import BaseFilter


class Biquad(BaseFilter):
    """Direct form I biquad.

    ``y[n] = b0*x[n] + b1*x[n-1] + b2*x[n-2] - a1*y[n-1] - a2*y[n-2]``

    Coefficients are fixed at construction; the four delay values change on
    every processed sample.
    """

    name = "biquad"

    def __init__(self, b0: float, b1: float, b2: float, a1: float, a2: float) -> None:
        self._b0 = float(b0)
        self._b1 = float(b1)
        self._b2 = float(b2)
        self._a1 = float(a1)
        self._a2 = float(a2)
        self.reset()

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[float]) -> "Biquad":
        b0, b1, b2, a1, a2 = coefficients
        return cls(b0, b1, b2, a1, a2)

    @property
    def coefficients(self) -> tuple[float, float, float, float, float]:
        return (self._b0, self._b1, self._b2, self._a1, self._a2)

    @property
    def state(self) -> tuple[float, float, float, float]:
        """``(x[n-1], x[n-2], y[n-1], y[n-2])``"""
        return (self._x1, self._x2, self._y1, self._y2)

    def reset(self) -> None:
        self._x1 = self._x2 = 0.0
        self._y1 = self._y2 = 0.0

    def process_sample(self, sample: float) -> float:
        y = (
            self._b0 * sample
            + self._b1 * self._x1
            + self._b2 * self._x2
            - self._a1 * self._y1
            - self._a2 * self._y2
        )
        self._x2, self._x1 = self._x1, sample
        self._y2, self._y1 = self._y1, y
        return y

    def describe(self) -> dict[str, object]:
        return {"name": self.name, "coefficients": list(self.coefficients)}

    def __repr__(self) -> str:
        b0, b1, b2, a1, a2 = self.coefficients
        return f"Biquad(b0={b0!r}, b1={b1!r}, b2={b2!r}, a1={a1!r}, a2={a2!r})"
