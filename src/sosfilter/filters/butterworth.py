"""Butterworth IIR filter design and real-time cascade execution."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

import numpy as np

from ..design import ZPK, Coefficients, analog_lowpass, bilinear_transform, lp2bp, lp2bs, lp2hp, lp2lp, to_sos_array, zpk2sos
from ..errors import FilterDesignError
from ..logging_utils import filter_fields, log_event
from .base import FilterChain
from .biquad import Biquad

logger = logging.getLogger(__name__)


class BandType(str, Enum):
    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    BANDSTOP = "bandstop"


def _as_frequencies(critical_frequencies: float | Sequence[float]) -> tuple[float, ...]:
    if np.ndim(critical_frequencies) == 0:
        return (float(critical_frequencies),)  # type: ignore[arg-type]
    return tuple(float(f) for f in critical_frequencies)  # type: ignore[union-attr]


def design_butterworth(
    order: int,
    critical_frequencies: float | Sequence[float],
    band_type: BandType | str,
    sampling_frequency: float,
) -> ZPK:
    """Return the digital ZPK of a Butterworth filter.

    Critical frequencies are angular and used as given (no pre-warping). Band
    filters take ``(lower, upper)`` and are centred on their geometric mean.
    Inputs are not checked for physical sense.
    """

    band = BandType(band_type)
    freqs = _as_frequencies(critical_frequencies)
    prototype = analog_lowpass(order)

    if band is BandType.LOWPASS:
        analog = lp2lp(prototype, freqs[0])
    elif band is BandType.HIGHPASS:
        analog = lp2hp(prototype, freqs[0])
    else:
        lower, upper = freqs[0], freqs[1]
        center = math.sqrt(lower * upper)
        width = upper - lower
        if band is BandType.BANDPASS:
            analog = lp2bp(prototype, center, width)
        else:
            analog = lp2bs(prototype, center, width)

    return bilinear_transform(analog, sampling_frequency)


class ButterworthCascade(FilterChain):
    """Serial chain of biquads implementing a digital Butterworth filter.

    The first stage carries the overall gain; the stage whose poles sit
    closest to the unit circle runs last. Each instance owns its delay-line
    state, so concurrent users need one cascade each.
    """

    name = "butterworth"

    def __init__(
        self,
        order: int,
        critical_frequencies: float | Sequence[float],
        band_type: BandType | str = BandType.LOWPASS,
        sampling_frequency: float = 1.0,
    ) -> None:
        self._order = int(order)
        self._critical_frequencies = _as_frequencies(critical_frequencies)
        self._band_type = BandType(band_type)
        self._sampling_frequency = float(sampling_frequency)

        zpk = design_butterworth(self._order, self._critical_frequencies, self._band_type, self._sampling_frequency)
        super().__init__(Biquad.from_coefficients(c) for c in zpk2sos(zpk))

        log_event(logger, "cascade_designed", **filter_fields(self))

    @property
    def order(self) -> int:
        return self._order

    @property
    def critical_frequencies(self) -> tuple[float, ...]:
        return self._critical_frequencies

    @property
    def band_type(self) -> BandType:
        return self._band_type

    @property
    def sampling_frequency(self) -> float:
        return self._sampling_frequency

    @property
    def sections(self) -> list[Biquad]:
        return self.stages  # type: ignore[return-value]

    @property
    def coefficients(self) -> list[Coefficients]:
        return [section.coefficients for section in self.sections]

    @property
    def sos(self) -> np.ndarray:
        """Sections as rows of ``[b0, b1, b2, 1, a1, a2]``."""

        return to_sos_array(self.coefficients)

    def describe(self) -> dict[str, object]:
        return {
            "name": self.name,
            "order": self._order,
            "band_type": self._band_type.value,
            "critical_frequencies": list(self._critical_frequencies),
            "sampling_frequency": self._sampling_frequency,
            "coefficients": [list(c) for c in self.coefficients],
        }


@dataclass
class DesignResult:
    """Outcome of ``try_design``: either sections or the error that stopped the design."""

    sections: List[Coefficients] = field(default_factory=list)
    error: FilterDesignError | None = None

    def __post_init__(self) -> None:
        if (self.error is None) == (not self.sections):
            raise ValueError("DesignResult needs either sections or an error, not both or neither")

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, object]:
        return {
            "ok": self.ok,
            "sections": [list(s) for s in self.sections],
            "error": None if self.error is None else {"kind": self.error.kind.value, "message": str(self.error)},
        }


def try_design(
    order: int,
    critical_frequencies: float | Sequence[float],
    band_type: BandType | str,
    sampling_frequency: float,
) -> DesignResult:
    """Design a Butterworth filter and report failure as a value instead of raising."""

    try:
        zpk = design_butterworth(order, critical_frequencies, band_type, sampling_frequency)
        return DesignResult(sections=zpk2sos(zpk))
    except FilterDesignError as exc:
        log_event(
            logger,
            "design_failed",
            level=logging.WARNING,
            kind=exc.kind.value,
            order=order,
            band_type=BandType(band_type).value,
            message=str(exc),
        )
        return DesignResult(error=exc)
