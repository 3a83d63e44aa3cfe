"""Decomposition of a digital ZPK system into second-order sections.

The pairing algorithm is designed to minimize errors due to finite numerical
precision. Poles are taken one at a time starting with the one closest to the
unit circle, and each is matched with the nearest zero:

1. If the pole is real and no other real pole remains, pair it with the
   closest real zero and leave it as a first-order section.
2. Otherwise pair it with the closest remaining zero. When the pole is complex
   and exactly one real zero remains, the closest *complex* zero is used
   instead so the real zero is kept for the eventual first-order section.
3. Complete the section: a complex pole or zero brings its conjugate; a real
   pole with a complex zero takes the real pole closest to that zero; a real
   pole with a real zero takes the next real pole closest to the unit circle
   and then the real zero closest to it.

Sections are emitted in reverse build order, so the best-conditioned section
comes first and carries the whole system gain while the pole pair nearest the
unit circle is evaluated last.

These steps only apply to digital filters; the coefficients are not correct
for analog systems.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..errors import NonRealCoefficients
from .conjugates import cplxpair
from .zpk import ZPK, count_real, is_real, pop_nearest

logger = logging.getLogger(__name__)

Coefficients = Tuple[float, float, float, float, float]


def zpk2tf(zeros: Sequence[complex], poles: Sequence[complex], gain: float) -> Coefficients:
    """Expand a pole pair and zero pair into ``(b0, b1, b2, a1, a2)``.

    Raises ``NonRealCoefficients`` when any coefficient has an imaginary part,
    which means the roots were not conjugate-closed.
    """

    z1, z2 = zeros
    p1, p2 = poles
    a = (-(p1 + p2), p1 * p2)
    b = (complex(gain), gain * -(z1 + z2), gain * z1 * z2)
    for coeff in (*a, *b):
        if not is_real(coeff):
            raise NonRealCoefficients(f"Filter coefficients are complex: b={b}, a={a}")
    return (b[0].real, b[1].real, b[2].real, a[0].real, a[1].real)


def _equalize(zeros: List[complex], poles: List[complex]) -> int:
    """Pad with roots at the origin until both lists have an even, equal length."""

    if len(zeros) > len(poles):
        poles.extend([0j] * (len(zeros) - len(poles)))
    elif len(poles) > len(zeros):
        zeros.extend([0j] * (len(poles) - len(zeros)))
    n_sections = (len(poles) + 1) // 2
    if len(poles) % 2 == 1:
        poles.append(0j)
        zeros.append(0j)
    return n_sections


def _paired(values: Sequence[complex]) -> List[complex]:
    # only the positive-imaginary half of each conjugate pair is kept
    reals, positives = cplxpair(values)
    return reals + positives


def _pop_closest(values: List[complex], target: complex) -> complex:
    idx = min(range(len(values)), key=lambda i: abs(target - values[i]))
    return values.pop(idx)


def build_section(poles: List[complex], zeros: List[complex]) -> tuple[tuple[complex, complex], tuple[complex, complex]]:
    """Pop the worst remaining pole and the roots that complete its section.

    ``poles`` must be ordered worst-conditioned first and both lists hold one
    representative per conjugate pair. Both lists are consumed in place.
    Returns ``((p1, p2), (z1, z2))``.
    """

    p1 = poles.pop(0)

    if is_real(p1) and count_real(poles) == 0:
        z1 = pop_nearest(zeros, p1, real=True)
        logger.debug("first-order section: pole=%s zero=%s", p1, z1)
        return (p1, 0j), (z1, 0j)

    if not is_real(p1) and count_real(zeros) == 1:
        z1 = pop_nearest(zeros, p1, real=False)
    else:
        z1 = _pop_closest(zeros, p1)

    if not is_real(p1):
        p2 = p1.conjugate()
        if not is_real(z1):
            z2 = z1.conjugate()
        else:
            z2 = pop_nearest(zeros, p1, real=True)
    elif not is_real(z1):
        z2 = z1.conjugate()
        p2 = pop_nearest(poles, z1, real=True)
    else:
        p2_idx = next(i for i, p in enumerate(poles) if is_real(p))
        p2 = poles.pop(p2_idx)
        z2 = pop_nearest(zeros, p2, real=True)

    logger.debug("section: poles=(%s, %s) zeros=(%s, %s)", p1, p2, z1, z2)
    return (p1, p2), (z1, z2)


def zpk2sos(zpk: ZPK) -> List[Coefficients]:
    """Return the biquad coefficients of ``zpk`` as an ordered section list.

    The zero and pole counts may differ; missing roots are placed at the
    origin. Only the first returned section carries ``zpk.gain``.

    Raises ``ConjugatePairMismatch`` when poles or zeros are not
    conjugate-closed.
    """

    zeros = list(zpk.zeros)
    poles = list(zpk.poles)
    n_sections = _equalize(zeros, poles)

    poles = _paired(poles)
    zeros = _paired(zeros)

    # worst-conditioned (closest to the unit circle) first
    poles.sort(key=lambda p: abs(1.0 - abs(p)))

    built = [build_section(poles, zeros) for _ in range(n_sections)]
    if poles or zeros:
        raise RuntimeError(f"Unpaired roots after decomposition: poles={poles} zeros={zeros}")

    logger.debug("zpk2sos: %d section(s)", n_sections)
    sections: List[Coefficients] = []
    for idx, (section_poles, section_zeros) in enumerate(reversed(built)):
        gain = zpk.gain if idx == 0 else 1.0
        sections.append(zpk2tf(section_zeros, section_poles, gain))
    return sections


def to_sos_array(coefficients: Iterable[Sequence[float]]) -> np.ndarray:
    """Rows of ``(b0, b1, b2, a1, a2)`` as an ``(n, 6)`` scipy-style sos array."""

    rows = [(b0, b1, b2, 1.0, a1, a2) for b0, b1, b2, a1, a2 in coefficients]
    return np.asarray(rows, dtype=float).reshape(-1, 6)
