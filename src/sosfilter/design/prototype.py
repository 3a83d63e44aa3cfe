"""Analog Butterworth lowpass prototype."""

from __future__ import annotations

import numpy as np

from .zpk import ZPK


def analog_lowpass(order: int) -> ZPK:
    """Return the unity-cutoff analog Butterworth prototype of ``order``.

    The prototype has no zeros, unit gain and ``order`` poles spread evenly on
    the left half of the unit circle. Odd orders include a single pole at -1.
    """

    m = np.arange(-order + 1, order, 2)
    poles = -np.exp(1j * np.pi * m / (2.0 * order))
    return ZPK.create(poles=poles)
