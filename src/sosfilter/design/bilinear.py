"""Analog to digital mapping via Tustin's method."""

from __future__ import annotations

import numpy as np

from .zpk import ZPK


def bilinear_transform(zpk: ZPK, sampling_frequency: float) -> ZPK:
    """Map an analog ZPK to the z-plane.

    Zeros at infinity are placed at Nyquist (z = -1). No pre-warping is
    applied; the caller supplies analog frequencies already adjusted for the
    desired digital response.
    """

    zeros, poles, gain = zpk.as_arrays()
    degree = zpk.degree
    fs2 = 2.0 * sampling_frequency

    digital_zeros = np.concatenate(((fs2 + zeros) / (fs2 - zeros), -np.ones(max(degree, 0), dtype=complex)))
    digital_poles = (fs2 + poles) / (fs2 - poles)
    digital_gain = gain * float(np.real(np.prod(fs2 - zeros) / np.prod(fs2 - poles)))
    return ZPK.create(zeros=digital_zeros, poles=digital_poles, gain=digital_gain)
