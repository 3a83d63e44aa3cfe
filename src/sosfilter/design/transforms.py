"""Lowpass-prototype frequency transformations.

Each function takes an analog lowpass ZPK with unity cutoff and returns a new
analog ZPK of the requested band type. Frequencies are angular (rad/s) and are
used as given: no pre-warping happens here.
"""

from __future__ import annotations

import numpy as np

from .zpk import ZPK


def _inversion_gain(zeros: np.ndarray, poles: np.ndarray) -> float:
    return float(np.real(np.prod(-zeros) / np.prod(-poles)))


def _shift_to_band(roots: np.ndarray, center: float) -> np.ndarray:
    # both branches: every "+" root first, then every "-" root
    disc = roots**2 - center**2
    # a -0.0 imaginary part would put np.sqrt on the lower branch
    disc = disc.real + 1j * (disc.imag + 0.0)
    offset = np.sqrt(disc)
    return np.concatenate((roots + offset, roots - offset))


def lp2lp(zpk: ZPK, cutoff: float) -> ZPK:
    """Move the cutoff of a lowpass prototype to ``cutoff``."""

    zeros, poles, gain = zpk.as_arrays()
    degree = zpk.degree
    return ZPK.create(
        zeros=cutoff * zeros,
        poles=cutoff * poles,
        gain=gain * cutoff**degree,
    )


def lp2hp(zpk: ZPK, cutoff: float) -> ZPK:
    """Turn a lowpass prototype into a highpass with cutoff ``cutoff``."""

    zeros, poles, gain = zpk.as_arrays()
    degree = zpk.degree

    # zeros at infinity land on the origin after inversion
    hp_zeros = np.concatenate((cutoff / zeros, np.zeros(max(degree, 0), dtype=complex)))
    return ZPK.create(
        zeros=hp_zeros,
        poles=cutoff / poles,
        gain=gain * _inversion_gain(zeros, poles),
    )


def lp2bp(zpk: ZPK, center: float, width: float) -> ZPK:
    """Turn a lowpass prototype into a bandpass centred on ``center`` with bandwidth ``width``."""

    zeros, poles, gain = zpk.as_arrays()
    degree = zpk.degree

    bp_zeros = _shift_to_band(zeros * width / 2, center)
    bp_poles = _shift_to_band(poles * width / 2, center)
    bp_zeros = np.concatenate((bp_zeros, np.zeros(max(degree, 0), dtype=complex)))
    return ZPK.create(zeros=bp_zeros, poles=bp_poles, gain=gain * width**degree)


def lp2bs(zpk: ZPK, center: float, width: float) -> ZPK:
    """Turn a lowpass prototype into a bandstop centred on ``center`` with stopband ``width``."""

    zeros, poles, gain = zpk.as_arrays()
    degree = zpk.degree

    bs_zeros = _shift_to_band((width / 2) / zeros, center)
    bs_poles = _shift_to_band((width / 2) / poles, center)

    # zeros at infinity move to the middle of the stopband
    bs_zeros = np.concatenate(
        (
            bs_zeros,
            np.full(max(degree, 0), 1j * center, dtype=complex),
            np.full(max(degree, 0), -1j * center, dtype=complex),
        )
    )
    return ZPK.create(zeros=bs_zeros, poles=bs_poles, gain=gain * _inversion_gain(zeros, poles))
