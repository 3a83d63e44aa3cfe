"""Response evaluation helpers for designed filters."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from scipy import signal

from .design import ZPK, Coefficients, to_sos_array
from .filters.biquad import Biquad
from .filters.butterworth import ButterworthCascade


def evaluate_zpk(zpk: ZPK, point: complex) -> complex:
    """Evaluate ``gain * prod(point - z) / prod(point - p)``."""

    zeros, poles, gain = zpk.as_arrays()
    return complex(gain * np.prod(point - zeros) / np.prod(point - poles))


def evaluate_sections(coefficients: Iterable[Sequence[float]], point: complex) -> complex:
    """Evaluate the product of biquad transfer functions at ``point`` in the z-plane."""

    q = 1.0 / complex(point)
    total = 1.0 + 0j
    for b0, b1, b2, a1, a2 in coefficients:
        total *= (b0 + b1 * q + b2 * q**2) / (1.0 + a1 * q + a2 * q**2)
    return total


def frequency_response(
    coefficients: Iterable[Sequence[float]],
    sampling_frequency: float,
    n_points: int = 512,
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(frequencies_hz, response)`` on ``n_points`` bins over ``[0, fs/2)``."""

    return signal.sosfreqz(to_sos_array(coefficients), worN=n_points, fs=sampling_frequency)


def magnitude_db(response: np.ndarray) -> np.ndarray:
    return 20.0 * np.log10(np.maximum(np.abs(response), 1e-300))


def impulse_response(cascade: ButterworthCascade | Sequence[Coefficients], n_samples: int) -> np.ndarray:
    """Run a unit impulse through fresh stages built from ``cascade``'s coefficients.

    The state of ``cascade`` itself is left untouched.
    """

    rows: Sequence[Coefficients] = cascade.coefficients if isinstance(cascade, ButterworthCascade) else cascade
    stages = [Biquad.from_coefficients(c) for c in rows]
    impulse = np.zeros(n_samples)
    if n_samples:
        impulse[0] = 1.0
    out = np.empty(n_samples)
    for idx, sample in enumerate(impulse):
        value = float(sample)
        for stage in stages:
            value = stage.process_sample(value)
        out[idx] = value
    return out


def zero_phase_filter(cascade: ButterworthCascade, samples: Sequence[float] | np.ndarray) -> np.ndarray:
    """Offline forward-backward filtering with the cascade's sections."""

    arr = np.asarray(samples, dtype=float)
    if arr.size == 0:
        return arr
    sos = cascade.sos
    # scipy's default pad length, trimmed by sections with b2 == a2 == 0
    n_taps = 2 * len(sos) + 1 - min(int((sos[:, 2] == 0).sum()), int((sos[:, 5] == 0).sum()))
    if arr.size > 3 * n_taps:
        return signal.sosfiltfilt(sos, arr)
    return signal.sosfiltfilt(sos, arr, padlen=arr.size - 1)
