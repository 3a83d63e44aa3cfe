from __future__ import annotations

import cmath
import math

import numpy as np
import pytest
from scipy import signal

from sosfilter.design import ZPK, analog_lowpass, bilinear_transform, lp2bp, lp2bs, lp2hp, lp2lp


def _assert_same_roots(actual, expected, atol: float = 1e-9) -> None:
    remaining = list(np.asarray(expected, dtype=complex))
    actual = list(np.asarray(actual, dtype=complex))
    assert len(actual) == len(remaining)
    for root in actual:
        distances = [abs(root - other) for other in remaining]
        idx = int(np.argmin(distances))
        assert distances[idx] < atol, f"{root} not found in reference roots"
        remaining.pop(idx)


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8, 11])
def test_analog_lowpass_poles_on_left_unit_circle(order: int) -> None:
    proto = analog_lowpass(order)
    poles = np.asarray(proto.poles)

    assert proto.zeros == ()
    assert proto.gain == 1.0
    assert len(poles) == order
    np.testing.assert_allclose(np.abs(poles), 1.0, atol=1e-12)
    assert np.all(poles.real <= 1e-12)

    at_minus_one = int(np.sum(np.abs(poles + 1.0) < 1e-12))
    assert at_minus_one == (1 if order % 2 else 0)
    _assert_same_roots(poles.conjugate(), poles)


def test_analog_lowpass_matches_reference_prototype() -> None:
    _, p, k = signal.buttap(6)
    proto = analog_lowpass(6)
    _assert_same_roots(proto.poles, p)
    assert proto.gain == pytest.approx(k)


def test_lp2lp_with_unit_cutoff_is_identity() -> None:
    zpk = ZPK.create(zeros=[-2.0], poles=[-1.0, -0.5 + 0.5j, -0.5 - 0.5j], gain=3.0)
    result = lp2lp(zpk, 1.0)
    assert result == zpk


def test_lp2lp_scales_roots_and_gain() -> None:
    proto = analog_lowpass(3)
    result = lp2lp(proto, 10.0)
    np.testing.assert_allclose(np.abs(result.poles), 10.0)
    assert result.gain == pytest.approx(1000.0)


def test_transforms_return_new_values() -> None:
    proto = analog_lowpass(4)
    before = (proto.zeros, proto.poles, proto.gain)
    lp2hp(proto, 5.0)
    lp2bp(proto, 5.0, 2.0)
    lp2bs(proto, 5.0, 2.0)
    assert (proto.zeros, proto.poles, proto.gain) == before


def test_lp2hp_matches_reference() -> None:
    z, p, k = signal.buttap(5)
    result = lp2hp(analog_lowpass(5), 3.0)
    ref_z, ref_p, ref_k = signal.lp2hp_zpk(z, p, k, wo=3.0)
    _assert_same_roots(result.zeros, ref_z)
    _assert_same_roots(result.poles, ref_p)
    assert result.gain == pytest.approx(ref_k)
    assert len(result.zeros) == 5


def test_lp2bp_orders_roots_plus_branch_first() -> None:
    proto = analog_lowpass(3)
    result = lp2bp(proto, 4.0, 2.0)

    # the real prototype pole at -1 splits into -1 +/- j*sqrt(15), upper root first
    assert result.poles[1] == pytest.approx(-1 + 1j * math.sqrt(15.0))
    assert result.poles[4] == pytest.approx(-1 - 1j * math.sqrt(15.0))

    complex_poles = [proto.poles[0], proto.poles[2]]
    offsets = [cmath.sqrt(p * p - 16.0) for p in complex_poles]
    np.testing.assert_allclose([result.poles[0], result.poles[2]], [p + o for p, o in zip(complex_poles, offsets)])
    np.testing.assert_allclose([result.poles[3], result.poles[5]], [p - o for p, o in zip(complex_poles, offsets)])
    assert result.zeros == (0j, 0j, 0j)
    assert result.gain == pytest.approx(8.0)


def test_lp2bp_and_lp2bs_match_reference() -> None:
    z, p, k = signal.buttap(4)
    proto = analog_lowpass(4)

    bp = lp2bp(proto, 7.0, 3.0)
    ref_z, ref_p, ref_k = signal.lp2bp_zpk(z, p, k, wo=7.0, bw=3.0)
    _assert_same_roots(bp.zeros, ref_z)
    _assert_same_roots(bp.poles, ref_p)
    assert bp.gain == pytest.approx(ref_k)

    bs = lp2bs(proto, 7.0, 3.0)
    ref_z, ref_p, ref_k = signal.lp2bs_zpk(z, p, k, wo=7.0, bw=3.0)
    _assert_same_roots(bs.zeros, ref_z)
    _assert_same_roots(bs.poles, ref_p)
    assert bs.gain == pytest.approx(ref_k)
    assert bs.zeros[-8:-4] == (7j,) * 4
    assert bs.zeros[-4:] == (-7j,) * 4


def test_bilinear_places_infinite_zeros_at_nyquist() -> None:
    fs = 1000.0
    analog = lp2lp(analog_lowpass(4), 2 * math.pi * 100.0)
    digital = bilinear_transform(analog, fs)

    assert digital.zeros == (-1 + 0j,) * 4
    assert np.all(np.abs(digital.poles) < 1.0)

    ref_z, ref_p, ref_k = signal.bilinear_zpk([], np.asarray(analog.poles), analog.gain, fs)
    _assert_same_roots(digital.poles, ref_p)
    assert digital.gain == pytest.approx(ref_k)


def test_bilinear_does_not_prewarp() -> None:
    fs = 50.0
    analog = ZPK.create(poles=[-3.0], gain=3.0)
    digital = bilinear_transform(analog, fs)
    assert digital.poles[0] == pytest.approx((100.0 - 3.0) / (100.0 + 3.0))
    assert digital.gain == pytest.approx(3.0 / 103.0)


def test_lp2bs_puts_upper_branch_first_for_real_pole() -> None:
    result = lp2bs(analog_lowpass(1), 2.0, 2.0)
    # (width / 2) / -1 == -1, so the roots are -1 +/- j*sqrt(3)
    assert result.poles[0] == pytest.approx(-1 + 1j * math.sqrt(3.0))
    assert result.poles[1] == pytest.approx(-1 - 1j * math.sqrt(3.0))
    assert result.zeros == (2j, -2j)
