"""ZPK design pipeline: prototype, band transforms, bilinear mapping, SOS pairing."""

from .bilinear import bilinear_transform
from .conjugates import cplxpair
from .prototype import analog_lowpass
from .sos import Coefficients, build_section, to_sos_array, zpk2sos, zpk2tf
from .transforms import lp2bp, lp2bs, lp2hp, lp2lp
from .zpk import TOLERANCE, ZPK, is_real

__all__ = [
    "ZPK",
    "TOLERANCE",
    "is_real",
    "analog_lowpass",
    "lp2lp",
    "lp2hp",
    "lp2bp",
    "lp2bs",
    "bilinear_transform",
    "cplxpair",
    "zpk2tf",
    "build_section",
    "to_sos_array",
    "zpk2sos",
    "Coefficients",
]
