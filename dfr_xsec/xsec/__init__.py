"""Cross section models and integration drivers."""

from dfr_xsec.xsec.integrator import GridIntegrator, Range1D, total_xsec
from dfr_xsec.xsec.diffractive import DiffractivePionXSec
from dfr_xsec.xsec.spline import XSecSpline, build_xsec_spline, isoscalar_average

__all__ = [
    "DiffractivePionXSec",
    "GridIntegrator",
    "Range1D",
    "total_xsec",
    "XSecSpline",
    "build_xsec_spline",
    "isoscalar_average",
]
