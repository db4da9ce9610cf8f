"""Total cross section splines over neutrino energy.

A spline tabulates a total cross section on an energy grid and evaluates it
by linear interpolation, returning 0 outside the tabulated range. Splines on
the same grid can be combined, e.g. into the isoscalar per-nucleon average
0.5 * (sigma_n + sigma_p).
"""

import logging
from typing import Optional, Sequence

import numpy as np
from scipy.interpolate import interp1d

from dfr_xsec.config.enums import HitNucleon
from dfr_xsec.core.constants import to_1e38_cm2
from dfr_xsec.core.kinematics import free_nucleon
from dfr_xsec.xsec.integrator import GridIntegrator, total_xsec

logger = logging.getLogger(__name__)


class XSecSpline:
    """Total cross section sigma(E) tabulated on an energy grid.

    Attributes:
        energies: Neutrino energies [GeV] (strictly increasing)
        values: Total cross sections [GeV^-2]
        name: Label of the tabulated channel
    """

    def __init__(self, energies: Sequence[float], values: Sequence[float], name: str = ""):
        """Initialize spline.

        Raises:
            ValueError: If the arrays have mismatched shapes, fewer than two
                points, non-increasing energies or negative values.
        """
        energies = np.asarray(energies, dtype=np.float64)
        values = np.asarray(values, dtype=np.float64)

        if energies.ndim != 1 or values.ndim != 1:
            raise ValueError(
                f"energies and values must be 1D arrays, got shapes {energies.shape}, {values.shape}"
            )
        if len(energies) != len(values):
            raise ValueError(
                f"energies and values must have same length: {len(energies)} != {len(values)}"
            )
        if len(energies) < 2:
            raise ValueError("A spline needs at least 2 points")
        if not np.all(np.diff(energies) > 0):
            raise ValueError("energies must be strictly monotonically increasing")
        if np.any(values < 0):
            raise ValueError("Cross section values must be non-negative")

        self.energies = energies
        self.values = values
        self.name = name
        self._interp = interp1d(
            energies, values, kind="linear", bounds_error=False, fill_value=0.0
        )

    def evaluate(self, energy):
        """Interpolated cross section [GeV^-2]; 0 outside the tabulated range.

        Accepts a scalar or an array of energies.
        """
        result = self._interp(energy)
        if np.ndim(result) == 0:
            return float(result)
        return result

    def __call__(self, energy):
        return self.evaluate(energy)

    def values_1e38_cm2(self) -> np.ndarray:
        """Tabulated values in units of 1E-38 cm^2."""
        return to_1e38_cm2(self.values)

    def per_energy(self) -> np.ndarray:
        """sigma(E) / E at the tabulated points [GeV^-3]."""
        return self.values / self.energies

    def __len__(self) -> int:
        return len(self.energies)

    def __repr__(self) -> str:
        return (
            f"XSecSpline(name={self.name!r}, energy_range=[{self.energies[0]:.3f}, "
            f"{self.energies[-1]:.1f}] GeV, num_points={len(self.energies)})"
        )


def build_xsec_spline(
    model,
    energies: Sequence[float],
    integrator: Optional[GridIntegrator] = None,
    hit_nucleon: HitNucleon = HitNucleon.PROTON,
    name: str = "",
) -> XSecSpline:
    """Tabulate the free nucleon total cross section of `model`.

    Args:
        model: Cross section model
        energies: Neutrino energies [GeV] (strictly increasing)
        integrator: Integrator to use; reference resolution if None
        hit_nucleon: Struck nucleon species
        name: Label of the spline

    Returns:
        XSecSpline with one integrated total per energy
    """
    if integrator is None:
        integrator = GridIntegrator()

    target = free_nucleon(hit_nucleon)
    values = []
    for E in energies:
        values.append(total_xsec(model, float(E), integrator=integrator, target=target))

    logger.info(f"Built spline {name or hit_nucleon.name.lower()} with {len(values)} points")
    return XSecSpline(energies, values, name=name)


def isoscalar_average(spline_n: XSecSpline, spline_p: XSecSpline, name: str = "isoscalar") -> XSecSpline:
    """Per-nucleon isoscalar cross section 0.5 * (sigma_n + sigma_p).

    Raises:
        ValueError: If the two splines are not tabulated on the same energies
    """
    if len(spline_n) != len(spline_p) or not np.allclose(spline_n.energies, spline_p.energies):
        raise ValueError("Splines must share the same energy grid")

    return XSecSpline(spline_n.energies, 0.5 * (spline_n.values + spline_p.values), name=name)
