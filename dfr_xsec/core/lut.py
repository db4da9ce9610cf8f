"""Lookup tables for secondary-process cross sections.

This module provides the total pion-nucleon cross section used as an input
to the diffractive model. Any object with a lookup(energy) method satisfies
the SecondaryXSecTable protocol; PionNucleonXSecLUT is the default tabulated
implementation.
"""

import numpy as np
from typing import Optional, Protocol

from dfr_xsec.core.constants import MILLIBARN, PION_MASS


class TableDomainError(ValueError):
    """Raised when a table is queried outside its energy domain."""

    pass


class SecondaryXSecTable(Protocol):
    """Total interaction cross section of the produced secondary."""

    def lookup(self, energy: float) -> float:
        """Return the total cross section [GeV^-2] at the given energy [GeV]."""
        ...


class PionNucleonXSecLUT:
    """Lookup table for the total pion-nucleon cross section.

    Stores the isospin-averaged total cross section 0.5 * (sigma(pi+ p) +
    sigma(pi- p)) as a function of the pion total energy and provides linear
    interpolation between tabulated points.

    The table starts at the pion mass (pion at rest); queries below the first
    tabulated energy raise TableDomainError. Above the last tabulated energy
    the total cross section is held at its last value, where it is nearly flat.

    Attributes:
        energy_grid: Pion total energy values [GeV] (monotonically increasing)
        xsec_mb: Total cross section values [mb] at each energy point
    """

    # Averaged pi+ p / pi- p total cross sections (PDG compilation, smoothed)
    # Energy range: m_pi - 1000 GeV
    _PDG_ENERGY_GRID = np.array([
        PION_MASS, 0.16, 0.20, 0.25, 0.30, 0.33, 0.36, 0.40, 0.50, 0.60,
        0.70, 0.80, 0.90, 1.00, 1.10, 1.25, 1.50, 2.00, 3.00, 5.00,
        10.0, 20.0, 50.0, 100.0, 200.0, 500.0, 1000.0
    ], dtype=np.float64)

    _PDG_XSEC_MB = np.array([
        2.0, 8.0, 30.0, 75.0, 120.0, 135.0, 125.0, 90.0, 45.0, 30.0,
        30.0, 38.0, 45.0, 42.0, 38.0, 36.0, 34.0, 32.0, 30.0, 28.0,
        25.5, 24.5, 24.0, 24.0, 24.3, 25.0, 25.8
    ], dtype=np.float64)

    def __init__(
        self,
        energy_grid: Optional[np.ndarray] = None,
        xsec_mb: Optional[np.ndarray] = None
    ):
        """Initialize pion-nucleon cross section lookup table.

        Args:
            energy_grid: Pion energies [GeV] (monotonically increasing).
                If None, uses the default PDG-based table.
            xsec_mb: Total cross sections [mb] at each energy.
                If None, uses the default PDG-based table.

        Raises:
            ValueError: If energy_grid and xsec_mb have mismatched shapes,
                if arrays have fewer than two points, if energy_grid is not
                monotonically increasing or if any cross section is negative.
        """
        if energy_grid is None or xsec_mb is None:
            self.energy_grid = self._PDG_ENERGY_GRID.copy()
            self.xsec_mb = self._PDG_XSEC_MB.copy()
        else:
            energy_grid = np.asarray(energy_grid, dtype=np.float64)
            xsec_mb = np.asarray(xsec_mb, dtype=np.float64)

            if energy_grid.ndim != 1:
                raise ValueError(f"energy_grid must be 1D array, got shape {energy_grid.shape}")

            if xsec_mb.ndim != 1:
                raise ValueError(f"xsec_mb must be 1D array, got shape {xsec_mb.shape}")

            if len(energy_grid) != len(xsec_mb):
                raise ValueError(
                    f"energy_grid and xsec_mb must have same length: "
                    f"{len(energy_grid)} != {len(xsec_mb)}"
                )

            if len(energy_grid) < 2:
                raise ValueError("energy_grid and xsec_mb must have at least 2 points")

            if not np.all(np.diff(energy_grid) > 0):
                raise ValueError("energy_grid must be strictly monotonically increasing")

            if np.any(xsec_mb < 0):
                raise ValueError("xsec_mb must be non-negative")

            self.energy_grid = energy_grid
            self.xsec_mb = xsec_mb

    @property
    def energy_range(self) -> tuple[float, float]:
        """Tabulated energy domain [GeV]."""
        return float(self.energy_grid[0]), float(self.energy_grid[-1])

    def lookup_mb(self, energy: float) -> float:
        """Get the total cross section [mb] via linear interpolation.

        Args:
            energy: Pion total energy [GeV]

        Raises:
            TableDomainError: If energy lies below the tabulated range or is NaN
        """
        E_lo, E_hi = self.energy_range
        if not energy >= E_lo:
            raise TableDomainError(
                f"Pion energy {energy} GeV outside table range [{E_lo}, {E_hi}] GeV"
            )

        if energy >= E_hi:
            return float(self.xsec_mb[-1])

        idx = int(np.searchsorted(self.energy_grid, energy, side="right")) - 1

        E0 = self.energy_grid[idx]
        E1 = self.energy_grid[idx + 1]
        S0 = self.xsec_mb[idx]
        S1 = self.xsec_mb[idx + 1]

        frac = (energy - E0) / (E1 - E0)
        return float(S0 + (S1 - S0) * frac)

    def lookup(self, energy: float) -> float:
        """Get the total cross section [GeV^-2] at the given pion energy [GeV].

        Examples:
            >>> lut = PionNucleonXSecLUT()
            >>> sigma = lut.lookup(2.0)  # 32 mb in GeV^-2
        """
        return self.lookup_mb(energy) * MILLIBARN

    def __call__(self, energy: float) -> float:
        return self.lookup(energy)

    def __len__(self) -> int:
        """Return number of energy grid points."""
        return len(self.energy_grid)

    def __repr__(self) -> str:
        """String representation of LUT."""
        return (
            f"PionNucleonXSecLUT(energy_range=[{self.energy_grid[0]:.4f}, "
            f"{self.energy_grid[-1]:.1f}] GeV, num_points={len(self.energy_grid)})"
        )


def create_pion_nucleon_lut() -> PionNucleonXSecLUT:
    """Create the default total pion-nucleon cross section LUT.

    Returns:
        PionNucleonXSecLUT tabulated from m_pi to 1 TeV, held flat above
    """
    return PionNucleonXSecLUT()
