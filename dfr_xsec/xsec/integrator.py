"""Brute-force total cross section integration over {x,y}|E.

The differential cross section is summed on a fixed nx x ny grid of cell
centres (midpoint rule). Each sample gets its own copy of the kinematic
context, so rows of the grid are independent and can be spread over worker
processes. Row sums are always combined in row order, which keeps the result
identical between serial and parallel runs.
"""

import logging
from dataclasses import dataclass
from multiprocessing import Pool
from typing import List, Optional, Tuple

import numpy as np

from dfr_xsec.config.defaults import DEFAULT_GRID_NX, DEFAULT_GRID_NY, DEFAULT_N_WORKERS
from dfr_xsec.config.enums import KinePhaseSpace, ProcessType
from dfr_xsec.core.constants import MUON_MASS, PION_MASS, SMALL_NUM, to_1e38_cm2
from dfr_xsec.core.invariants import check_xsec
from dfr_xsec.core.kinematics import Interaction, Kinematics, Target, free_nucleon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Range1D:
    """Closed interval [min, max]."""
    min: float
    max: float

    @property
    def is_empty(self) -> bool:
        """True if the interval is closed off (max <= min)."""
        return self.max <= self.min

    @property
    def width(self) -> float:
        return self.max - self.min


class GridIntegrator:
    """Midpoint-rule integrator of d2sigma/dxdy at fixed neutrino energy.

    Args:
        nx: Number of grid cells along x
        ny: Number of grid cells along y
        n_workers: Number of worker processes (1: serial, -1: one per row up to 32)
        small_num: Guard keeping the limits away from the physical edges
        m_secondary: Mass of the produced pion [GeV]
        m_lepton: Mass of the outgoing lepton [GeV]
    """

    def __init__(
        self,
        nx: int = DEFAULT_GRID_NX,
        ny: int = DEFAULT_GRID_NY,
        n_workers: int = DEFAULT_N_WORKERS,
        small_num: float = SMALL_NUM,
        m_secondary: float = PION_MASS,
        m_lepton: float = MUON_MASS,
    ):
        if nx < 1 or ny < 1:
            raise ValueError(f"Grid dimensions must be positive: nx={nx}, ny={ny}")
        if small_num < 0:
            raise ValueError(f"small_num must be non-negative, got {small_num}")

        if n_workers == -1:
            n_workers = min(32, nx)
        if n_workers < 1:
            raise ValueError(f"n_workers must be positive or -1, got {n_workers}")

        self.nx = nx
        self.ny = ny
        self.n_workers = n_workers
        self.small_num = small_num
        self.m_secondary = m_secondary
        self.m_lepton = m_lepton

    def kinematic_limits(self, energy: float) -> Tuple[Range1D, Range1D]:
        """Integration ranges for x and y at neutrino energy E [GeV].

        Returns:
            (x_range, y_range); y_range is empty below the production threshold
        """
        eps = self.small_num
        x = Range1D(eps, 1.0 - eps)
        y = Range1D(self.m_secondary / energy + eps, 1.0 - self.m_lepton / energy - eps)
        return x, y

    def grid(self, energy: float) -> Tuple[np.ndarray, np.ndarray, float, float]:
        """Cell centres and widths of the integration grid.

        Returns:
            (x_centers, y_centers, dx, dy)
        """
        x, y = self.kinematic_limits(energy)
        dx = x.width / self.nx
        dy = y.width / self.ny
        x_centers = x.min + (np.arange(self.nx) + 0.5) * dx
        y_centers = y.min + (np.arange(self.ny) + 0.5) * dy
        return x_centers, y_centers, dx, dy

    @staticmethod
    def _integrate_row(
        model,
        template: Interaction,
        xc: float,
        y_centers: List[float],
        cell_area: float,
        kps: KinePhaseSpace,
    ) -> float:
        """Sum one row of constant x (parallel worker).

        Args:
            model: Cross section model with xsec(interaction, kps)
            template: Context supplying energy, target and flags
            xc: x of the row
            y_centers: y values of the cells in the row
            cell_area: dx * dy
            kps: Phase space of the model's integrand

        Returns:
            Row contribution to the total cross section
        """
        row = 0.0
        for yc in y_centers:
            sample = template.with_kinematics(x=xc, y=yc)
            row += cell_area * model.xsec(sample, kps)
        return row

    def integrate(self, model, interaction: Interaction) -> float:
        """Integrate the model's d2sigma/dxdy at the interaction's energy.

        Args:
            model: Cross section model exposing xsec(interaction, kps)
            interaction: Template context; its x, y are ignored and it is
                not modified

        Returns:
            Total cross section [GeV^-2]; exactly 0.0 if the y range is closed

        Raises:
            TableDomainError: Propagated from the model's secondary table
            InvariantViolationError: If a sample or the total is invalid
        """
        E = interaction.energy
        x, y = self.kinematic_limits(E)

        if y.is_empty:
            logger.debug(f"Kinematically closed at E = {E} GeV: y in [{y.min}, {y.max}]")
            return 0.0

        logger.debug(f"Integrating at E = {E} GeV: x in [{x.min}, {x.max}], y in [{y.min}, {y.max}]")

        kps = getattr(model, "native_phase_space", KinePhaseSpace.XY_FE)
        x_centers, y_centers, dx, dy = self.grid(E)
        cell_area = dx * dy
        y_list = [float(yc) for yc in y_centers]

        tasks = [
            (model, interaction, float(xc), y_list, cell_area, kps)
            for xc in x_centers
        ]

        if self.n_workers > 1:
            with Pool(processes=self.n_workers) as pool:
                rows = pool.starmap(self._integrate_row, tasks)
        else:
            rows = [self._integrate_row(*task) for task in tasks]

        xsec = 0.0
        for row in rows:
            xsec += row

        check_xsec(xsec, f"(total at E = {E} GeV)")

        logger.info(f"xsec (E = {E} GeV) = {to_1e38_cm2(xsec)} 1E-38 * cm2")

        return xsec


def total_xsec(
    model,
    energy: float,
    integrator: Optional[GridIntegrator] = None,
    target: Optional[Target] = None,
    assume_free_nucleon: bool = True,
) -> float:
    """Total cross section of `model` at neutrino energy `energy` [GeV^-2].

    Builds a template context for the model's process. Without a target this
    is the free nucleon cross section.

    Example:
        >>> model = DiffractivePionXSec()
        >>> sigma = to_1e38_cm2(total_xsec(model, 5.0))
    """
    if integrator is None:
        integrator = GridIntegrator()

    template = Interaction(
        energy=energy,
        kine=Kinematics(),
        process=getattr(model, "process", ProcessType.DIFFRACTIVE),
        target=target if target is not None else free_nucleon(),
        assume_free_nucleon=assume_free_nucleon,
    )
    return integrator.integrate(model, template)
