"""Diffractive pion production cross section (Rein-Sehgal model).

Neutrino scattering off a nucleon with a pion produced diffractively,
nu N -> l pi N. The differential cross section in {x,y}|E is

    d2sigma/dxdy = G E f_pi^2 (1 - y) [Ma^2 / (Ma^2 + Q2)]^2 sigma_piN(Epi)^2 * T

where G = G_F^2 M / (16 pi^3), Epi = y E, Q2 = 2 x y M E and T is the
integral of exp(-beta |t|) over the admissible |t| range. Keeping t as a
coordinate gives d3sigma/dxdydt with exp(-beta |t|) in place of T.
"""

import logging
import math
from typing import Any, Mapping, Optional

from dfr_xsec.config.enums import KinePhaseSpace, ProcessType
from dfr_xsec.config.resolver import DiffractiveParams, resolve_diffractive_params
from dfr_xsec.core.constants import DEFAULT_CONSTANTS, T_MAX, PhysicsConstants
from dfr_xsec.core.invariants import check_xsec
from dfr_xsec.core.kinematics import Interaction
from dfr_xsec.core.lut import SecondaryXSecTable, create_pion_nucleon_lut
from dfr_xsec.core.phase_space import jacobian
from dfr_xsec.xsec.integrator import GridIntegrator

logger = logging.getLogger(__name__)


def _is_real(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


class DiffractivePionXSec:
    """Differential cross section for diffractive pion production.

    Model parameters (Ma, beta) are resolved once, from `config` with
    fallback to the global parameter list, and held read-only. Evaluation is
    side-effect free, so one instance can serve concurrent callers.

    Args:
        config: Local configuration ('Ma', 'beta')
        global_config: Global parameter list ('DFR-Ma', 'DFR-Beta').
            If None, defaults.yaml is used.
        table: Total pion-nucleon cross section oracle.
            If None, the default PionNucleonXSecLUT is used.
        constants: Fixed physics constants

    Raises:
        ConfigurationError: If a parameter is missing from both stores or invalid
    """

    process = ProcessType.DIFFRACTIVE
    native_phase_space = KinePhaseSpace.XY_FE

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        global_config: Optional[Mapping[str, Any]] = None,
        table: Optional[SecondaryXSecTable] = None,
        constants: PhysicsConstants = DEFAULT_CONSTANTS,
    ):
        self.table = table if table is not None else create_pion_nucleon_lut()
        self.constants = constants
        self.params: DiffractiveParams
        self.configure(config, global_config)

    def configure(
        self,
        config: Optional[Mapping[str, Any]] = None,
        global_config: Optional[Mapping[str, Any]] = None,
    ) -> DiffractiveParams:
        """Resolve the model parameters again from the given stores.

        Returns:
            The newly resolved parameters
        """
        self.params = resolve_diffractive_params(config, global_config)
        logger.debug(f"Configured {type(self).__name__}: Ma = {self.params.Ma}, beta = {self.params.beta}")
        return self.params

    # ------------------------------------------------------------------
    # Applicability

    def valid_process(self, interaction: Interaction) -> bool:
        """Check whether the model applies to the interaction's process."""
        if interaction.skip_process_check:
            return True
        return interaction.process is self.process

    def valid_kinematics(
        self,
        interaction: Interaction,
        kps: KinePhaseSpace = KinePhaseSpace.XY_FE,
    ) -> bool:
        """Check that the coordinates needed for `kps` are present and numeric.

        No physical range check is made here.
        """
        if interaction.skip_kinematic_check:
            return True

        if not (_is_real(interaction.x) and _is_real(interaction.y)):
            return False
        if kps.keeps_t and not _is_real(interaction.t):
            return False
        return True

    # ------------------------------------------------------------------
    # Cross section

    def t_min(self, pion_energy: float) -> float:
        """Minimum |t| for producing a pion of energy Epi [GeV^2]."""
        return (0.5 * self.constants.m_pion2 / pion_energy) ** 2

    def t_integral(self, pion_energy: float) -> float:
        """Integral of exp(-beta |t|) over [t_min, T_MAX] [GeV^2]."""
        tmin = self.t_min(pion_energy)
        if tmin >= T_MAX:
            return 0.0
        b = self.params.beta
        return (math.exp(-b * tmin) - math.exp(-b * T_MAX)) / b

    def xsec(
        self,
        interaction: Interaction,
        kps: KinePhaseSpace = KinePhaseSpace.XY_FE,
    ) -> float:
        """Compute the differential cross section in phase space `kps`.

        Args:
            interaction: Kinematic context (not modified)
            kps: Phase space of the returned differential cross section

        Returns:
            Differential cross section [GeV^-2 per unit phase space], >= 0.
            Zero if the model does not apply to the interaction or if
            Epi = y E is below the pion mass.

        Raises:
            TableDomainError: If the pion-nucleon table cannot serve Epi
            ValueError: If `kps` cannot be reached from the native phase space
            InvariantViolationError: If the result is negative or not finite
        """
        if not self.valid_process(interaction):
            return 0.0
        if not self.valid_kinematics(interaction, kps):
            return 0.0

        c = self.constants
        E = interaction.energy
        x = interaction.x
        y = interaction.y
        Q2 = interaction.Q2(c.m_nucleon)
        Epi = interaction.pion_energy
        if Epi < c.m_pion:
            # not enough energy transfer to produce a pion
            return 0.0

        Ma2 = self.params.Ma2
        propg = (Ma2 / (Ma2 + Q2)) ** 2
        sTot = self.table.lookup(Epi)

        logger.debug(f"E = {E}, x = {x}, y = {y}, Q2 = {Q2}")
        logger.debug(f"Epi = {Epi}, s^{{piN}}_{{tot}} = {sTot}")

        xsec = c.coupling_factor * E * c.f_pi2 * (1.0 - y) * propg * sTot ** 2

        if kps.keeps_t:
            t = interaction.t
            if not (self.t_min(Epi) <= t <= T_MAX):
                return 0.0
            xsec *= math.exp(-self.params.beta * t)
        else:
            xsec *= self.t_integral(Epi)

        native = kps.base
        if kps is not native:
            J = jacobian(interaction, native, kps, c.m_nucleon)
            logger.debug(f"Jacobian for transformation to: {kps.value}, J = {J}")
            xsec *= J

        if not interaction.assume_free_nucleon:
            xsec *= interaction.target.n_scattering_centers

        return check_xsec(xsec, f"at E = {E}, x = {x}, y = {y}")

    def integral(self, interaction: Interaction, integrator=None) -> float:
        """Total cross section at the interaction's energy [GeV^-2].

        Args:
            interaction: Template context (energy, target, flags)
            integrator: GridIntegrator to use; reference resolution if None
        """
        if integrator is None:
            integrator = GridIntegrator()
        return integrator.integrate(self, interaction)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(Ma={self.params.Ma}, beta={self.params.beta})"
