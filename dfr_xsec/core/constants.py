"""Physics constants for diffractive pion production.

This module is the Single Source of Truth (SSOT) for all physics constants
and unit conversions used by the cross section code. Import from here rather
than defining constants locally.

All quantities are in natural units: GeV for energies and masses, GeV^-1 for
lengths, GeV^-2 for cross sections.

Import Policy:
    from dfr_xsec.core.constants import DEFAULT_CONSTANTS, PION_MASS, T_MAX

DO NOT use: from dfr_xsec.core.constants import *
"""

import math
from dataclasses import dataclass

# =============================================================================
# Particle Masses [GeV]
# =============================================================================

PROTON_MASS = 0.93827208816
NEUTRON_MASS = 0.93956542052

# Isospin-averaged nucleon mass
NUCLEON_MASS = 0.5 * (PROTON_MASS + NEUTRON_MASS)

# Charged pion
PION_MASS = 0.13957039
PION_MASS2 = PION_MASS ** 2

MUON_MASS = 0.1056583755

# =============================================================================
# Couplings
# =============================================================================

# Fermi coupling constant [GeV^-2]
FERMI_CONSTANT = 1.1663787e-5

# Pion decay constant in units of the pion mass
PION_DECAY_CONSTANT_FACTOR = 0.93

# =============================================================================
# Numerical Thresholds
# =============================================================================

# Guard keeping integration limits away from the physical edges
SMALL_NUM = 1.0e-6

# Upper bound of the momentum transfer |t| to the nucleon [GeV^2].
# Fixed value, not derived from kinematics; total cross sections depend on it.
T_MAX = 99.0

# =============================================================================
# Unit Conversion
# =============================================================================

# hbar * c [GeV fm]
HBAR_C = 0.1973269804

FERMI = 1.0 / HBAR_C  # [GeV^-1]
CENTIMETER = 1.0e13 * FERMI
CM2 = CENTIMETER ** 2  # [GeV^-2]
MILLIBARN = 1.0e-27 * CM2

# Conventional reporting unit for neutrino cross sections
XSEC_REPORT_UNIT = 1.0e-38 * CM2


def to_1e38_cm2(xsec: float) -> float:
    """Convert a cross section from GeV^-2 to units of 1E-38 cm^2."""
    return xsec / XSEC_REPORT_UNIT


def from_1e38_cm2(value: float) -> float:
    """Convert a cross section from units of 1E-38 cm^2 to GeV^-2."""
    return value * XSEC_REPORT_UNIT


# =============================================================================
# Model Constants
# =============================================================================

@dataclass(frozen=True)
class PhysicsConstants:
    """Fixed physics inputs of the diffractive cross section.

    These are not configurable model parameters; tunable inputs live in
    DiffractiveParams.
    """

    m_nucleon: float = NUCLEON_MASS
    """Nucleon mass [GeV]"""

    m_pion: float = PION_MASS
    """Charged pion mass [GeV]"""

    m_lepton: float = MUON_MASS
    """Outgoing lepton mass used for the kinematic limits [GeV]"""

    G_F: float = FERMI_CONSTANT
    """Fermi constant [GeV^-2]"""

    f_pi_factor: float = PION_DECAY_CONSTANT_FACTOR
    """Pion decay constant in units of m_pion"""

    @property
    def coupling_factor(self) -> float:
        """G_F^2 M / (16 pi^3) [GeV^-3]"""
        return self.G_F ** 2 * self.m_nucleon / (16.0 * math.pi ** 3)

    @property
    def f_pi2(self) -> float:
        """Pion decay constant squared [GeV^2]"""
        return (self.f_pi_factor * self.m_pion) ** 2

    @property
    def m_pion2(self) -> float:
        return self.m_pion ** 2


DEFAULT_CONSTANTS = PhysicsConstants()
