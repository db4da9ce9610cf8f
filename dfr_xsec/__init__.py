"""Diffractive Pion Production Cross Sections

Differential and total cross sections for neutrino-induced diffractive pion
production off nucleons and nuclei (Rein-Sehgal model).

Key Principles:
- Pointwise closed-form model: propagator term, fixed couplings and the
  total pion-nucleon cross section
- Any supported kinematic phase space via Jacobians from {x,y}|E
- Model parameters resolved once: local configuration over global defaults
- Immutable kinematic contexts, so evaluation is free of side effects
- Deterministic midpoint-grid integration for total cross sections

Version: 1.0
"""

__version__ = "1.0"

# Core data structures
from dfr_xsec.config.enums import HitNucleon, KinePhaseSpace, ProcessType
from dfr_xsec.core.constants import DEFAULT_CONSTANTS, PhysicsConstants, to_1e38_cm2
from dfr_xsec.core.kinematics import Interaction, Kinematics, Target, free_nucleon
from dfr_xsec.core.lut import PionNucleonXSecLUT, TableDomainError
from dfr_xsec.core.phase_space import jacobian
from dfr_xsec.core.invariants import InvariantViolationError

# Configuration
from dfr_xsec.config.resolver import DiffractiveParams, ParameterStore
from dfr_xsec.config.validation import ConfigurationError

# Cross sections
from dfr_xsec.xsec import (
    DiffractivePionXSec,
    GridIntegrator,
    XSecSpline,
    build_xsec_spline,
    isoscalar_average,
    total_xsec,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "ProcessType",
    "HitNucleon",
    "KinePhaseSpace",
    "PhysicsConstants",
    "DEFAULT_CONSTANTS",
    "to_1e38_cm2",
    "Interaction",
    "Kinematics",
    "Target",
    "free_nucleon",
    "PionNucleonXSecLUT",
    "TableDomainError",
    "jacobian",
    "InvariantViolationError",
    # Configuration
    "ParameterStore",
    "DiffractiveParams",
    "ConfigurationError",
    # Cross sections
    "DiffractivePionXSec",
    "GridIntegrator",
    "total_xsec",
    "XSecSpline",
    "build_xsec_spline",
    "isoscalar_average",
]
