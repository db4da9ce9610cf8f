"""Core data structures for diffractive cross section calculations.

This module contains physics constants and units, the kinematic context,
phase space Jacobians, the pion-nucleon cross section table and numeric
invariant checks.
"""

from dfr_xsec.core.constants import (
    DEFAULT_CONSTANTS,
    PhysicsConstants,
    T_MAX,
    XSEC_REPORT_UNIT,
    from_1e38_cm2,
    to_1e38_cm2,
)
from dfr_xsec.core.invariants import InvariantViolationError, check_jacobian, check_xsec
from dfr_xsec.core.kinematics import Interaction, Kinematics, Target, free_nucleon
from dfr_xsec.core.lut import (
    PionNucleonXSecLUT,
    SecondaryXSecTable,
    TableDomainError,
    create_pion_nucleon_lut,
)
from dfr_xsec.core.phase_space import is_transformable, jacobian, supported_phase_spaces

__all__ = [
    "DEFAULT_CONSTANTS",
    "PhysicsConstants",
    "T_MAX",
    "XSEC_REPORT_UNIT",
    "to_1e38_cm2",
    "from_1e38_cm2",
    "InvariantViolationError",
    "check_jacobian",
    "check_xsec",
    "Interaction",
    "Kinematics",
    "Target",
    "free_nucleon",
    "PionNucleonXSecLUT",
    "SecondaryXSecTable",
    "TableDomainError",
    "create_pion_nucleon_lut",
    "jacobian",
    "is_transformable",
    "supported_phase_spaces",
]
