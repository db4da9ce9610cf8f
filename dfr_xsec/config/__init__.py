"""Configuration Module - Parameter resolution and defaults

Global parameter list (loaded from defaults.yaml):
    from dfr_xsec.config import get_default, get_global_parameters

    Ma = get_default('global_parameters.DFR-Ma')

Model parameters (local configuration over global defaults):
    from dfr_xsec.config import resolve_diffractive_params

    params = resolve_diffractive_params({'Ma': 1.1})

Import Policy:
    DO NOT use: from dfr_xsec.config import *

Submodules:
    enums: Tag enumerations (ProcessType, HitNucleon, KinePhaseSpace)
    yaml_loader: YAML defaults loader (get_default, get_defaults)
    resolver: Two-level parameter resolution (ParameterStore, DiffractiveParams)
    validation: ConfigurationError and parameter validation
"""

from dfr_xsec.config.enums import HitNucleon, KinePhaseSpace, ProcessType
from dfr_xsec.config.yaml_loader import (
    get_default,
    get_defaults,
    get_global_parameters,
    reload_defaults,
)
from dfr_xsec.config.validation import ConfigurationError, validate_params
from dfr_xsec.config.resolver import (
    DiffractiveParams,
    ParameterStore,
    resolve_diffractive_params,
)

__all__ = [
    # Enums
    "ProcessType",
    "HitNucleon",
    "KinePhaseSpace",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "get_global_parameters",
    "reload_defaults",
    # Resolution
    "ParameterStore",
    "DiffractiveParams",
    "resolve_diffractive_params",
    # Validation
    "ConfigurationError",
    "validate_params",
]
