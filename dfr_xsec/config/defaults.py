"""
Default Configuration Constants for dfr_xsec

This module contains the default values of the numerical machinery (grid
integration, reporting). Physics parameters with a global fallback live in
defaults.yaml and are resolved through dfr_xsec.config.resolver.

IMPORTANT Import Policies:
    1. DO NOT use: from dfr_xsec.config.defaults import *

    2. DO use explicit imports:
       from dfr_xsec.config.defaults import DEFAULT_GRID_NX, DEFAULT_GRID_NY
"""

# =============================================================================
# Total Cross Section Integration Defaults
# =============================================================================

# Number of grid cells along x and y for the brute-force integration.
# 300 x 300 is the reference resolution.
DEFAULT_GRID_NX = 300
DEFAULT_GRID_NY = 300

# Number of worker processes for the integration (1: serial)
DEFAULT_N_WORKERS = 1

# =============================================================================
# Parameter Names
# =============================================================================

# Local name -> global fallback name for the diffractive model
DFR_PARAMETER_NAMES = {
    "Ma": "DFR-Ma",
    "beta": "DFR-Beta",
}

# Section of defaults.yaml holding the global parameter list
GLOBAL_PARAMETERS_SECTION = "global_parameters"
