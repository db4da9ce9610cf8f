"""
Configuration Validation Utilities

This module provides the configuration error type and validation of resolved
model parameters.

Import Policy:
    from dfr_xsec.config.validation import ConfigurationError, validate_params

DO NOT use: from dfr_xsec.config.validation import *
"""

import math
from typing import List, Tuple


class ConfigurationError(Exception):
    """Raised when configuration resolution or validation fails."""

    pass


def check_params(params) -> List[str]:
    """Collect violations of the model parameter invariants.

    Invariants checked:
        1. Ma > 0 and finite (propagator mass scale)
        2. beta > 0 and finite (divides the t integral)

    Args:
        params: Resolved DiffractiveParams

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not (math.isfinite(params.Ma) and params.Ma > 0):
        errors.append(f"Ma must be positive and finite, got {params.Ma}")

    if not (math.isfinite(params.beta) and params.beta > 0):
        errors.append(f"beta must be positive and finite, got {params.beta}")

    return errors


def validate_params(params, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Validate resolved model parameters.

    Args:
        params: Resolved DiffractiveParams
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = check_params(params)

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Parameter validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []
