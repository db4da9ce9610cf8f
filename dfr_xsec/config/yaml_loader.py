"""Loader for the packaged defaults.yaml.

defaults.yaml holds the global parameter list that models fall back to when
their local configuration does not set a parameter. The file is parsed once
and cached; this module imports nothing else from dfr_xsec.config.

Usage:
    from dfr_xsec.config.yaml_loader import get_default, get_global_parameters
    beta = get_default('global_parameters.DFR-Beta')
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULTS_PATH_ENV = "DFR_XSEC_DEFAULTS_PATH"

_DEFAULTS_CACHE: dict[str, Any] | None = None


def _defaults_path() -> Path:
    """Locate defaults.yaml.

    An existing file named by DFR_XSEC_DEFAULTS_PATH takes precedence over the
    copy shipped next to this module.

    Raises:
        FileNotFoundError: If neither file exists.
    """
    override = os.getenv(DEFAULTS_PATH_ENV)
    if override and Path(override).exists():
        return Path(override)

    packaged = Path(__file__).parent / "defaults.yaml"
    if not packaged.exists():
        raise FileNotFoundError(
            f"Defaults file not found: {packaged}\n"
            f"Point {DEFAULTS_PATH_ENV} at a defaults.yaml to use another location."
        )
    return packaged


def _read_defaults() -> dict[str, Any]:
    with open(_defaults_path(), encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _cached() -> dict[str, Any]:
    global _DEFAULTS_CACHE
    if _DEFAULTS_CACHE is None:
        _DEFAULTS_CACHE = _read_defaults()
    return _DEFAULTS_CACHE


def get_defaults() -> dict[str, Any]:
    """Shallow copy of the whole defaults.yaml content.

    Example:
        >>> get_defaults()['global_parameters']['DFR-Ma']
        1.0
    """
    return _cached().copy()


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up a value by dotted path, e.g. 'global_parameters.DFR-Ma'.

    Args:
        key_path: Keys joined by '.'
        default: Returned when any key along the path is missing

    Example:
        >>> get_default('global_parameters.DFR-Beta')
        7.0
        >>> get_default('integration.nx', 300)
        300
    """
    node: Any = _cached()
    for key in key_path.split("."):
        if not isinstance(node, dict) or node.get(key) is None:
            return default
        node = node[key]
    return node


def get_global_parameters(section: str = "global_parameters") -> dict[str, Any]:
    """Copy of the global parameter list (empty if the section is absent)."""
    return dict(_cached().get(section) or {})


def reload_defaults() -> None:
    """Parse defaults.yaml again, e.g. after DFR_XSEC_DEFAULTS_PATH changed."""
    global _DEFAULTS_CACHE
    _DEFAULTS_CACHE = _read_defaults()
