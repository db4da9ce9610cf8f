"""
Parameter Resolver Module

Resolves named model parameters from two stores: the model's local
configuration and the shared global parameter list. A local value overrides
the global one; a parameter absent from both is a configuration error.
Resolution runs once per model construction and yields an immutable bundle.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dfr_xsec.config.defaults import DFR_PARAMETER_NAMES, GLOBAL_PARAMETERS_SECTION
from dfr_xsec.config.validation import ConfigurationError, validate_params
from dfr_xsec.config.yaml_loader import get_global_parameters

logger = logging.getLogger(__name__)


def _as_float(name: str, value: Any) -> float:
    # Accept plain values and {'value': ...} entries
    if isinstance(value, dict) and "value" in value:
        value = value["value"]
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Parameter '{name}' is not a real number: {value!r}") from e


class ParameterStore:
    """Two-level parameter lookup: local configuration over global defaults.

    Args:
        local: Model-local configuration (name -> value)
        global_: Shared global parameter list (name -> value). If None, the
            global_parameters section of defaults.yaml is used.
    """

    def __init__(
        self,
        local: Optional[Mapping[str, Any]] = None,
        global_: Optional[Mapping[str, Any]] = None,
    ):
        self._local = dict(local or {})
        if global_ is None:
            global_ = get_global_parameters(GLOBAL_PARAMETERS_SECTION)
        self._global = dict(global_)

    def get_local(self, name: str) -> Optional[float]:
        """Local value of a parameter, or None if not set locally."""
        value = self._local.get(name)
        if value is None:
            return None
        return _as_float(name, value)

    def get_global(self, name: str) -> float:
        """Global value of a parameter.

        Raises:
            ConfigurationError: If the parameter is not in the global list
        """
        value = self._global.get(name)
        if value is None:
            raise ConfigurationError(f"Missing required global parameter: {name}")
        return _as_float(name, value)

    def resolve(self, local_name: str, global_name: str) -> float:
        """Resolve a parameter: local value if present, else the global default.

        Args:
            local_name: Name in the local configuration (e.g. 'Ma')
            global_name: Name in the global parameter list (e.g. 'DFR-Ma')

        Returns:
            Parameter value

        Raises:
            ConfigurationError: If neither store holds the parameter
        """
        value = self.get_local(local_name)
        if value is not None:
            logger.debug(f"Parameter {local_name} = {value} (local)")
            return value

        if global_name not in self._global or self._global[global_name] is None:
            raise ConfigurationError(
                f"Missing required parameter: '{local_name}' is not set locally "
                f"and '{global_name}' is not in the global parameter list"
            )
        value = self.get_global(global_name)
        logger.debug(f"Parameter {local_name} = {value} (global {global_name})")
        return value


@dataclass(frozen=True)
class DiffractiveParams:
    """Resolved parameters of the diffractive cross section model.

    Attributes:
        Ma: Axial mass of the propagator term [GeV]
        beta: Slope of the exp(-beta |t|) dependence [GeV^-2]
    """
    Ma: float
    beta: float

    @property
    def Ma2(self) -> float:
        return self.Ma ** 2


def resolve_diffractive_params(
    local: Optional[Mapping[str, Any]] = None,
    global_: Optional[Mapping[str, Any]] = None,
) -> DiffractiveParams:
    """Resolve and validate the diffractive model parameters.

    Args:
        local: Model-local configuration
        global_: Global parameter list (defaults.yaml if None)

    Returns:
        Immutable DiffractiveParams

    Raises:
        ConfigurationError: If a parameter is missing or invalid
    """
    store = ParameterStore(local, global_)
    values = {
        local_name: store.resolve(local_name, global_name)
        for local_name, global_name in DFR_PARAMETER_NAMES.items()
    }
    params = DiffractiveParams(**values)
    validate_params(params)
    return params
