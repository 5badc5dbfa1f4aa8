"""Contracts (interfaces/protocols) for unitgraph.

This package is *not* the public API surface. Only symbols re-exported from
:mod:`unitgraph.api` are considered semver-stable.
"""

from unitgraph.contracts.errors import (
    CardinalityMismatchError,
    InvalidTargetError,
    MissingConfigurationError,
    UnitGraphError,
)
from unitgraph.contracts.factories import IRegistry, Registry
from unitgraph.contracts.methods import (
    ConnectionMethod,
    GatingMethod,
    coerce_connection_method,
    coerce_gating_method,
)
from unitgraph.contracts.units import (
    IConnection,
    IUnit,
    PropagateOptions,
    UnitSettings,
    coerce_unit_settings,
)

__all__ = [
    # errors
    "UnitGraphError",
    "CardinalityMismatchError",
    "InvalidTargetError",
    "MissingConfigurationError",
    # factories
    "IRegistry",
    "Registry",
    # methods
    "ConnectionMethod",
    "GatingMethod",
    "coerce_connection_method",
    "coerce_gating_method",
    # units
    "IConnection",
    "IUnit",
    "PropagateOptions",
    "UnitSettings",
    "coerce_unit_settings",
]
