"""Public façade (stable API surface).

Only symbols re-exported from here are considered public and semver-stable.
Internal modules may change without notice.
"""

from unitgraph.api.version import __version__
from unitgraph.architecture.collection import Collection, UnitFactory, unit_factories
from unitgraph.architecture.registry import ConnectionRegistry
from unitgraph.connectivity.topology_compile import CompiledConnections, compile_connections
from unitgraph.contracts.errors import (
    CardinalityMismatchError,
    InvalidTargetError,
    MissingConfigurationError,
    UnitGraphError,
)
from unitgraph.contracts.factories import Registry
from unitgraph.contracts.methods import ConnectionMethod, GatingMethod
from unitgraph.contracts.units import IConnection, IUnit, PropagateOptions, UnitSettings
from unitgraph.core.config import Settings, configure, get_settings, settings_override
from unitgraph.core.diagnostics import DefaultConnectionMethodWarning

__all__ = [
    "__version__",
    # collections
    "Collection",
    "ConnectionRegistry",
    "UnitFactory",
    "unit_factories",
    # contracts
    "IUnit",
    "IConnection",
    "PropagateOptions",
    "UnitSettings",
    "ConnectionMethod",
    "GatingMethod",
    "Registry",
    # errors
    "UnitGraphError",
    "CardinalityMismatchError",
    "InvalidTargetError",
    "MissingConfigurationError",
    # settings and diagnostics
    "Settings",
    "configure",
    "get_settings",
    "settings_override",
    "DefaultConnectionMethodWarning",
    # connectivity
    "CompiledConnections",
    "compile_connections",
]
