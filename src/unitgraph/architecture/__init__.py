"""Collections and their connection registries."""

from unitgraph.architecture.collection import Collection, UnitFactory, unit_factories
from unitgraph.architecture.registry import ConnectionRegistry

__all__ = ["Collection", "ConnectionRegistry", "UnitFactory", "unit_factories"]
