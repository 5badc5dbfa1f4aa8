"""Unit and connection contracts.

Design goals:
- **Units own the math**: activation, gradients and weights live behind ``IUnit``.
- **Collections own the wiring**: grouping, connection policy and pass ordering.
- **Identity matters**: units and connections are compared with ``is``, never ``==``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Protocol, runtime_checkable

from unitgraph.contracts.errors import MissingConfigurationError


@runtime_checkable
class IConnection(Protocol):
    """Directed edge between two units, optionally gated by a third."""

    from_unit: Any
    to_unit: Any
    gater: Any


@runtime_checkable
class IUnit(Protocol):
    """Atomic computational node consumed by collections."""

    connections_incoming: Sequence[IConnection]
    connections_outgoing: Sequence[IConnection]
    connections_self: Sequence[IConnection]

    def activate(self, value: float | None = None) -> Any:
        """Compute and return this unit's output, optionally driven by ``value``."""
        ...

    def propagate(
        self,
        target: float | None = None,
        options: PropagateOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        """Backpropagate and return the unit's responsibility record."""
        ...

    def connect(self, other: IUnit, weight: float | None = None) -> IConnection:
        ...

    def disconnect(self, other: IUnit, *, twosided: bool = False) -> None:
        ...

    def gate(self, connection: IConnection) -> None:
        ...

    def clear(self) -> None:
        """Drop transient trace state; weights are kept."""
        ...


@dataclass(frozen=True, slots=True)
class PropagateOptions:
    """Backward-pass options handed to every unit unchanged.

    rate: learning rate.
    momentum: fraction of the previous weight update that is retained.
    update: when False the unit computes its deltas without committing them.
    """

    rate: float | None = None
    momentum: float | None = None
    update: bool = True


@dataclass(slots=True)
class UnitSettings:
    """Unit fields broadcast by ``Collection.set``; ``None`` leaves a field untouched."""

    bias: float | None = None
    squash: Callable[..., Any] | None = None

    def items(self) -> list[tuple[str, Any]]:
        return [
            (f.name, getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]


def coerce_unit_settings(settings: UnitSettings | Mapping[str, Any]) -> UnitSettings:
    if isinstance(settings, UnitSettings):
        return settings
    if not isinstance(settings, Mapping):
        raise MissingConfigurationError(
            "settings must be UnitSettings or a mapping of unit fields to values"
        )

    known = {f.name for f in fields(UnitSettings)}
    unknown = set(settings) - known
    if unknown:
        raise ValueError(
            f"Unknown unit settings: {', '.join(sorted(unknown))}. Supported: {', '.join(sorted(known))}"
        )
    return UnitSettings(**dict(settings))


__all__ = [
    "IConnection",
    "IUnit",
    "PropagateOptions",
    "UnitSettings",
    "coerce_unit_settings",
]
