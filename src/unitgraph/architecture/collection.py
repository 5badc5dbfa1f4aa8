"""Collections of units wired, driven and trained as one.

A collection is a construction aid: once its units are connected into a larger
graph they remain individually addressable, and the collection only keeps the
registries of connections it formed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, NamedTuple, TypeAlias

from unitgraph.architecture.registry import ConnectionRegistry
from unitgraph.contracts.errors import (
    CardinalityMismatchError,
    InvalidTargetError,
    MissingConfigurationError,
)
from unitgraph.contracts.factories import Registry
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
from unitgraph.core.config import get_settings
from unitgraph.core.diagnostics import warn_default_method

UnitFactory: TypeAlias = Callable[[], IUnit]

unit_factories: Registry[IUnit] = Registry(label="unit factory registry")


class _Target(NamedTuple):
    """Resolved connect/disconnect target: its units plus the owning collection, if any."""

    units: list[IUnit]
    collection: Collection | None


class Collection:
    """Ordered group of units plus self/incoming/outgoing connection registries.

    Member order is the activation order; ``propagate`` walks it in reverse.
    ``input_members``/``output_members`` optionally narrow which members face
    other collections; ``None`` means every member.
    """

    def __init__(self, size: int = 0, *, unit: str | UnitFactory | None = None) -> None:
        if size < 0:
            raise ValueError("size must be >= 0")

        self.members: list[IUnit] = []
        self.connections_self = ConnectionRegistry()
        self.connections_incoming = ConnectionRegistry()
        self.connections_outgoing = ConnectionRegistry()
        self.input_members: list[IUnit] | None = None
        self.output_members: list[IUnit] | None = None

        if size:
            factory = _resolve_factory(unit)
            self.members.extend(factory() for _ in range(size))

    @classmethod
    def of(cls, units: IUnit | Iterable[IUnit] | Collection) -> Collection:
        return cls().add_members(units)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[IUnit]:
        return iter(self.members)

    def __contains__(self, unit: object) -> bool:
        return any(member is unit for member in self.members)

    def __repr__(self) -> str:
        return (
            f"Collection(n={len(self.members)}, self={len(self.connections_self)}, "
            f"in={len(self.connections_incoming)}, out={len(self.connections_outgoing)})"
        )

    def expose(
        self,
        *,
        inputs: Iterable[IUnit] | None = None,
        outputs: Iterable[IUnit] | None = None,
    ) -> Collection:
        """Designate the members other collections connect into and out of."""

        input_members = self._own_units(inputs, port="inputs")
        output_members = self._own_units(outputs, port="outputs")
        self.input_members = input_members
        self.output_members = output_members
        return self

    # ------------------------------------------------------------------
    # execution
    # ------------------------------------------------------------------

    def activate(self, inputs: Sequence[float] | None = None) -> list[Any]:
        """Activate every member in index order and return their outputs.

        Upstream collections must already be activated; members pull their
        incoming values from the connections, not from this collection.
        """

        if inputs is not None and len(inputs) != len(self.members):
            raise CardinalityMismatchError(
                "Array with values should be same as the amount of members",
                expected=len(self.members),
                actual=len(inputs),
            )

        outputs: list[Any] = []
        for index, member in enumerate(self.members):
            outputs.append(member.activate() if inputs is None else member.activate(inputs[index]))
        return outputs

    def propagate(
        self,
        target: Sequence[float] | PropagateOptions | Mapping[str, Any] | None = None,
        options: PropagateOptions | Mapping[str, Any] | None = None,
    ) -> list[Any]:
        """Backpropagate every member, last member first.

        A single options record may be passed in place of ``target``. Results
        come back in visiting order, so the last member's record is first.
        ``options`` reaches every member exactly as given.
        """

        if options is None and isinstance(target, PropagateOptions | Mapping):
            target, options = None, target

        values = target
        if values is not None and len(values) != len(self.members):
            raise CardinalityMismatchError(
                "Array with values should be same as the amount of members",
                expected=len(self.members),
                actual=len(values),
            )

        errors: list[Any] = []
        for index in range(len(self.members) - 1, -1, -1):
            member = self.members[index]
            if values is None:
                errors.append(member.propagate(options=options))
            else:
                errors.append(member.propagate(values[index], options=options))
        return errors

    # ------------------------------------------------------------------
    # topology
    # ------------------------------------------------------------------

    def connect(
        self,
        target: Collection | IUnit,
        method: ConnectionMethod | str | None = None,
        weight: float | None = None,
    ) -> list[IConnection]:
        """Connect this collection's outputs to ``target``.

        Returns the formed connections in formation order: targets in the
        outer loop, sources in the inner loop (pairwise for ONE_TO_ONE).
        """

        resolved = _resolve_target(target, port="input")
        if not resolved.units:
            raise InvalidTargetError("Target of connect resolves to no units")
        self_targeted = self._is_self_target(resolved.collection)

        if method is None:
            method = ConnectionMethod.ONE_TO_ONE if self_targeted else ConnectionMethod.ALL_TO_ALL
            warn_default_method(method, self_targeted=self_targeted)
        else:
            method = coerce_connection_method(method)

        sources = list(self.output_members if self.output_members is not None else self.members)
        targets = resolved.units

        if method is ConnectionMethod.ONE_TO_ONE and len(sources) != len(targets):
            raise CardinalityMismatchError(
                "One-to-one connections require equal number of source and target units",
                expected=len(sources),
                actual=len(targets),
            )

        formed: list[IConnection] = []
        linked: list[tuple[IUnit, IUnit]] = []
        try:
            for source, dest in self._pairs(sources, targets, method):
                formed.append(source.connect(dest, weight))
                linked.append((source, dest))
        except Exception:
            for source, dest in reversed(linked):
                source.disconnect(dest, twosided=False)
            raise

        # Registries change only once every unit-level link exists.
        for connection in formed:
            if self_targeted:
                self.connections_self.add(connection)
            else:
                self.connections_outgoing.add(connection)
                if resolved.collection is not None:
                    resolved.collection.connections_incoming.add(connection)
        return formed

    def gate(
        self,
        connections: IConnection | Iterable[IConnection],
        method: GatingMethod | str | None = None,
    ) -> None:
        """Make members gate ``connections``, assigned round-robin by endpoint position.

        The i-th distinct endpoint (first-seen order) is gated by
        ``members[i % len(members)]``.
        """

        if method is None:
            raise MissingConfigurationError(
                "Please specify GatingMethod.INPUT, GatingMethod.OUTPUT or GatingMethod.SELF"
            )
        method = coerce_gating_method(method)

        if isinstance(connections, IConnection):
            connections = [connections]
        wanted = list(connections)
        for connection in wanted:
            if not isinstance(connection, IConnection):
                raise InvalidTargetError(f"Cannot gate {type(connection).__name__}; expected a connection")
        if not wanted:
            return
        if not self.members:
            if get_settings().strict_gating:
                raise CardinalityMismatchError("Cannot gate connections with an empty collection")
            return

        wanted_ids = {id(connection) for connection in wanted}
        from_units = _distinct(connection.from_unit for connection in wanted)
        to_units = _distinct(connection.to_unit for connection in wanted)

        if method is GatingMethod.INPUT:
            endpoints, attr = to_units, "connections_incoming"
        elif method is GatingMethod.OUTPUT:
            endpoints, attr = from_units, "connections_outgoing"
        else:
            endpoints, attr = from_units, "connections_self"

        for index, unit in enumerate(endpoints):
            gater = self.members[index % len(self.members)]
            for connection in list(getattr(unit, attr)):
                if id(connection) in wanted_ids:
                    gater.gate(connection)

    def disconnect(self, target: Collection | IUnit, twosided: bool = False) -> None:
        """Sever links between every member and ``target``, then prune registries.

        Pruning tolerates entries that are already gone, so repeated calls are safe.
        """

        resolved = _resolve_target(target, port=None)
        self_targeted = self._is_self_target(resolved.collection)

        for member in list(self.members):
            for other in resolved.units:
                member.disconnect(other, twosided=twosided)
                if self_targeted:
                    self.connections_self.prune_pair(member, other)
                    if twosided:
                        self.connections_self.prune_pair(other, member)
                    continue

                self.connections_outgoing.prune_pair(member, other)
                if resolved.collection is not None:
                    resolved.collection.connections_incoming.prune_pair(member, other)
                if twosided:
                    self.connections_incoming.prune_pair(other, member)
                    if resolved.collection is not None:
                        resolved.collection.connections_outgoing.prune_pair(other, member)

    # ------------------------------------------------------------------
    # configuration and membership
    # ------------------------------------------------------------------

    def set(self, settings: UnitSettings | Mapping[str, Any]) -> None:
        """Apply every provided field of ``settings`` to every member."""

        resolved = coerce_unit_settings(settings)
        assignments = resolved.items()
        for member in self.members:
            for name, value in assignments:
                setattr(member, name, value)

    def add_members(self, units: IUnit | Iterable[IUnit] | Collection) -> Collection:
        """Append units (or another collection's members) after the current members."""

        if isinstance(units, Collection):
            incoming = list(units.members)
        elif isinstance(units, IUnit):
            incoming = [units]
        elif isinstance(units, Iterable):
            incoming = list(units)
            for unit in incoming:
                if isinstance(unit, Collection) or not isinstance(unit, IUnit):
                    raise InvalidTargetError(f"Cannot add {type(unit).__name__} as a member")
        else:
            raise InvalidTargetError(f"Cannot add {type(units).__name__} as members")

        self.members.extend(incoming)
        return self

    def clear(self) -> Collection:
        for member in self.members:
            member.clear()
        return self

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _is_self_target(self, other: Collection | None) -> bool:
        return other is not None and (other is self or other.members is self.members)

    def _own_units(self, units: Iterable[IUnit] | None, *, port: str) -> list[IUnit] | None:
        if units is None:
            return None
        selected = list(units)
        for unit in selected:
            if unit not in self:
                raise InvalidTargetError(f"{port} must be drawn from this collection's members")
        return selected

    @staticmethod
    def _pairs(
        sources: list[IUnit],
        targets: list[IUnit],
        method: ConnectionMethod,
    ) -> list[tuple[IUnit, IUnit]]:
        if method is ConnectionMethod.ONE_TO_ONE:
            return list(zip(sources, targets, strict=True))

        # ALL_TO_ELSE skips any target that is also a source, not only the self pair.
        excluded = {id(source) for source in sources} if method is ConnectionMethod.ALL_TO_ELSE else set()
        return [
            (source, dest)
            for dest in targets
            if id(dest) not in excluded
            for source in sources
        ]


def _resolve_target(target: Any, *, port: str | None) -> _Target:
    if isinstance(target, Collection):
        units = target.members
        if port == "input" and target.input_members is not None:
            units = target.input_members
        return _Target(units=list(units), collection=target)
    if isinstance(target, IUnit):
        return _Target(units=[target], collection=None)
    raise InvalidTargetError(f"Type of target not supported: {type(target).__name__}")


def _resolve_factory(unit: str | UnitFactory | None) -> UnitFactory:
    if unit is None:
        raise MissingConfigurationError(
            "A unit factory (callable or registered key) is required to build members"
        )
    if isinstance(unit, str):
        return unit_factories.resolve(unit)
    if not callable(unit):
        raise MissingConfigurationError(f"unit must be a callable or registry key, got {type(unit).__name__}")
    return unit


def _distinct(units: Iterable[IUnit]) -> list[IUnit]:
    seen: set[int] = set()
    ordered: list[IUnit] = []
    for unit in units:
        if id(unit) not in seen:
            seen.add(id(unit))
            ordered.append(unit)
    return ordered


__all__ = ["Collection", "UnitFactory", "unit_factories"]
