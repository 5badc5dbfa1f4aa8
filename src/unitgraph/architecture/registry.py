"""Identity-keyed connection registry.

A collection never owns connection values; it holds handles to the objects
returned by ``IUnit.connect``. Two collections that both register the same
connection therefore share one object rather than diverging copies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from unitgraph.contracts.units import IConnection


class ConnectionRegistry:
    """Insertion-ordered set of connections compared by identity."""

    __slots__ = ("_handles",)

    def __init__(self, connections: Iterable[IConnection] = ()) -> None:
        self._handles: dict[int, IConnection] = {}
        self.extend(connections)

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[IConnection]:
        return iter(list(self._handles.values()))

    def __contains__(self, connection: object) -> bool:
        return self._handles.get(id(connection)) is connection

    def __getitem__(self, index: int) -> IConnection:
        return list(self._handles.values())[index]

    def __repr__(self) -> str:
        return f"ConnectionRegistry(n={len(self._handles)})"

    def add(self, connection: IConnection) -> bool:
        """Register ``connection``; returns False when it was already present."""

        if connection is None:
            raise ValueError("connection must not be None")
        key = id(connection)
        if key in self._handles:
            return False
        self._handles[key] = connection
        return True

    def extend(self, connections: Iterable[IConnection]) -> None:
        for connection in connections:
            self.add(connection)

    def discard(self, connection: IConnection) -> bool:
        if connection not in self:
            return False
        del self._handles[id(connection)]
        return True

    def prune(self, predicate: Callable[[IConnection], bool]) -> int:
        """Drop every connection matching ``predicate`` and return how many went."""

        doomed = [key for key, conn in self._handles.items() if predicate(conn)]
        for key in doomed:
            del self._handles[key]
        return len(doomed)

    def prune_pair(self, from_unit: Any, to_unit: Any) -> int:
        return self.prune(
            lambda conn: getattr(conn, "from_unit", None) is from_unit
            and getattr(conn, "to_unit", None) is to_unit
        )

    def to_list(self) -> list[IConnection]:
        return list(self._handles.values())


__all__ = ["ConnectionRegistry"]
