"""Connection and gating method enumerations."""

from __future__ import annotations

from enum import StrEnum


class ConnectionMethod(StrEnum):
    ONE_TO_ONE = "one_to_one"
    ALL_TO_ALL = "all_to_all"
    ALL_TO_ELSE = "all_to_else"


class GatingMethod(StrEnum):
    INPUT = "input"
    OUTPUT = "output"
    SELF = "self"


def coerce_connection_method(method: ConnectionMethod | str) -> ConnectionMethod:
    if isinstance(method, ConnectionMethod):
        return method
    try:
        return ConnectionMethod(str(method).strip().lower())
    except ValueError as exc:
        supported = ", ".join(member.name for member in ConnectionMethod)
        raise ValueError(f"Unsupported connection method '{method}'. Supported: {supported}") from exc


def coerce_gating_method(method: GatingMethod | str) -> GatingMethod:
    if isinstance(method, GatingMethod):
        return method
    try:
        return GatingMethod(str(method).strip().lower())
    except ValueError as exc:
        supported = ", ".join(member.name for member in GatingMethod)
        raise ValueError(f"Unsupported gating method '{method}'. Supported: {supported}") from exc


__all__ = [
    "ConnectionMethod",
    "GatingMethod",
    "coerce_connection_method",
    "coerce_gating_method",
]
