"""Process-wide settings."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Any

from unitgraph.contracts.errors import MissingConfigurationError

_FALSEY = {"0", "false", "no", "off"}


@dataclass(slots=True)
class Settings:
    warnings: bool = True
    strict_gating: bool = True


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSEY


_SETTINGS = Settings(warnings=_env_flag("UNITGRAPH_WARNINGS", True))


def get_settings() -> Settings:
    return _SETTINGS


def configure(**values: Any) -> Settings:
    """Update named settings in place and return the live instance."""

    known = {f.name for f in fields(Settings)}
    unknown = set(values) - known
    if unknown:
        raise MissingConfigurationError(
            f"Unknown settings: {', '.join(sorted(unknown))}. Supported: {', '.join(sorted(known))}"
        )
    for name, value in values.items():
        setattr(_SETTINGS, name, bool(value))
    return _SETTINGS


@contextmanager
def settings_override(**values: Any) -> Iterator[Settings]:
    previous = {f.name: getattr(_SETTINGS, f.name) for f in fields(Settings)}
    try:
        yield configure(**values)
    finally:
        for name, value in previous.items():
            setattr(_SETTINGS, name, value)


__all__ = ["Settings", "configure", "get_settings", "settings_override"]
