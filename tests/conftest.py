"""Pytest configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from tests.support import RecordingUnit, make_units
from unitgraph.architecture import Collection
from unitgraph.core.config import settings_override


@pytest.fixture(autouse=True)
def default_settings() -> Iterator[None]:
    """Every test starts from default settings and leaves them untouched."""
    with settings_override(warnings=True, strict_gating=True):
        yield


@pytest.fixture
def call_log() -> list[tuple[Any, ...]]:
    return []


@pytest.fixture
def collection_of(call_log: list[tuple[Any, ...]]) -> Callable[[str, int], Collection]:
    def _build(prefix: str, n: int) -> Collection:
        return Collection.of(make_units(prefix, n, call_log))

    return _build


@pytest.fixture
def unit(call_log: list[tuple[Any, ...]]) -> RecordingUnit:
    return RecordingUnit("solo", call_log)
