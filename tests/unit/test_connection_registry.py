from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from tests.support import Link, RecordingUnit
from unitgraph.architecture import ConnectionRegistry

pytestmark = pytest.mark.unit


@dataclass
class ValueLink:
    from_unit: Any
    to_unit: Any
    gater: Any = None


def test_registry_keeps_insertion_order_and_dedupes_by_identity():
    a, b = RecordingUnit("a"), RecordingUnit("b")
    first = Link(a, b)
    second = Link(b, a)
    registry = ConnectionRegistry([first, second])

    assert registry.add(first) is False
    assert registry.to_list() == [first, second]
    assert registry[1] is second


def test_registry_distinguishes_equal_values():
    a, b = RecordingUnit("a"), RecordingUnit("b")
    one, two = ValueLink(a, b), ValueLink(a, b)
    assert one == two

    registry = ConnectionRegistry([one, two])

    assert len(registry) == 2
    registry.discard(one)
    assert two in registry
    assert one not in registry


def test_prune_pair_matches_direction():
    a, b = RecordingUnit("a"), RecordingUnit("b")
    forward, backward = Link(a, b), Link(b, a)
    registry = ConnectionRegistry([forward, backward])

    assert registry.prune_pair(a, b) == 1
    assert registry.prune_pair(a, b) == 0
    assert registry.to_list() == [backward]


def test_discard_missing_is_tolerated():
    registry = ConnectionRegistry()

    assert registry.discard(Link(None, None)) is False


def test_none_is_rejected():
    with pytest.raises(ValueError):
        ConnectionRegistry().add(None)
