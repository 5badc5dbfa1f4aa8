from __future__ import annotations

import pytest

from unitgraph.contracts import CardinalityMismatchError, PropagateOptions

pytestmark = pytest.mark.unit


def test_activate_drives_members_in_index_order(collection_of, call_log):
    group = collection_of("n", 3)

    outputs = group.activate([1.0, 0.0, 0.5])

    assert outputs == [("n0", 1.0), ("n1", 0.0), ("n2", 0.5)]
    assert call_log == [("activate", "n0", 1.0), ("activate", "n1", 0.0), ("activate", "n2", 0.5)]


def test_activate_without_inputs_free_runs(collection_of, call_log):
    group = collection_of("n", 2)

    outputs = group.activate()

    assert outputs == [("n0", None), ("n1", None)]
    assert [entry[1] for entry in call_log] == ["n0", "n1"]


def test_activate_rejects_mismatched_inputs(collection_of, call_log):
    group = collection_of("n", 3)

    with pytest.raises(CardinalityMismatchError) as excinfo:
        group.activate([1.0, 2.0])

    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2
    assert call_log == []


def test_propagate_visits_members_in_reverse(collection_of, call_log):
    group = collection_of("n", 3)

    errors = group.propagate([0.0, 0.5, 1.0])

    assert errors == [
        {"unit": "n2", "target": 1.0},
        {"unit": "n1", "target": 0.5},
        {"unit": "n0", "target": 0.0},
    ]
    assert [entry[1] for entry in call_log] == ["n2", "n1", "n0"]


def test_propagate_without_target_passes_options_only(collection_of, call_log):
    group = collection_of("n", 2)
    options = PropagateOptions(rate=0.3, momentum=0.9, update=False)

    errors = group.propagate(options=options)

    assert [e["target"] for e in errors] == [None, None]
    assert all(entry[3] is options for entry in call_log)


def test_propagate_accepts_options_as_sole_argument(collection_of, call_log):
    group = collection_of("n", 2)
    options = {"rate": 0.1, "momentum": 0.9, "update": False}

    group.propagate(options)

    assert all(entry[2] is None for entry in call_log)
    assert all(entry[3] is options for entry in call_log)


def test_propagate_passes_options_through_uninterpreted(collection_of, call_log):
    group = collection_of("n", 2)
    options = {"rate": "0.1", "dropout": 0.5}

    group.propagate([0.0, 1.0], options)

    assert all(entry[3] is options for entry in call_log)
    assert options == {"rate": "0.1", "dropout": 0.5}


def test_propagate_without_options_passes_none(collection_of, call_log):
    group = collection_of("n", 1)

    group.propagate()

    assert call_log[0][3] is None


def test_propagate_rejects_mismatched_target(collection_of, call_log):
    group = collection_of("n", 3)

    with pytest.raises(CardinalityMismatchError):
        group.propagate([1.0], {"rate": 0.1})

    assert call_log == []


def test_forward_then_backward_across_collections(collection_of, call_log):
    a = collection_of("a", 2)
    b = collection_of("b", 2)
    a.connect(b, "all_to_all")

    a.activate([1.0, 0.0])
    b.activate()
    b.propagate([0.0, 1.0])
    a.propagate()

    order = [(entry[0], entry[1]) for entry in call_log]
    assert order == [
        ("activate", "a0"),
        ("activate", "a1"),
        ("activate", "b0"),
        ("activate", "b1"),
        ("propagate", "b1"),
        ("propagate", "b0"),
        ("propagate", "a1"),
        ("propagate", "a0"),
    ]
