from __future__ import annotations

import pytest

from unitgraph.connectivity import compile_connections
from unitgraph.contracts import ConnectionMethod, InvalidTargetError

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def test_compile_outgoing_connections(collection_of):
    a = collection_of("a", 2)
    b = collection_of("b", 3)
    a.connect(b, ConnectionMethod.ALL_TO_ALL, weight=0.5)

    compiled = compile_connections(a, b, dtype="float32")

    assert compiled.pre_idx.dtype == torch.int64
    assert compiled.pre_idx.tolist() == [0, 1, 0, 1, 0, 1]
    assert compiled.post_idx.tolist() == [0, 0, 1, 1, 2, 2]
    assert compiled.weights.dtype == torch.float32
    assert compiled.weights.tolist() == [0.5] * 6
    assert (compiled.n_pre, compiled.n_post) == (2, 3)


def test_compile_self_connections_defaults_missing_weights(collection_of):
    a = collection_of("a", 3)
    a.connect(a, ConnectionMethod.ONE_TO_ONE)

    compiled = compile_connections(a)

    assert compiled.pre_idx.tolist() == [0, 1, 2]
    assert compiled.post_idx.tolist() == [0, 1, 2]
    assert compiled.weights.tolist() == [0.0, 0.0, 0.0]


def test_compile_skips_edges_to_other_targets(collection_of, unit):
    a = collection_of("a", 2)
    b = collection_of("b", 1)
    a.connect(b, ConnectionMethod.ALL_TO_ALL)
    a.connect(unit, ConnectionMethod.ALL_TO_ALL)

    compiled = compile_connections(a, unit)

    assert compiled.pre_idx.tolist() == [0, 1]
    assert compiled.post_idx.tolist() == [0, 0]


def test_compile_rejects_invalid_target(collection_of):
    with pytest.raises(InvalidTargetError):
        compile_connections(collection_of("a", 1), 42)
