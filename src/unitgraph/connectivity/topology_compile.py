"""Compile collection registries into edge-index tensors."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from unitgraph.architecture.collection import Collection
from unitgraph.contracts.errors import InvalidTargetError
from unitgraph.contracts.units import IConnection, IUnit
from unitgraph.core.torch_utils import require_torch, resolve_dtype

if TYPE_CHECKING:
    import torch
    Tensor: TypeAlias = "torch.Tensor"
else:
    Tensor: TypeAlias = Any


@dataclass(frozen=True, slots=True)
class CompiledConnections:
    """Edge-indexed view of a set of connections.

    pre_idx/post_idx index into the source and target member lists; weights is
    aligned with them. n_pre/n_post are the member counts used for indexing.
    """

    pre_idx: Tensor   # shape [E] (int64)
    post_idx: Tensor  # shape [E] (int64)
    weights: Tensor   # shape [E] (float)
    n_pre: int
    n_post: int


def compile_connections(
    collection: Collection,
    target: Collection | IUnit | None = None,
    *,
    device: Any = None,
    dtype: Any = None,
) -> CompiledConnections:
    """Compile ``collection``'s connections towards ``target`` into tensors.

    Without a target (or with the collection itself) the self registry is
    compiled; otherwise the outgoing registry, restricted to edges that land
    on ``target``'s members. Edges with endpoints outside the relevant
    members are skipped.
    """

    torch = require_torch()
    device_obj = torch.device(device) if device is not None else None
    dtype_obj = resolve_dtype(torch, dtype)

    sources = collection.members
    if target is None or target is collection:
        targets = collection.members
        registry: Iterable[IConnection] = collection.connections_self
    elif isinstance(target, Collection):
        targets = target.members
        registry = collection.connections_outgoing
    elif isinstance(target, IUnit):
        targets = [target]
        registry = collection.connections_outgoing
    else:
        raise InvalidTargetError(f"Type of target not supported: {type(target).__name__}")

    pre_lookup = _index_by_identity(sources)
    post_lookup = _index_by_identity(targets)

    pre: list[int] = []
    post: list[int] = []
    weights: list[float] = []
    for connection in registry:
        pre_i = pre_lookup.get(id(connection.from_unit))
        post_i = post_lookup.get(id(connection.to_unit))
        if pre_i is None or post_i is None:
            continue
        pre.append(pre_i)
        post.append(post_i)
        weight = getattr(connection, "weight", None)
        weights.append(0.0 if weight is None else float(weight))

    return CompiledConnections(
        pre_idx=torch.tensor(pre, device=device_obj, dtype=torch.int64),
        post_idx=torch.tensor(post, device=device_obj, dtype=torch.int64),
        weights=torch.tensor(weights, device=device_obj, dtype=dtype_obj),
        n_pre=len(sources),
        n_post=len(targets),
    )


def _index_by_identity(units: Iterable[IUnit]) -> dict[int, int]:
    lookup: dict[int, int] = {}
    for index, unit in enumerate(units):
        lookup.setdefault(id(unit), index)
    return lookup


__all__ = ["CompiledConnections", "compile_connections"]
