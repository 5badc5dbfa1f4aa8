"""Torch utilities shared across the codebase."""

from __future__ import annotations

import importlib
from typing import Any


def require_torch() -> Any:
    try:
        return importlib.import_module("torch")
    except Exception as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("Torch is required to compile unitgraph connections.") from exc


def resolve_dtype(t: Any, dtype: Any) -> Any:
    if dtype is None:
        return t.get_default_dtype()
    if not isinstance(dtype, str):
        return dtype
    name = dtype
    if name.startswith("torch."):
        name = name.split(".", 1)[1]
    if not hasattr(t, name):
        raise ValueError(f"Unknown torch dtype: {dtype}")
    return getattr(t, name)


__all__ = ["require_torch", "resolve_dtype"]
