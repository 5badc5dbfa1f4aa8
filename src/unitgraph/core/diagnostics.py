"""Non-fatal diagnostics."""

from __future__ import annotations

import warnings

from unitgraph.contracts.methods import ConnectionMethod
from unitgraph.core.config import get_settings


class DefaultConnectionMethodWarning(UserWarning):
    """Emitted when ``Collection.connect`` picks a method on the caller's behalf."""


def warn_default_method(method: ConnectionMethod, *, self_targeted: bool, stacklevel: int = 3) -> None:
    if not get_settings().warnings:
        return
    scope = "self-targeted" if self_targeted else "external"
    warnings.warn(
        f"No collection connection method specified for {scope} connect, using {method.name}",
        DefaultConnectionMethodWarning,
        stacklevel=stacklevel,
    )


__all__ = ["DefaultConnectionMethodWarning", "warn_default_method"]
