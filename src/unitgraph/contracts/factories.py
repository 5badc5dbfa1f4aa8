"""Factory registry contracts.

Collections build their initial members through a named registry so callers can
register, alias, or retire unit implementations without touching collection code.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Mapping
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IRegistry(Protocol[T]):
    """Named registry mapping string keys to constructors."""

    def register(self, key: str, ctor: Callable[..., T]) -> None:
        ...

    def create(self, key: str, **kwargs: Any) -> T:
        ...

    def resolve(self, key: str) -> Callable[..., T]:
        ...

    def keys(self) -> list[str]:
        ...


class Registry(IRegistry[T], Generic[T]):
    """Named registry with optional aliasing and deprecations."""

    def __init__(self, *, label: str | None = None) -> None:
        self._label = label or "registry"
        self._ctors: dict[str, Callable[..., T]] = {}
        self._aliases: dict[str, str] = {}
        self._deprecated: dict[str, str | None] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._ctors or key in self._aliases

    def register(self, key: str, ctor: Callable[..., T]) -> None:
        if key in self:
            raise KeyError(f"{self._label} already has key '{key}'.")
        self._ctors[key] = ctor

    def unregister(self, key: str) -> None:
        if key not in self._ctors:
            raise KeyError(f"{self._label} has no key '{key}'.")
        del self._ctors[key]
        for alias in [a for a, target in self._aliases.items() if target == key]:
            del self._aliases[alias]
            self._deprecated.pop(alias, None)
        self._deprecated.pop(key, None)

    def register_alias(self, alias: str, target: str, *, deprecated: bool = False) -> None:
        if alias in self:
            raise KeyError(f"{self._label} already has key '{alias}'.")
        if target not in self._ctors:
            raise KeyError(f"{self._label} has no target '{target}' for alias '{alias}'.")
        self._aliases[alias] = target
        if deprecated:
            self._deprecated[alias] = target

    def deprecate(self, key: str, *, replacement: str | None = None) -> None:
        if key not in self:
            raise KeyError(f"{self._label} has no key '{key}' to deprecate.")
        self._deprecated[key] = replacement

    def resolve(self, key: str) -> Callable[..., T]:
        resolved = self._aliases.get(key, key)
        if resolved not in self._ctors:
            raise KeyError(f"{self._label} has no key '{key}'.")
        self._warn_if_deprecated(key, resolved)
        return self._ctors[resolved]

    def create(self, key: str, **kwargs: Any) -> T:
        return self.resolve(key)(**kwargs)

    def keys(self) -> list[str]:
        return sorted(set(self._ctors) | set(self._aliases))

    def mapping(self) -> Mapping[str, Callable[..., T]]:
        return dict(self._ctors)

    def _warn_if_deprecated(self, key: str, resolved: str) -> None:
        if key in self._deprecated:
            _warn_deprecated(self._label, key, self._deprecated[key])
        elif resolved in self._deprecated:
            _warn_deprecated(self._label, resolved, self._deprecated[resolved])


def _warn_deprecated(label: str, key: str, replacement: str | None) -> None:
    if replacement:
        message = f"{label} key '{key}' is deprecated; use '{replacement}' instead."
    else:
        message = f"{label} key '{key}' is deprecated."
    warnings.warn(message, DeprecationWarning, stacklevel=4)


__all__ = ["IRegistry", "Registry"]
