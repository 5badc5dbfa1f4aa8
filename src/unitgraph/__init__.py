"""unitgraph: collection-level wiring and pass ordering for unit graphs."""

from unitgraph.api.version import __version__

__all__ = ["__version__"]
