"""Ambient services: settings, diagnostics, optional torch."""

from unitgraph.core.config import Settings, configure, get_settings, settings_override
from unitgraph.core.diagnostics import DefaultConnectionMethodWarning, warn_default_method

__all__ = [
    "Settings",
    "configure",
    "get_settings",
    "settings_override",
    "DefaultConnectionMethodWarning",
    "warn_default_method",
]
