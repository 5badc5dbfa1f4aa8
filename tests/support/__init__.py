from __future__ import annotations

from .units import Link, RecordingUnit, RefusingUnit, make_units

__all__ = ["Link", "RecordingUnit", "RefusingUnit", "make_units"]
