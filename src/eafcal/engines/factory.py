"""
eafcal.engines.factory
----------------------
Turns named calendar configurations into live calendar engines.
"""

from __future__ import annotations

from ..core.config import default_width
from ..core.engine import CalendarEngine, CalendarRegistry
from .calendar import CalendarSpec, build_calendar
from .specs import ALL_SPECS, BASE_NAMES


def make_engine(spec: CalendarSpec, *, debug: bool = False) -> CalendarEngine:
    """The universal entry point."""
    if debug and not spec.debug:
        spec = spec.tweak(debug=True)
    return build_calendar(spec)


def build_registry(*, debug: bool = False) -> CalendarRegistry:
    engines = {name: make_engine(spec, debug=debug) for name, spec in ALL_SPECS.items()}
    bits = default_width().bits
    for base in BASE_NAMES:
        engines[base] = engines[f"{base}{bits}"]
    return CalendarRegistry(engines)
