from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, CalendarRegistry
from .core.types import Date, Limits
from .engines.calendar import CalendarSpec
from .engines.factory import make_engine as _make_engine

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str) -> CalendarEngine:
    return _reg().get(name)

def calendar_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def limits(name: str) -> Limits:
    return _reg().get(name).limits

def to_date(n: int, *, calendar: str = "gregorian") -> Date:
    return _reg().get(calendar).to_date(n)

def to_rata_die(year: int, month: int, day: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).to_rata_die(year, month, day)

def make_engine(spec: CalendarSpec, *, debug: bool = False) -> CalendarEngine:
    return _make_engine(spec, debug=debug)

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)
