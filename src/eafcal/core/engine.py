from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .types import Date, Limits

class CalendarEngine(Protocol):
    @property
    def limits(self) -> Limits: ...
    def info(self) -> Dict[str, Any]: ...
    def to_date(self, n: int) -> Date: ...
    def to_rata_die(self, year: int, month: int, day: int) -> int: ...

@dataclass
class CalendarRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
