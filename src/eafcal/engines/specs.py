"""
eafcal.engines.specs
--------------------
Named calendar configurations, one per (variant, width).
"""

from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarKind
from .calendar import CalendarSpec
from .gregorian import UNIX_CYCLES, UNIX_EPOCH

WIDTHS = (32, 64)

# Unsuffixed base names; the registry also exposes them at the configured width.
BASE_NAMES = ("julian", "gregorian", "gregorian-opt", "gregorian-unix")


def _spec(base: str, kind: CalendarKind, bits: int, *, epoch: int = 0, s: int = 0) -> CalendarSpec:
    return CalendarSpec(id=CalendarId(kind=kind, name=f"{base}{bits}", bits=bits), epoch=epoch, s=s)


def _build_all() -> Dict[str, CalendarSpec]:
    out: Dict[str, CalendarSpec] = {}
    for bits in WIDTHS:
        for spec in (
            _spec("julian", "julian", bits),
            _spec("gregorian", "gregorian", bits),
            _spec("gregorian-opt", "gregorian-opt", bits),
            # 1 January 1970 is rata die 0.
            _spec("gregorian-unix", "gregorian-opt", bits, epoch=UNIX_EPOCH, s=UNIX_CYCLES),
        ):
            out[spec.id.name] = spec
    return out


ALL_SPECS: Dict[str, CalendarSpec] = _build_all()
