"""
eafcal.engines.calendar
-----------------------
Binds one conversion variant to an integer width (and, for the optimised
Gregorian variant, to an epoch shift and a cycle count).

The conversions themselves stay unchecked. Range checking is a separate,
explicit step: `check_*` answer whether an input is inside the documented
domain, `require_*` raise DomainError, and a calendar built with debug=True
logs a warning before converting an out-of-domain input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict

from ..core.arith import IntWidth, int_width
from ..core.errors import ConfigError, DomainError
from ..core.types import CalendarId, Date, Limits
from . import gregorian, julian
from .limits import gregorian_opt_limits, plain_limits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing an EafCalendar."""
    id: CalendarId
    epoch: int = 0
    s: int = 0
    debug: bool = False

    def __post_init__(self) -> None:
        if self.id.kind not in ("julian", "gregorian", "gregorian-opt"):
            raise ConfigError(f"Unknown calendar kind '{self.id.kind}'")
        if self.id.kind != "gregorian-opt" and (self.epoch or self.s):
            raise ConfigError("epoch and s only apply to the optimised Gregorian calendar")
        if self.id.bits not in (32, 64):
            raise ConfigError(f"bits must be 32 or 64, got {self.id.bits}")

    @property
    def width(self) -> IntWidth:
        return int_width(self.id.bits)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


class EafCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.width = spec.width
        if spec.id.kind == "gregorian-opt":
            self._limits = gregorian_opt_limits(self.width, spec.epoch, spec.s)
        else:
            self._limits = plain_limits(self.width)

    @property
    def limits(self) -> Limits:
        return self._limits

    def info(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "kind": self.spec.id.kind,
            "name": self.spec.id.name,
            "bits": self.width.bits,
            "rata_die_min": self._limits.rata_die_min,
            "rata_die_max": self._limits.rata_die_max,
            "date_min": self._limits.date_min,
            "date_max": self._limits.date_max,
        }
        if self.spec.id.kind == "gregorian-opt":
            out["epoch"] = self.spec.epoch
            out["s"] = self.spec.s
        return out

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def check_rata_die(self, n: int) -> bool:
        return self._limits.contains_rata_die(n)

    def check_date(self, d: Date) -> bool:
        return self._limits.contains_date(d)

    def require_rata_die(self, n: int) -> int:
        if not self.check_rata_die(n):
            raise DomainError(
                f"{self.spec.id.name}: rata die {n} not in "
                f"[{self._limits.rata_die_min}, {self._limits.rata_die_max}]"
            )
        return n

    def require_date(self, d: Date) -> Date:
        if not self.check_date(d):
            raise DomainError(
                f"{self.spec.id.name}: date {d} not in [{self._limits.date_min}, {self._limits.date_max}]"
            )
        return d

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_date(self, n: int) -> Date:
        if self.spec.debug and not self.check_rata_die(n):
            logger.warning("%s: rata die %d is out of bounds, the result is undefined", self.spec.id.name, n)
        kind = self.spec.id.kind
        if kind == "julian":
            return julian.to_date(n)
        if kind == "gregorian":
            return gregorian.to_date(n)
        return gregorian.to_date_opt(n, width=self.width, epoch=self.spec.epoch, s=self.spec.s)

    def to_rata_die(self, year: int, month: int, day: int) -> int:
        if self.spec.debug and not self.check_date(Date(year, month, day)):
            logger.warning("%s: date %d-%d-%d is out of bounds, the result is undefined",
                           self.spec.id.name, year, month, day)
        kind = self.spec.id.kind
        if kind == "julian":
            return julian.to_rata_die(year, month, day)
        if kind == "gregorian":
            return gregorian.to_rata_die(year, month, day)
        return gregorian.to_rata_die_opt(year, month, day, width=self.width,
                                         epoch=self.spec.epoch, s=self.spec.s)


def build_calendar(spec: CalendarSpec) -> EafCalendar:
    return EafCalendar(spec)
