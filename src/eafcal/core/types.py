from __future__ import annotations
from dataclasses import astuple, dataclass
from datetime import date
from typing import Literal, Tuple

@dataclass(frozen=True, order=True)
class Date:
    """
    Calendar date (year, month, day).

    No validation is done on construction: whether `day` exists in `month` is
    the caller's business. Ordering is lexicographic on (year, month, day).
    """
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year} {self.month} {self.day}"

    def astuple(self) -> Tuple[int, int, int]:
        return astuple(self)

    @classmethod
    def from_date(cls, d: date) -> "Date":
        return cls(d.year, d.month, d.day)

    def as_date(self) -> date:
        """Proleptic Gregorian `datetime.date`; only years 1..9999 are representable."""
        return date(self.year, self.month, self.day)

@dataclass(frozen=True)
class Limits:
    """
    Valid input domains of one conversion variant:
    to_date is correct on [rata_die_min, rata_die_max] and
    to_rata_die on [date_min, date_max].
    """
    rata_die_min: int
    rata_die_max: int
    date_min: Date
    date_max: Date

    def contains_rata_die(self, n: int) -> bool:
        return self.rata_die_min <= n <= self.rata_die_max

    def contains_date(self, d: Date) -> bool:
        return self.date_min <= d <= self.date_max

CalendarKind = Literal["julian", "gregorian", "gregorian-opt"]

@dataclass(frozen=True)
class CalendarId:
    kind: CalendarKind
    name: str
    bits: int
