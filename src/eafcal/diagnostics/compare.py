from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from eafcal.core.types import Date
from eafcal.engines import gregorian
from eafcal.reference import algorithms, oracle

UNIX_DATE = Date(1970, 1, 1)


@dataclass(frozen=True)
class Candidate:
    name: str
    to_date: Callable[[int], Date]
    to_rata_die: Callable[[int, int, int], int]


@dataclass(frozen=True)
class Mismatch:
    name: str
    function: str
    rata_die: int
    expected: object
    got: object

    def __str__(self) -> str:
        return (f"{self.name}: {self.function} disagrees at rata die {self.rata_die}: "
                f"expected {self.expected}, got {self.got}")


def candidates() -> Dict[str, Candidate]:
    """Every implementation under comparison, rebased on the Unix epoch."""
    out: Dict[str, Candidate] = {}
    for name in algorithms.list_algorithms():
        alg = algorithms.get_algorithm(name)
        out[name] = Candidate(name, alg.to_date, alg.to_rata_die)

    out["eaf"] = Candidate(
        "eaf",
        lambda n: gregorian.to_date(n + gregorian.UNIX_EPOCH),
        lambda y, m, d: gregorian.to_rata_die(y, m, d) - gregorian.UNIX_EPOCH,
    )
    out["eaf-opt"] = Candidate(
        "eaf-opt",
        lambda n: gregorian.to_date_opt(n, epoch=gregorian.UNIX_EPOCH, s=gregorian.UNIX_CYCLES),
        lambda y, m, d: gregorian.to_rata_die_opt(y, m, d, epoch=gregorian.UNIX_EPOCH, s=gregorian.UNIX_CYCLES),
    )
    return out


def _check(c: Candidate, n: int, d: Date) -> Optional[Mismatch]:
    got = c.to_date(n)
    if got != d:
        return Mismatch(c.name, "to_date", n, d, got)
    back = c.to_rata_die(d.year, d.month, d.day)
    if back != n:
        return Mismatch(c.name, "to_rata_die", n, n, back)
    return None


def compare(c: Candidate, *, span: int = 146097) -> Optional[Mismatch]:
    """
    Walk [-span, span) around 1970-01-01, forwards then backwards, against the
    day-by-day oracle. Returns the first disagreement, if any.
    """
    d = UNIX_DATE
    for n in range(span):
        bad = _check(c, n, d)
        if bad is not None:
            return bad
        d = oracle.next_date(d)

    d = UNIX_DATE
    for n in range(-1, -span - 1, -1):
        d = oracle.previous_date(d)
        bad = _check(c, n, d)
        if bad is not None:
            return bad

    return None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare calendar algorithms against a day-by-day walk around 1970-01-01.")
    p.add_argument("--only", action="append", default=[], help="algorithm name (repeatable)")
    p.add_argument("--span", type=int, default=146097, help="Days walked on each side of the epoch.")
    args = p.parse_args(argv)

    if args.span <= 0:
        raise SystemExit("--span must be positive")

    pool = candidates()
    unknown = [x for x in args.only if x not in pool]
    if unknown:
        raise SystemExit(f"Unknown algorithm(s): {unknown}. Available: {sorted(pool)}")

    names: List[str] = args.only or sorted(pool)
    failures = 0
    for name in names:
        bad = compare(pool[name], span=args.span)
        if bad is None:
            print(f"{name:<20} OK")
        else:
            failures += 1
            print(f"{name:<20} FAIL  {bad}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
