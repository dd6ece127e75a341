from __future__ import annotations

import argparse
from typing import List

from eafcal.engines.calendar import EafCalendar
from eafcal.engines.factory import make_engine
from eafcal.engines.specs import ALL_SPECS

TITLES = {
    "julian": "Julian",
    "gregorian": "Gregorian",
    "gregorian-opt": "Gregorian optimised",
    "gregorian-unix": "Gregorian (Unix) optimised",
}


def title(name: str) -> str:
    base, bits = name[:-2], name[-2:]
    return f"{TITLES.get(base, base)} {bits}-bits"


def report(cal: EafCalendar) -> List[str]:
    """Bounds of one calendar and the conversions evaluated at them."""
    lim = cal.limits
    lo, hi = lim.date_min, lim.date_max
    return [
        "  to_date",
        f"    rata_die_min          = {lim.rata_die_min}",
        f"    rata_die_max          = {lim.rata_die_max}",
        f"    to_date(rata_die_min) = {cal.to_date(lim.rata_die_min)}",
        f"    to_date(rata_die_max) = {cal.to_date(lim.rata_die_max)}",
        "  to_rata_die",
        f"    date_min              = {lo}",
        f"    date_max              = {hi}",
        f"    to_rata_die(date_min) = {cal.to_rata_die(lo.year, lo.month, lo.day)}",
        f"    to_rata_die(date_max) = {cal.to_rata_die(hi.year, hi.month, hi.day)}",
    ]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the valid domains of every calendar and the conversions at their ends.")
    p.add_argument("--calendar", action="append", default=[], help="calendar name (repeatable; default: all)")
    args = p.parse_args(argv)

    unknown = [x for x in args.calendar if x not in ALL_SPECS]
    if unknown:
        raise SystemExit(f"Unknown calendar(s): {unknown}. Available: {list(ALL_SPECS)}")

    names = args.calendar or list(ALL_SPECS)
    for i, name in enumerate(names):
        if i:
            print()
        print(f"{title(name)}:")
        for line in report(make_engine(ALL_SPECS[name])):
            print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
