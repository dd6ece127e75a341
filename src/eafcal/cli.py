from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import Optional

from eafcal.core.arith import IntWidth
from eafcal.core.errors import ConfigError

logger = logging.getLogger(__name__)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _parse_int(prog: str, name: str, text: str, lo: int, hi: int) -> Optional[int]:
    """Integer in [lo, hi], or None after printing the reason on stderr."""
    try:
        value = int(text, 10)
    except ValueError:
        print(f"{prog}: cannot parse {name}: {text}", file=sys.stderr)
        return None
    if not (lo <= value <= hi):
        print(f"{prog}: {name} {value} not in [{lo}, {hi}]", file=sys.stderr)
        return None
    return value


def _calendar(prog: str, name: str, width: IntWidth, debug: bool):
    import eafcal
    from eafcal.engines.factory import make_engine
    from eafcal.engines.specs import BASE_NAMES

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    # Unsuffixed names follow EAF_SIZE as it is now, not as it was at import.
    if name in BASE_NAMES:
        name = f"{name}{width.bits}"
    try:
        cal = eafcal.get_calendar(name)
    except KeyError as e:
        print(f"{prog}: {e.args[0]}", file=sys.stderr)
        return None
    if debug:
        cal = make_engine(cal.spec, debug=True)
        logger.debug("calendar %s: %s", name, cal.info())
    return cal


def _width(prog: str) -> Optional[IntWidth]:
    from eafcal.core.config import default_width

    try:
        return default_width()
    except ConfigError as e:
        print(f"{prog}: {e}", file=sys.stderr)
        return None


def _print(N: int, date) -> None:
    print(f"rata die = {N}")
    print(f"date     = {date}")


def cmd_to_date(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="eafcal to-date", description="Rata die -> date")
    p.add_argument("rata_die", help="integer day count")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    width = _width(p.prog)
    if width is None:
        return 1

    cal = _calendar(p.prog, args.calendar, width, args.debug)
    if cal is None:
        return 1

    # Range of the calendar's own integer type.
    width = getattr(cal, "width", width)
    N = _parse_int(p.prog, "rata die", args.rata_die, width.min, width.max)
    if N is None:
        return 1

    _print(N, cal.to_date(N))
    return 0


def cmd_to_rata_die(argv: list[str]) -> int:
    from eafcal.core.types import Date

    p = argparse.ArgumentParser(prog="eafcal to-rata-die", description="Date -> rata die")
    p.add_argument("year")
    p.add_argument("month")
    p.add_argument("day")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    width = _width(p.prog)
    if width is None:
        return 1

    cal = _calendar(p.prog, args.calendar, width, args.debug)
    if cal is None:
        return 1

    width = getattr(cal, "width", width)
    year = _parse_int(p.prog, "year", args.year, width.min, width.max)
    if year is None:
        return 1
    month = _parse_int(p.prog, "month", args.month, 1, 12)
    if month is None:
        return 1
    day = _parse_int(p.prog, "day", args.day, 1, 31)
    if day is None:
        return 1

    _print(cal.to_rata_die(year, month, day), Date(year, month, day))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="eafcal", description="Euclidean affine function calendar algorithms CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    # conversions
    sub.add_parser("to-date", add_help=False, help="Rata die -> date")
    sub.add_parser("to-rata-die", add_help=False, help="Date -> rata die")

    # design tools
    sub.add_parser("fast-eaf", add_help=False, help="Coefficients and upper bound of fast EAFs.")
    sub.add_parser("identities", add_help=False, help="Check the fast-EAF identities of the paper's examples.")

    # diagnostics
    sub.add_parser("info", add_help=False, help="Print the valid domains of every calendar.")
    sub.add_parser("compare", add_help=False, help="Compare calendar algorithms around 1970-01-01.")
    sub.add_parser("round-trip", add_help=False, help="Random round-trip tests.")
    sub.add_parser("plot-bounds", add_help=False, help="Plot fast-EAF bounds against k (needs matplotlib).")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "to-date":
        return cmd_to_date(rest)

    if args.cmd == "to-rata-die":
        return cmd_to_rata_die(rest)

    tool_map = {
        "fast-eaf": "eafcal.design.fast_eaf",
        "identities": "eafcal.design.identities",
        "info": "eafcal.diagnostics.info",
        "compare": "eafcal.diagnostics.compare",
        "round-trip": "eafcal.diagnostics.round_trip",
        "plot-bounds": "eafcal.diagnostics.plot_bounds",
    }
    if args.cmd in tool_map:
        return _run_module_main(tool_map[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
