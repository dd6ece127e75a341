from __future__ import annotations

import argparse
import random
from typing import List

import numpy as np

import eafcal
from eafcal.engines import vectorized


def parse_calendars(s: str) -> List[str]:
    # "julian32,gregorian-unix64" -> ["julian32", "gregorian-unix64"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Random rata dies in the calendar's domain: rata die -> date -> rata die,
    and the vectorised conversions against the scalar ones on the same sample.
    """
    rng = random.Random(seed)
    cal = eafcal.get_calendar(calendar)
    lim = cal.limits
    failures = 0

    ns = [rng.randint(lim.rata_die_min, lim.rata_die_max) for _ in range(N)]
    # The ends of the domain are always part of the sample.
    ns += [lim.rata_die_min, lim.rata_die_max]

    dates = []
    for n in ns:
        d = cal.to_date(n)
        dates.append(d)
        # Near the ends the date may fall outside the to_rata_die domain.
        if not lim.contains_date(d):
            continue
        back = cal.to_rata_die(d.year, d.month, d.day)
        if back != n:
            failures += 1
            print("\nFAIL (scalar)")
            print("calendar:", calendar)
            print("n:", n)
            print("date:", d)
            print("back:", back)
            if failures >= max_failures:
                return failures

    Y, M, D = vectorized.to_date(cal, np.array(ns, dtype=np.int64))
    expected = np.array([d.astuple() for d in dates], dtype=np.int64).reshape(-1, 3)
    got = np.stack([Y, M, D], axis=1)
    bad = np.nonzero(np.any(got != expected, axis=1))[0]
    for i in bad[: max(0, max_failures - failures)]:
        failures += 1
        print("\nFAIL (vectorised to_date)")
        print("calendar:", calendar)
        print("n:", ns[i])
        print("scalar:", dates[i])
        print("vector:", tuple(int(x) for x in got[i]))

    inside = np.array([lim.contains_date(d) for d in dates], dtype=bool)
    back = vectorized.to_rata_die(cal, expected[:, 0], expected[:, 1], expected[:, 2])
    bad = np.nonzero(inside & (back != np.array(ns, dtype=np.int64)))[0]
    for i in bad[: max(0, max_failures - failures)]:
        failures += 1
        print("\nFAIL (vectorised to_rata_die)")
        print("calendar:", calendar)
        print("date:", dates[i])
        print("n:", ns[i])
        print("vector:", int(back[i]))

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: rata die -> date -> rata die.")
    p.add_argument("--calendars", type=str, default=",".join(eafcal.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    available = eafcal.list_calendars()
    unknown = [x for x in calendars if x not in available]
    if unknown:
        raise SystemExit(f"Unknown calendar(s): {unknown}. Available: {available}")

    total_fail = 0
    for name in calendars:
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(name, N=args.N, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
