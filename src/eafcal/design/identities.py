# design/identities.py

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from eafcal.design.fast_eaf import EAF, Rounding, get_fast_eaf

P32 = 1 << 32
MASK32 = np.int64(P32 - 1)

ArrayFn = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class Claim:
    """
    An identity lhs(n) == rhs(n) claimed for every n in [0, stop).

    `holds` is False for the unsigned renditions of identities that are only
    valid on Z: mod 2^32 wrap-around of negative numerators breaks them.
    `source` optionally names the EAF whose fast version yields the right-hand
    side, so that the coefficients and the bound can be re-derived.
    """
    name: str
    text: str
    stop: int
    lhs: ArrayFn
    rhs: ArrayFn
    holds: bool = True
    source: Optional[Tuple[Rounding, int, EAF]] = None


def _u32(x: np.ndarray) -> np.ndarray:
    # int64 -> value held by a uint32 variable
    return x & MASK32


CLAIMS: List[Claim] = [
    Claim("example-08", "(153 * M - 457) / 5 == (980 * M - 2928) / 2^5", 12,
          lambda M: np.floor_divide(153 * M - 457, 5),
          lambda M: np.floor_divide(980 * M - 2928, 32),
          source=("up", 5, EAF(153, -457, 5))),
    Claim("example-08u", "(153 * M - 457) / 5 == (980 * M - 2928) / 2^5 (uint32)", 12,
          lambda M: _u32(153 * M - 457) // 5,
          lambda M: _u32(980 * M - 2928) // 32,
          holds=False),
    Claim("example-09", "(153 * M - 457) / 5 == (979 * M - 2919) / 2^5", 34,
          lambda M: np.floor_divide(153 * M - 457, 5),
          lambda M: np.floor_divide(979 * M - 2919, 32),
          source=("down", 5, EAF(153, -457, 5))),
    Claim("example-09u", "(153 * M - 457) / 5 == (979 * M - 2919) / 2^5 (uint32)", 34,
          lambda M: _u32(153 * M - 457) // 5,
          lambda M: _u32(979 * M - 2919) // 32,
          holds=False),
    Claim("example-12", "n % 1461 == 2939745 * n % 2^32 / 2939745", 28825529,
          lambda n: n % 1461,
          lambda n: (2939745 * n) % P32 // 2939745,
          source=("up", 32, EAF(1, 0, 1461))),
    Claim("example-13", "(5 * N_Y + 461) % 153 / 5 == (2141 * N_Y + 197913) % 2^16 / 2141", 734,
          lambda N: (5 * N + 461) % 153 // 5,
          lambda N: (2141 * N + 197913) % 65536 // 2141,
          source=("down", 16, EAF(5, 461, 153))),
    Claim("example-14a", "n / 3600 == 1193047 * n / 2^32", 2257199,
          lambda n: n // 3600,
          lambda n: 1193047 * n // P32,
          source=("up", 32, EAF(1, 0, 3600))),
    Claim("example-14b", "n / 60 == 71582789 * n / 2^32", 97612919,
          lambda n: n // 60,
          lambda n: 71582789 * n // P32,
          source=("up", 32, EAF(1, 0, 60))),
    Claim("example-14c", "n / 10 == 429496730 * n / 2^32", 1073741829,
          lambda n: n // 10,
          lambda n: 429496730 * n // P32,
          source=("up", 32, EAF(1, 0, 10))),
    Claim("example-15a", "n % 3600 == 1193047 * n % 2^32 / 1193047", 2257199,
          lambda n: n % 3600,
          lambda n: (1193047 * n) % P32 // 1193047),
    Claim("example-15b", "n % 60 == 71582789 * n % 2^32 / 71582789", 97612919,
          lambda n: n % 60,
          lambda n: (71582789 * n) % P32 // 71582789),
    Claim("example-15c", "n % 10 == 429496730 * n % 2^32 / 429496730", 1073741829,
          lambda n: n % 10,
          lambda n: (429496730 * n) % P32 // 429496730),
]


def find_counterexamples(claim: Claim, *, stop: Optional[int] = None, chunk: int = 1 << 22,
                         max_report: int = 10) -> List[int]:
    """First `max_report` values of n in [0, stop) where lhs != rhs."""
    end = claim.stop if stop is None else min(stop, claim.stop)
    bad: List[int] = []
    for start in range(0, end, chunk):
        n = np.arange(start, min(start + chunk, end), dtype=np.int64)
        idx = np.nonzero(claim.lhs(n) != claim.rhs(n))[0]
        bad.extend(int(n[i]) for i in idx[: max_report - len(bad)])
        if len(bad) >= max_report:
            break
    return bad


def check_derivation(claim: Claim) -> Optional[bool]:
    """Whether the fast EAF derived from `claim.source` reaches exactly `claim.stop`."""
    if claim.source is None:
        return None
    rounding, k, eaf = claim.source
    return get_fast_eaf(rounding, k, eaf).U == claim.stop


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Confirm the fast-EAF identities claimed in the paper's examples.")
    p.add_argument("--only", action="append", default=[], help="claim name (repeatable)")
    p.add_argument("--max-n", type=int, default=None, help="Cap on the scanned range (default: full range).")
    args = p.parse_args(argv)

    names = {c.name for c in CLAIMS}
    unknown = [x for x in args.only if x not in names]
    if unknown:
        print(f"Unknown claim(s): {unknown}. Available: {sorted(names)}", file=sys.stderr)
        return 1

    failures = 0
    for claim in CLAIMS:
        if args.only and claim.name not in args.only:
            continue
        print(f"{claim.name}: {claim.text}, for all n in [0, {claim.stop}[")
        bad = find_counterexamples(claim, stop=args.max_n)
        if claim.holds:
            if bad:
                failures += 1
                print(f"  Failed for n = {', '.join(map(str, bad))}")
            else:
                print("  Pass.")
        elif bad:
            print(f"  Does not hold under wrap-around (first n = {bad[0]}), as expected.")
        else:
            failures += 1
            print("  Unexpected pass.")

        derived = check_derivation(claim)
        if derived is not None:
            print(f"  Derived bound matches: {'yes' if derived else 'NO'}")
            failures += 0 if derived else 1
        print()

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
