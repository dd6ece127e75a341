#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from eafcal.core.errors import CoefficientOverflowError
from eafcal.design.fast_eaf import EAF, Rounding, get_fast_eaf


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "eafcal[diagnostics]"') from e


def bound_series(eaf: EAF, rounding: Rounding, ks: range) -> Tuple[List[int], List[Optional[int]]]:
    """
    Upper bound U of the fast EAF for each k. Exponents whose coefficients
    overflow their 64-bit fields are left out; None marks an unbounded fit.
    """
    xs: List[int] = []
    ys: List[Optional[int]] = []
    for k in ks:
        try:
            fast = get_fast_eaf(rounding, k, eaf)
        except CoefficientOverflowError:
            continue
        xs.append(k)
        ys.append(fast.U)
    return xs, ys


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot the upper bound of fast EAFs as a function of k, for both roundings.")
    p.add_argument("--a", type=int, default=5)
    p.add_argument("--b", type=int, default=461)
    p.add_argument("--d", type=int, default=153)
    p.add_argument("--k-min", type=int, default=1)
    p.add_argument("--k-max", type=int, default=32)
    p.add_argument("--out", type=str, default="fast_eaf_bounds.png", help="Output image file.")
    args = p.parse_args(argv)

    if not (1 <= args.k_min <= args.k_max <= 64):
        raise SystemExit("need 1 <= --k-min <= --k-max <= 64")

    try:
        eaf = EAF(args.a, args.b, args.d)
    except ValueError as e:
        raise SystemExit(str(e))

    plt = _need_matplotlib()
    ks = range(args.k_min, args.k_max + 1)

    fig, ax = plt.subplots(figsize=(9, 5))
    for rounding, marker in (("up", "o"), ("down", "s")):
        xs, ys = bound_series(eaf, rounding, ks)
        pts = [(k, u) for k, u in zip(xs, ys) if u is not None and u > 0]
        if pts:
            ax.plot([k for k, _ in pts], [u for _, u in pts], marker=marker, label=f"round {rounding}")
        for k, u in zip(xs, ys):
            if u is None:
                print(f"round {rounding}, k = {k}: unbounded")

    ax.set_yscale("log")
    ax.set_xlabel("k")
    ax.set_ylabel("upper bound U")
    ax.set_title(f"Fast EAF bounds for ({eaf.a} * n + {eaf.b}) / {eaf.d}")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Saved {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
