# design/fast_eaf.py

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional

from eafcal.core.errors import CoefficientOverflowError

Rounding = Literal["up", "down"]

U64_MAX = (1 << 64) - 1
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


@dataclass(frozen=True)
class EAF:
    """
    Euclidean affine function f(n) = floor((a * n + b) / d).
    """
    a: int
    b: int
    d: int

    def __post_init__(self) -> None:
        if not (0 <= self.a <= U64_MAX):
            raise ValueError(f"a must be in [0, {U64_MAX}], got {self.a}")
        if not (I64_MIN <= self.b <= I64_MAX):
            raise ValueError(f"b must be in [{I64_MIN}, {I64_MAX}], got {self.b}")
        if not (1 <= self.d <= U64_MAX):
            raise ValueError(f"d must be in [1, {U64_MAX}], got {self.d}")

    def __call__(self, n: int) -> int:
        return (self.a * n + self.b) // self.d


@dataclass(frozen=True)
class FastEAF:
    """
    Division-free replacement f'(n) = (a * n + b) >> k of an EAF, exact for
    0 <= n < U. U is None when no failure point exists.
    """
    a: int
    b: int
    d: int
    k: int
    U: Optional[int]

    def __call__(self, n: int) -> int:
        return (self.a * n + self.b) >> self.k


def get_fast_eaf(rounding: Rounding, k: int, eaf: EAF) -> FastEAF:
    """
    Coefficients and exact upper bound of the fast EAF with divisor 2^k.

    rounding="up" takes a' just above 2^k * a / d (Theorem 2 of the paper),
    rounding="down" takes a' = floor(2^k * a / d) (Theorem 3). In both cases
    the error is periodic in n mod d, so scanning the d residues gives, for
    each residue n, the first period Q(n) at which the error reaches one unit,
    and U is the smallest failure point Q(n) * d + n.

    Python integers carry every intermediate product; only the results are
    narrowed to their 64-bit fields.
    """
    if rounding not in ("up", "down"):
        raise ValueError(f"rounding must be 'up' or 'down', got {rounding!r}")
    if not (1 <= k <= 64):
        raise ValueError(f"k must be in [1, 64], got {k}")

    a, b, d = eaf.a, eaf.b, eaf.d
    is_rounding_up = rounding == "up"

    p2_k = 1 << k
    q_p2_k_a, r_p2_k_a = divmod(p2_k * a, d)

    a_p = q_p2_k_a + 1 if is_rounding_up else q_p2_k_a
    epsilon = d - r_p2_k_a if is_rounding_up else r_p2_k_a

    def g(n: int) -> int:
        # g(n) = a' * n - 2^k * f(n)
        return a_p * n - p2_k * ((a * n + b) // d)

    if is_rounding_up:
        b_p = -min(g(n) for n in range(d))
    else:
        b_p = p2_k - 1 - max(g(n) for n in range(d))

    def Q(n: int) -> Optional[int]:
        if is_rounding_up:
            # epsilon * q + b' + g(n) >= 2^k  <=>  epsilon * q >= h(n)
            h = p2_k - (g(n) + b_p)
            return 0 if h <= 0 else -(-h // epsilon)
        # -epsilon * q + b' + g(n) < 0  <=>  epsilon * q > h(n)
        h = g(n) + b_p
        if h < 0:
            return 0
        if epsilon == 0:
            return None
        return h // epsilon + 1

    U: Optional[int] = None
    for n in range(d):
        q = Q(n)
        if q is None:
            continue
        P = q * d + n
        if U is None or P < U:
            U = P

    if a_p > U64_MAX:
        raise CoefficientOverflowError(f"a' = {a_p} does not fit in 64 unsigned bits (k = {k})")
    if not (I64_MIN <= b_p <= I64_MAX):
        raise CoefficientOverflowError(f"b' = {b_p} does not fit in 64 signed bits (k = {k})")
    if U is not None and U > U64_MAX:
        raise CoefficientOverflowError(f"upper bound {U} does not fit in 64 unsigned bits (k = {k})")

    return FastEAF(a=a_p, b=b_p, d=p2_k, k=k, U=U)


def get_fast_eafs(rounding: Rounding, ks: Iterable[int], eaf: EAF) -> List[FastEAF]:
    return [get_fast_eaf(rounding, k, eaf) for k in ks]


def verify(eaf: EAF, fast: FastEAF, *, limit: Optional[int] = None) -> bool:
    """
    Brute-force check of the bound: f == f' on [0, U) and, when U is reached,
    f != f' at U. `limit` caps the scan for large bounds.
    """
    end = fast.U
    if end is None or (limit is not None and end > limit):
        end = limit
    if end is None:
        raise ValueError("limit is required when the bound is unbounded")

    for n in range(end):
        if eaf(n) != fast(n):
            return False

    if fast.U is not None and end == fast.U:
        return eaf(fast.U) != fast(fast.U)
    return True


def render(fast: FastEAF) -> str:
    upper = "unbounded" if fast.U is None else str(fast.U)
    return "\n".join([
        f"a'          = {fast.a}",
        f"b'          = {fast.b}",
        f"d'          = {fast.d}",
        f"k           = {fast.k}",
        f"upper bound = {upper}",
    ])


def _parse_int(name: str, text: str, lo: int, hi: int) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise ValueError(f"cannot parse '{name}': {text}") from None
    if not (lo <= value <= hi):
        raise ValueError(f"{name} must be in [{lo}, {hi}], got: {value}")
    return value


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="eafcal fast-eaf",
        description="Coefficients and exact upper bound of fast EAFs (a' * n + b') / 2^k for (a * n + b) / d.",
    )
    p.add_argument("rounding", help="'up' (Theorem 2) or 'down' (Theorem 3)")
    p.add_argument("a", help="multiplier, in [0, 2^64)")
    p.add_argument("b", help="offset, in [-2^63, 2^63)")
    p.add_argument("d", help="divisor, in [1, 2^64)")
    p.add_argument("k", nargs="+", help="exponent(s) of the divisor 2^k, in [1, 64]")
    args = p.parse_args(argv)

    if args.rounding not in ("up", "down"):
        print(f"{p.prog}: unknown 'rounding': {args.rounding}", file=sys.stderr)
        return 1

    try:
        eaf = EAF(
            a=_parse_int("a", args.a, 0, U64_MAX),
            b=_parse_int("b", args.b, I64_MIN, I64_MAX),
            d=_parse_int("d", args.d, 1, U64_MAX),
        )
    except ValueError as e:
        print(f"{p.prog}: {e}", file=sys.stderr)
        return 1

    for text in args.k:
        try:
            k = int(text, 10)
        except ValueError:
            print(f"{p.prog}: cannot parse 'k': {text}", file=sys.stderr)
            return 1
        if not (1 <= k <= 64):
            print(f"{p.prog}: k must be in [1, 64] (skipping k = {k})\n", file=sys.stderr)
            continue
        try:
            fast = get_fast_eaf(args.rounding, k, eaf)
        except CoefficientOverflowError as e:
            print(f"{p.prog}: {e} (skipping k = {k})\n", file=sys.stderr)
            continue
        print(render(fast))
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
