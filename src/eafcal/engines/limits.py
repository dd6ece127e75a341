"""
eafcal.engines.limits
---------------------
Domains on which the EAF calendar formulas are correct when evaluated on
fixed-width integers.

The bounds are the result of an overflow analysis of the width-bit computation
and are documented, not enforced: the conversion functions never check them.
All divisions below are truncating, as in the width-bit arithmetic analysed.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.arith import IntWidth, tdiv
from ..core.types import Date, Limits


def shift_constants(epoch: int, s: int) -> tuple[int, int]:
    """(K, L) mapping the shifted rata die / year onto the canonical ones."""
    return epoch + 146097 * s, 400 * s


@lru_cache(maxsize=None)
def plain_limits(width: IntWidth) -> Limits:
    """Limits of the plain Julian and Gregorian algorithms."""
    lo, hi = width.min, width.max

    # N >= 0: N_1 = 4N + 3 <= max  <=>  N <= (max - 3) / 4.
    # N < 0:  4N >= min            <=>  N >= min / 4.
    rata_die_max = tdiv(hi - 3, 4)
    rata_die_min = tdiv(lo, 4)

    # 1461 * Y must not overflow. Jan and Feb belong to the previous
    # computational year, hence the +1 and the Feb 28 cut-off. If that year is
    # leap, Feb 29 is safe too and the bound is not sharp.
    date_max = Date(tdiv(hi, 1461) + 1, 2, 28)
    date_min = Date(tdiv(lo, 1461), 3, 1)

    return Limits(rata_die_min, rata_die_max, date_min, date_max)


@lru_cache(maxsize=None)
def gregorian_opt_limits(width: IntWidth, epoch: int = 0, s: int = 0) -> Limits:
    """
    Limits of the optimised Gregorian algorithms with epoch shift and s cycles.

    to_date_opt evaluates 4N + 3 on unsigned operands with N = N_U + K, so
    0 <= N_U + K <= (umax - 3) / 4.

    to_rata_die_opt evaluates 1461 * Y on unsigned operands with
    Y = Y_G + L - J, so 0 <= Y_G + L - J <= umax / 1461, where J = 1 for
    Jan and Feb.
    """
    K, L = shift_constants(epoch, s)
    umax = width.umax

    rata_die_min = -K
    rata_die_max = (umax - 3) // 4 - K

    date_min = Date(-L, 3, 1)
    date_max = Date(umax // 1461 - L + 1, 2, 28)

    return Limits(rata_die_min, rata_die_max, date_min, date_max)
