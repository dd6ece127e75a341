"""
eafcal.engines.gregorian
------------------------
EAF algorithms on the proleptic Gregorian calendar.

`to_date` / `to_rata_die` use 1 March 0000 as epoch and exact integers.

`to_date_opt` / `to_rata_die_opt` reproduce the width-bit unsigned evaluation:
the rata die is shifted by K = epoch + 146097 * s so that every operand is
non-negative, the second division of each step is replaced by a fast EAF, and
the year is shifted back by L = 400 * s at the end. With epoch = 719468 and
s = 82 the epoch is 1 January 1970.
"""

from __future__ import annotations

from ..core.arith import INT32, IntWidth, quotient, remainder
from ..core.types import Date
from .limits import shift_constants

UNIX_EPOCH = 719468
UNIX_CYCLES = 82

_P32 = 1 << 32
_P16 = 1 << 16


def to_date(N: int) -> Date:
    """Proleptic Gregorian date of rata die N."""
    # Century.
    N_1 = 4 * N + 3
    C = quotient(N_1, 146097)
    N_C = remainder(N_1, 146097) // 4

    # Year.
    N_2 = 4 * N_C + 3
    Z = N_2 // 1461
    N_Y = N_2 % 1461 // 4
    Y = 100 * C + Z

    # Month and day.
    N_3 = 5 * N_Y + 461
    M = N_3 // 153
    D = N_3 % 153 // 5

    # Map.
    J = int(M >= 13)
    return Date(Y + J, M - 12 * J, D + 1)


def to_rata_die(year: int, month: int, day: int) -> int:
    """Rata die of the proleptic Gregorian date (year, month, day)."""
    # Map.
    J = int(month <= 2)
    Y = year - J
    M = month + 12 * J
    D = day - 1
    C = quotient(Y, 100)

    # Rata die.
    y_star = quotient(1461 * Y, 4) - C + quotient(C, 4)
    m_star = (153 * M - 457) // 5
    return y_star + m_star + D


def to_date_opt(N_U: int, *, width: IntWidth = INT32, epoch: int = 0, s: int = 0) -> Date:
    """
    Proleptic Gregorian date of rata die N_U, counted from the shifted epoch.

    Correct on gregorian_opt_limits(width, epoch, s); outside it the result is
    whatever the width-bit unsigned arithmetic wraps to.
    """
    K, L = shift_constants(epoch, s)
    u = width.wrap_unsigned

    # Rata die shift.
    N = u(u(N_U) + u(K))

    # Century.
    N_1 = u(4 * N + 3)
    C = N_1 // 146097
    N_C = N_1 % 146097 // 4

    # Year: n // 1461 and n % 1461 // 4 through 2939745 / 2^32.
    N_2 = 4 * N_C + 3
    P_2 = 2939745 * N_2
    Z = P_2 // _P32
    N_Y = P_2 % _P32 // 2939745 // 4
    Y = u(100 * C + Z)

    # Month and day: (5 N_Y + 461) / 153 through 2141 / 2^16.
    N_3 = 2141 * N_Y + 197913
    M = N_3 // _P16
    D = N_3 % _P16 // 2141

    # Map.
    J = int(N_Y >= 306)
    Y_G = width.wrap_signed(Y - L + J)
    M_G = M - 12 if J else M
    return Date(Y_G, M_G, D + 1)


def to_rata_die_opt(year: int, month: int, day: int, *, width: IntWidth = INT32,
                    epoch: int = 0, s: int = 0) -> int:
    """Rata die, counted from the shifted epoch, of the proleptic Gregorian date."""
    K, L = shift_constants(epoch, s)
    u = width.wrap_unsigned

    # Map.
    J = int(month <= 2)
    Y = u(u(year) + u(L) - J)
    M = month + 12 if J else month
    D = day - 1
    C = Y // 100

    # Rata die.
    y_star = u(u(1461 * Y) // 4 - C + C // 4)
    m_star = (153 * M - 457) // 5
    N = u(y_star + m_star + D)

    # Rata die shift.
    return width.wrap_signed(N - K)
