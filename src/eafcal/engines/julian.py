"""
eafcal.engines.julian
---------------------
EAF algorithms on the proleptic Julian calendar.

The epoch (rata die 0) is 1 March 0000. Computational years start on 1 March
so that February, the only irregular month, comes last.
"""

from __future__ import annotations

from ..core.arith import quotient, remainder
from ..core.types import Date


def to_date(N: int) -> Date:
    """Proleptic Julian date of rata die N."""
    # Year.
    N_1 = 4 * N + 3
    Y = quotient(N_1, 1461)
    N_Y = remainder(N_1, 1461) // 4

    # Month and day.
    N_2 = 5 * N_Y + 461
    M = N_2 // 153
    D = N_2 % 153 // 5

    # Map.
    J = int(M >= 13)
    return Date(Y + J, M - 12 * J, D + 1)


def to_rata_die(year: int, month: int, day: int) -> int:
    """Rata die of the proleptic Julian date (year, month, day)."""
    # Map.
    J = int(month <= 2)
    Y = year - J
    M = month + 12 * J
    D = day - 1

    # Rata die.
    y_star = quotient(1461 * Y, 4)
    m_star = (153 * M - 457) // 5
    return y_star + m_star + D
