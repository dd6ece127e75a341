"""
eafcal.engines.vectorized
-------------------------
numpy versions of the calendar conversions, element-wise over arrays.

The plain Julian and Gregorian variants work on int64 arrays, so they agree
with the scalar versions on the 64-bit limits. The optimised Gregorian
variant works on uint64 arrays, masked to the calendar width, and wraps
exactly as `gregorian.to_date_opt` / `gregorian.to_rata_die_opt` do.

Dates are returned as a (year, month, day) triple of int64 arrays.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..core.arith import INT32, IntWidth
from .calendar import EafCalendar
from .limits import shift_constants

DateArrays = Tuple[np.ndarray, np.ndarray, np.ndarray]


def _i64(x) -> np.ndarray:
    return np.asarray(x, dtype=np.int64)


def _u64(x) -> np.ndarray:
    # Two's complement reinterpretation, as a cast to the unsigned type.
    return _i64(x).astype(np.uint64)


def _wrap(x: np.ndarray, width: IntWidth) -> np.ndarray:
    if width.bits == 64:
        return x
    return x & np.uint64(width.umax)


def _signed(x: np.ndarray, width: IntWidth) -> np.ndarray:
    if width.bits == 64:
        return x.astype(np.int64)
    return (x & np.uint64(width.umax)).astype(np.uint32).astype(np.int32).astype(np.int64)


# ============================================================
# Julian
# ============================================================

def julian_to_date(N) -> DateArrays:
    N_1 = 4 * _i64(N) + 3
    Y, r = np.divmod(N_1, 1461)
    N_Y = r // 4

    N_2 = 5 * N_Y + 461
    M, r = np.divmod(N_2, 153)
    D = r // 5

    J = (M >= 13).astype(np.int64)
    return Y + J, M - 12 * J, D + 1


def julian_to_rata_die(year, month, day) -> np.ndarray:
    month = _i64(month)
    J = (month <= 2).astype(np.int64)
    Y = _i64(year) - J
    M = month + 12 * J
    D = _i64(day) - 1
    return 1461 * Y // 4 + (153 * M - 457) // 5 + D


# ============================================================
# Gregorian
# ============================================================

def gregorian_to_date(N) -> DateArrays:
    N_1 = 4 * _i64(N) + 3
    C, r = np.divmod(N_1, 146097)
    N_C = r // 4

    N_2 = 4 * N_C + 3
    Z, r = np.divmod(N_2, 1461)
    N_Y = r // 4
    Y = 100 * C + Z

    N_3 = 5 * N_Y + 461
    M, r = np.divmod(N_3, 153)
    D = r // 5

    J = (M >= 13).astype(np.int64)
    return Y + J, M - 12 * J, D + 1


def gregorian_to_rata_die(year, month, day) -> np.ndarray:
    month = _i64(month)
    J = (month <= 2).astype(np.int64)
    Y = _i64(year) - J
    M = month + 12 * J
    D = _i64(day) - 1
    C = Y // 100
    return 1461 * Y // 4 - C + C // 4 + (153 * M - 457) // 5 + D


# ============================================================
# Optimised Gregorian
# ============================================================

def gregorian_to_date_opt(N_U, *, width: IntWidth = INT32, epoch: int = 0, s: int = 0) -> DateArrays:
    K, L = shift_constants(epoch, s)

    N = _wrap(_u64(N_U) + np.uint64(width.wrap_unsigned(K)), width)

    N_1 = _wrap(4 * N + 3, width)
    C = N_1 // 146097
    N_C = N_1 % 146097 // 4

    N_2 = 4 * N_C + 3
    P_2 = 2939745 * N_2
    Z = P_2 >> 32
    N_Y = (P_2 & 0xFFFFFFFF) // 2939745 // 4
    Y = _wrap(100 * C + Z, width)

    N_3 = 2141 * N_Y + 197913
    M = N_3 >> 16
    D = (N_3 & 0xFFFF) // 2141

    J = N_Y >= 306
    Y_G = _signed(Y - np.uint64(width.wrap_unsigned(L)) + J.astype(np.uint64), width)
    M_G = np.where(J, M - 12, M).astype(np.int64)
    return Y_G, M_G, D.astype(np.int64) + 1


def gregorian_to_rata_die_opt(year, month, day, *, width: IntWidth = INT32,
                              epoch: int = 0, s: int = 0) -> np.ndarray:
    K, L = shift_constants(epoch, s)

    month = _i64(month)
    J = month <= 2
    Y = _wrap(_u64(year) + np.uint64(width.wrap_unsigned(L)) - J.astype(np.uint64), width)
    M = np.where(J, month + 12, month).astype(np.uint64)
    D = _u64(day) - np.uint64(1)
    C = Y // 100

    y_star = _wrap(_wrap(1461 * Y, width) // 4 - C + C // 4, width)
    m_star = (153 * M - 457) // 5
    N = _wrap(y_star + m_star + D, width)

    return _signed(N - np.uint64(width.wrap_unsigned(K)), width)


# ============================================================
# Dispatch on a calendar
# ============================================================

def to_date(cal: EafCalendar, N) -> DateArrays:
    kind = cal.spec.id.kind
    if kind == "julian":
        return julian_to_date(N)
    if kind == "gregorian":
        return gregorian_to_date(N)
    return gregorian_to_date_opt(N, width=cal.width, epoch=cal.spec.epoch, s=cal.spec.s)


def to_rata_die(cal: EafCalendar, year, month, day) -> np.ndarray:
    kind = cal.spec.id.kind
    if kind == "julian":
        return julian_to_rata_die(year, month, day)
    if kind == "gregorian":
        return gregorian_to_rata_die(year, month, day)
    return gregorian_to_rata_die_opt(year, month, day, width=cal.width,
                                     epoch=cal.spec.epoch, s=cal.spec.s)
