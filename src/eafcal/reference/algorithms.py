"""
eafcal.reference.algorithms
---------------------------
Third-party Gregorian calendar algorithms, reproduced for cross-validation.

Every algorithm is rebased on the Unix epoch (rata die 0 = 1970-01-01). The
sources work on C or Java integers (Firefox on doubles), so divisions that
can see a negative operand use truncating division; elsewhere the operands
are non-negative on the window the comparison harness walks (a few centuries
around 1970) and plain floor division gives the same result. Neri and
Schneider is kept on emulated uint32_t, as published.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ..core.arith import INT32, tdiv
from ..core.types import Date

ToDate = Callable[[int], Date]
ToRataDie = Callable[[int, int, int], int]


@dataclass(frozen=True)
class ReferenceAlgorithm:
    name: str
    to_date: ToDate
    to_rata_die: ToRataDie


_REGISTRY: Dict[str, ReferenceAlgorithm] = {}


def register_algorithm(name: str, to_date: ToDate, to_rata_die: ToRataDie) -> None:
    _REGISTRY[name] = ReferenceAlgorithm(name, to_date, to_rata_die)


def get_algorithm(name: str) -> ReferenceAlgorithm:
    if name not in _REGISTRY:
        raise KeyError(f"Unknown algorithm '{name}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[name]


def list_algorithms() -> List[str]:
    return sorted(_REGISTRY)


# Offsets of the Unix epoch in the sources' own day counts.
JDN_UNIX = 2440588      # Julian day number of 1970-01-01
FIXED_UNIX = 719163     # R.D. (1 January 0001 = 1) of 1970-01-01


# ============================================================
# Baum, "Date Algorithms"
# ============================================================

def baum_to_date(n: int) -> Date:
    z = n + 306 + FIXED_UNIX
    h = 100 * z - 25
    a = h // 3652425
    b = a - a // 4
    y_ = (100 * b + h) // 36525
    c = b + z - 365 * y_ - y_ // 4
    m_ = (535 * c + 48950) // 16384
    d = c - (979 * m_ - 2918) // 32
    j = m_ > 12
    return Date(y_ + j, m_ - 12 if j else m_, d)


def baum_to_rata_die(year: int, month: int, day: int) -> int:
    j = month < 3
    z = year - j
    m = month + 12 if j else month
    f = (979 * m - 2918) // 32
    n = day + f + 365 * z + z // 4 - z // 100 + z // 400 - 306
    return n - FIXED_UNIX


# ============================================================
# Boost.Date_Time (gregorian_calendar)
# ============================================================

def boost_to_date(day_number: int) -> Date:
    a = day_number + 32044 + JDN_UNIX
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return Date(year, month, day)


def boost_to_rata_die(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    d = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    return d - JDN_UNIX


# ============================================================
# Fliegel and Van Flandern (1968)
# ============================================================

def fliegel_flandern_to_date(jd: int) -> Date:
    L = jd + 68569 + JDN_UNIX
    N = 4 * L // 146097
    L = L - (146097 * N + 3) // 4
    I = 4000 * (L + 1) // 1461001
    L = L - 1461 * I // 4 + 31
    J = 80 * L // 2447
    K = L - 2447 * J // 80
    L = J // 11
    J = J + 2 - 12 * L
    I = 100 * (N - 49) + I + L
    return Date(I, J, K)


def fliegel_flandern_to_rata_die(year: int, month: int, day: int) -> int:
    # (month - 14) / 12 is -1 for Jan and Feb and 0 otherwise: truncation.
    t = tdiv(month - 14, 12)
    jd = (day - 32075 + 1461 * (year + 4800 + t) // 4
          + 367 * (month - 2 - t * 12) // 12
          - 3 * ((year + 4900 + t) // 100) // 4)
    return jd - JDN_UNIX


# ============================================================
# Hatcher (1984)
# ============================================================

def hatcher_to_date(n: int) -> Date:
    J = n + JDN_UNIX
    g = (3 * ((4 * J - 17918) // 146097) + 2) // 4 - 37
    N = J + g
    A = 4 * N // 1461 - 4712
    dp = (4 * N - 237) % 1461 // 4
    M = ((10 * dp + 5) // 306 + 2) % 12 + 1
    D = (10 * dp + 5) % 306 // 10 + 1
    return Date(A, M, D)


def hatcher_to_rata_die(A: int, M: int, D: int) -> int:
    j = M < 3
    Ap = A - 1 if j else A
    Mp = M + 9 if j else M - 3
    y = 1461 * (Ap + 4712) // 4
    d = (306 * Mp + 5) // 10
    N = y + d + D + 59
    g = 3 * (Ap // 100 + 49) // 4 - 38
    return N - g - JDN_UNIX


# ============================================================
# Reingold and Dershowitz, "Calendrical Calculations"
# ============================================================

def _rd_fixed_from_gregorian(year: int, month: int, day: int) -> int:
    mp = (month + 9) % 12
    yp = year - mp // 10
    a0 = yp // 400
    a1 = (yp // 100) % 4
    a2 = (yp // 4) % 25
    return 365 * yp + 97 * a0 + 24 * a1 + a2 + (3 * mp + 2) // 5 + 30 * mp + day - 306


def _rd_year_from_fixed(fixed: int) -> int:
    d0 = fixed - 1
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    return year if (n100 == 4 or n1 == 4) else year + 1


def reingold_dershowitz_to_rata_die(year: int, month: int, day: int) -> int:
    return _rd_fixed_from_gregorian(year, month, day) - FIXED_UNIX


def reingold_dershowitz_to_date(n: int) -> Date:
    fixed = n + FIXED_UNIX
    y = _rd_year_from_fixed(fixed + 306)
    prior_days = fixed - _rd_fixed_from_gregorian(y - 1, 3, 1)
    month = (5 * prior_days + 2) // 153 + 3
    if month > 12:
        month -= 12
    year = y - (month + 9) // 12
    day = fixed - _rd_fixed_from_gregorian(year, month, 1) + 1
    return Date(year, month, day)


# ============================================================
# glibc (__offtime year search, mktime day count)
# ============================================================

_MON_YDAY = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)


def _glibc_isleap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def _leaps_thru_end_of(y: int) -> int:
    return y // 4 - y // 100 + y // 400


def glibc_to_date(days: int) -> Date:
    y = 1970
    while days < 0 or days >= (366 if _glibc_isleap(y) else 365):
        # Guess a corrected year, assuming 365 days per year.
        yg = y + days // 365
        days -= (yg - y) * 365 + _leaps_thru_end_of(yg - 1) - _leaps_thru_end_of(y - 1)
        y = yg
    ip = _MON_YDAY[_glibc_isleap(y)]
    m = 11
    while days < ip[m]:
        m -= 1
    return Date(y, m + 1, days - ip[m] + 1)


def glibc_to_rata_die(year: int, month: int, day: int) -> int:
    yday = _MON_YDAY[_glibc_isleap(year)][month - 1] + day - 1
    return 365 * (year - 1970) + _leaps_thru_end_of(year - 1) - _leaps_thru_end_of(1969) + yday


# ============================================================
# OpenJDK (java.time.LocalDate, Java longs)
# ============================================================

_JDK_DAYS_PER_CYCLE = 146097
_JDK_DAYS_0000_TO_1970 = _JDK_DAYS_PER_CYCLE * 5 - (30 * 365 + 7)


def _jdk_is_leap_year(y: int) -> bool:
    return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0)


def openjdk_to_date(epoch_day: int) -> Date:
    zero_day = epoch_day + _JDK_DAYS_0000_TO_1970
    # adjust to 0000-03-01 so the leap day is at the end of the four year cycle
    zero_day -= 60
    adjust = 0
    if zero_day < 0:
        adjust_cycles = tdiv(zero_day + 1, _JDK_DAYS_PER_CYCLE) - 1
        adjust = adjust_cycles * 400
        zero_day += -adjust_cycles * _JDK_DAYS_PER_CYCLE
    year_est = (400 * zero_day + 591) // _JDK_DAYS_PER_CYCLE
    doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
    year_est += adjust
    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    dom = doy_est - (march_month0 * 306 + 5) // 10 + 1
    year_est += march_month0 // 10
    return Date(year_est, month, dom)


def openjdk_to_rata_die(year: int, month: int, day: int) -> int:
    y = year
    total = 365 * y
    if y >= 0:
        total += (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400
    else:
        total -= tdiv(y, -4) - tdiv(y, -100) + tdiv(y, -400)
    total += (367 * month - 362) // 12
    total += day - 1
    if month > 2:
        total -= 1
        if not _jdk_is_leap_year(y):
            total -= 1
    return total - _JDK_DAYS_0000_TO_1970


# ============================================================
# .NET (System.DateTime, days since 0001-01-01)
# ============================================================

_NET_ADJUSTMENT = FIXED_UNIX - 1
_NET_DAYS_PER_4_YEARS = 1461
_NET_DAYS_PER_100_YEARS = 36524
_NET_DAYS_PER_400_YEARS = 146097


def _net_is_leap_year(year: int) -> bool:
    return (year & 3) == 0 and ((year & 15) == 0 or year % 25 != 0)


def dotnet_to_date(rata_die: int) -> Date:
    n = rata_die + _NET_ADJUSTMENT
    y400 = n // _NET_DAYS_PER_400_YEARS
    n -= y400 * _NET_DAYS_PER_400_YEARS
    y100 = min(n // _NET_DAYS_PER_100_YEARS, 3)
    n -= y100 * _NET_DAYS_PER_100_YEARS
    y4 = n // _NET_DAYS_PER_4_YEARS
    n -= y4 * _NET_DAYS_PER_4_YEARS
    y1 = min(n // 365, 3)
    year = y400 * 400 + y100 * 100 + y4 * 4 + y1 + 1
    n -= y1 * 365
    leap_year = y1 == 3 and (y4 != 24 or y100 == 3)
    days = _MON_YDAY[leap_year]
    m = (n >> 5) + 1
    while n >= days[m]:
        m += 1
    return Date(year, m, n - days[m - 1] + 1)


def dotnet_to_rata_die(year: int, month: int, day: int) -> int:
    days = _MON_YDAY[_net_is_leap_year(year)]
    y = year - 1
    n = y * 365 + y // 4 - y // 100 + y // 400 + days[month - 1] + day - 1
    return n - _NET_ADJUSTMENT


# ============================================================
# libc++ (std::chrono, Hinnant's civil_from_days / days_from_civil)
# ============================================================

def libcxx_to_date(d: int) -> Date:
    z = d + 719468
    era = tdiv(z if z >= 0 else z - 146096, 146097)
    doe = z - era * 146097                                      # [0, 146096]
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365  # [0, 399]
    yr = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)             # [0, 365]
    mp = (5 * doy + 2) // 153                                   # [0, 11]
    dy = doy - (153 * mp + 2) // 5 + 1                          # [1, 31]
    mth = mp + 3 if mp < 10 else mp - 9                         # [1, 12]
    return Date(yr + (mth <= 2), mth, dy)


def libcxx_to_rata_die(year: int, month: int, day: int) -> int:
    yr = year - (month <= 2)
    era = tdiv(yr if yr >= 0 else yr - 399, 400)
    yoe = yr - era * 400                                        # [0, 399]
    doy = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy               # [0, 146096]
    return era * 146097 + doe - 719468


# ============================================================
# Firefox (SpiderMonkey, ES5 15.9.1 time values on doubles)
# ============================================================

MS_PER_DAY = 86400000.0


def _es5_is_leap_year(year: float) -> bool:
    return math.fmod(year, 4) == 0 and (math.fmod(year, 100) != 0 or math.fmod(year, 400) == 0)


def _es5_month_lengths(year: float) -> Tuple[int, ...]:
    feb = 29 if _es5_is_leap_year(year) else 28
    return (31, feb, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _es5_day_from_year(y: float) -> float:
    return (365 * (y - 1970) + math.floor((y - 1969) / 4.0)
            - math.floor((y - 1901) / 100.0) + math.floor((y - 1601) / 400.0))


def _es5_year_from_time(t: float) -> float:
    y = math.floor(t / (MS_PER_DAY * 365.2425)) + 1970
    t2 = _es5_day_from_year(y) * MS_PER_DAY
    # The average year length is off within a few hours of new year.
    if t2 > t:
        y -= 1
    elif t2 + MS_PER_DAY * (366 if _es5_is_leap_year(y) else 365) <= t:
        y += 1
    return y


def firefox_to_date(n: int) -> Date:
    t = n * MS_PER_DAY
    year = _es5_year_from_time(t)
    d = math.floor(t / MS_PER_DAY) - _es5_day_from_year(year)
    month = 1
    for length in _es5_month_lengths(year):
        if d < length:
            break
        d -= length
        month += 1
    return Date(int(year), month, int(d) + 1)


def firefox_to_rata_die(year: int, month: int, day: int) -> int:
    # MakeDay (ES5 15.9.1.12); the benchmarked source converts one way only.
    before = sum(_es5_month_lengths(year)[:month - 1])
    return int(_es5_day_from_year(year)) + before + day - 1


# ============================================================
# Neri and Schneider, uint32_t with the Unix epoch
# ============================================================

NS_S = 82
NS_K = 719468 + 146097 * NS_S
NS_L = 400 * NS_S
_U32 = INT32.umax


def neri_schneider_to_date(N_U: int) -> Date:
    N = (N_U + NS_K) & _U32
    N_1 = (4 * N + 3) & _U32
    C = N_1 // 146097
    N_C = N_1 % 146097 // 4
    N_2 = 4 * N_C + 3
    P_2 = 2939745 * N_2
    Z = P_2 >> 32
    N_Y = (P_2 & _U32) // 2939745 // 4
    Y = (100 * C + Z) & _U32
    N_3 = 2141 * N_Y + 197913
    M = N_3 >> 16
    D = (N_3 & 0xFFFF) // 2141
    J = N_Y >= 306
    return Date(INT32.wrap_signed(Y - NS_L + J), M - 12 if J else M, D + 1)


def neri_schneider_to_rata_die(Y_G: int, M_G: int, D_G: int) -> int:
    J = M_G <= 2
    Y = (INT32.wrap_unsigned(Y_G) + NS_L - J) & _U32
    M = M_G + 12 if J else M_G
    D = D_G - 1
    C = Y // 100
    y_star = (((1461 * Y) & _U32) // 4 - C + C // 4) & _U32
    m_star = (979 * M - 2919) // 32
    N = (y_star + m_star + D) & _U32
    return INT32.wrap_signed(N - NS_K)


register_algorithm("baum", baum_to_date, baum_to_rata_die)
register_algorithm("boost", boost_to_date, boost_to_rata_die)
register_algorithm("dotnet", dotnet_to_date, dotnet_to_rata_die)
register_algorithm("firefox", firefox_to_date, firefox_to_rata_die)
register_algorithm("fliegel_flandern", fliegel_flandern_to_date, fliegel_flandern_to_rata_die)
register_algorithm("glibc", glibc_to_date, glibc_to_rata_die)
register_algorithm("hatcher", hatcher_to_date, hatcher_to_rata_die)
register_algorithm("libcxx", libcxx_to_date, libcxx_to_rata_die)
register_algorithm("neri_schneider", neri_schneider_to_date, neri_schneider_to_rata_die)
register_algorithm("openjdk", openjdk_to_date, openjdk_to_rata_die)
register_algorithm("reingold_dershowitz", reingold_dershowitz_to_date, reingold_dershowitz_to_rata_die)
