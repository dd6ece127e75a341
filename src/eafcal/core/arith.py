"""
eafcal.core.arith
-----------------
Integer primitives shared by every calendar formula.

Python's ``//`` and ``%`` already floor, but the formulas are written against the
Euclidean contract below so that each step reads the same way as the paper and
so that a truncating division cannot slip in unnoticed.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache


def _check_divisor(d: int) -> None:
    if d <= 0:
        raise ValueError(f"divisor must be positive, got {d}")


def quotient(n: int, d: int) -> int:
    """Quotient of Euclidean division of n by d > 0."""
    _check_divisor(d)
    if n >= 0:
        return n // d
    # Adjusted numerator, then truncation towards zero.
    return -((-(n - (d - 1))) // d)


def remainder(n: int, d: int) -> int:
    """Remainder of Euclidean division of n by d > 0, always in [0, d)."""
    _check_divisor(d)
    if n >= 0:
        return n % d
    return n - d * quotient(n, d)


def tdiv(n: int, d: int) -> int:
    """C-style division (truncation towards zero)."""
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def tmod(n: int, d: int) -> int:
    """C-style remainder, carrying the sign of the dividend."""
    return n - d * tdiv(n, d)


@dataclass(frozen=True)
class IntWidth:
    """Fixed integer width used to derive bounds and to emulate unsigned wrap-around."""
    bits: int

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def umax(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, n: int) -> bool:
        return self.min <= n <= self.max

    def wrap_unsigned(self, n: int) -> int:
        """Value of n modulo 2^bits, as the unsigned type would hold it."""
        return n & self.umax

    def wrap_signed(self, n: int) -> int:
        """Two's complement reinterpretation of n as a signed integer."""
        u = n & self.umax
        return u - (1 << self.bits) if u > self.max else u


@lru_cache(maxsize=None)
def int_width(bits: int) -> IntWidth:
    return IntWidth(bits)


INT32 = int_width(32)
INT64 = int_width(64)
