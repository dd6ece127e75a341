# tests/test_vectorized.py

import random

import numpy as np
import pytest

from eafcal.core.arith import int_width
from eafcal.core.types import Date
from eafcal.engines import gregorian
from eafcal.engines import vectorized as vec
from eafcal.engines.factory import make_engine
from eafcal.engines.limits import gregorian_opt_limits
from eafcal.engines.specs import ALL_SPECS


def _sample(lim, count=3000, seed=5):
    random.seed(seed)
    ns = [random.randint(lim.rata_die_min, lim.rata_die_max) for _ in range(count)]
    ns += [lim.rata_die_min, lim.rata_die_max, 0, -1]
    return [n for n in ns if lim.contains_rata_die(n)]


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
def test_to_date_matches_scalar(name):
    cal = make_engine(ALL_SPECS[name])
    ns = _sample(cal.limits)
    Y, M, D = vec.to_date(cal, np.array(ns, dtype=np.int64))
    for i, n in enumerate(ns):
        assert (int(Y[i]), int(M[i]), int(D[i])) == cal.to_date(n).astuple()


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
def test_to_rata_die_matches_scalar(name):
    cal = make_engine(ALL_SPECS[name])
    lim = cal.limits
    dates = [d for d in (cal.to_date(n) for n in _sample(lim, seed=9)) if lim.contains_date(d)]
    dates += [lim.date_min, lim.date_max]
    Y = np.array([d.year for d in dates], dtype=np.int64)
    M = np.array([d.month for d in dates], dtype=np.int64)
    D = np.array([d.day for d in dates], dtype=np.int64)
    got = vec.to_rata_die(cal, Y, M, D)
    assert got.dtype == np.int64
    for i, d in enumerate(dates):
        assert int(got[i]) == cal.to_rata_die(d.year, d.month, d.day)


def test_unix_epoch():
    cal = make_engine(ALL_SPECS["gregorian-unix32"])
    Y, M, D = vec.to_date(cal, np.array([-1, 0, 11016], dtype=np.int64))
    assert Y.tolist() == [1969, 1970, 2000]
    assert M.tolist() == [12, 1, 2]
    assert D.tolist() == [31, 1, 29]
    n = vec.to_rata_die(cal, np.array([1970, 2000]), np.array([1, 3]), np.array([1, 1]))
    assert n.tolist() == [0, 11017]


def test_opt_wraps_like_scalar_past_the_bound():
    cal = make_engine(ALL_SPECS["gregorian-unix32"])
    n = cal.limits.rata_die_max + 1
    Y, M, D = vec.to_date(cal, np.array([n], dtype=np.int64))
    assert (int(Y[0]), int(M[0]), int(D[0])) == cal.to_date(n).astuple() == (-32800, 3, 1)


def test_julian_and_gregorian_arrays():
    n = np.arange(-5, 5, dtype=np.int64)
    Y, M, D = vec.julian_to_date(n)
    assert vec.julian_to_rata_die(Y, M, D).tolist() == n.tolist()
    Y, M, D = vec.gregorian_to_date(n)
    assert vec.gregorian_to_rata_die(Y, M, D).tolist() == n.tolist()
    assert (int(Y[5]), int(M[5]), int(D[5])) == (0, 3, 1)


@pytest.mark.parametrize("bits", [32, 64])
@pytest.mark.parametrize("epoch, s", [(0, -1), (-719468, 0), (-719468, -3)])
def test_opt_negative_shift_matches_scalar(bits, epoch, s):
    width = int_width(bits)
    lim = gregorian_opt_limits(width, epoch, s)
    ns = [lim.rata_die_min, lim.rata_die_min + 10, lim.rata_die_min + 146097, lim.rata_die_max]
    Y, M, D = vec.gregorian_to_date_opt(np.array(ns, dtype=np.int64), width=width, epoch=epoch, s=s)
    for i, n in enumerate(ns):
        d = gregorian.to_date_opt(n, width=width, epoch=epoch, s=s)
        assert (int(Y[i]), int(M[i]), int(D[i])) == d.astuple()

    dates = [lim.date_min, Date(lim.date_min.year + 1, 2, 28), Date(lim.date_min.year + 400, 12, 31)]
    got = vec.gregorian_to_rata_die_opt(
        np.array([d.year for d in dates]), np.array([d.month for d in dates]), np.array([d.day for d in dates]),
        width=width, epoch=epoch, s=s,
    )
    assert got.tolist() == [gregorian.to_rata_die_opt(*d.astuple(), width=width, epoch=epoch, s=s) for d in dates]


def test_dispatch_with_negative_cycle_count():
    cal = make_engine(ALL_SPECS["gregorian-opt32"].tweak(s=-1))
    n = cal.limits.rata_die_min + 10
    Y, M, D = vec.to_date(cal, np.array([n], dtype=np.int64))
    assert (int(Y[0]), int(M[0]), int(D[0])) == cal.to_date(n).astuple() == (400, 3, 11)
    assert vec.to_rata_die(cal, np.array([400]), np.array([3]), np.array([11])).tolist() == [n]
