# tests/test_fast_eaf.py

import pytest

from eafcal.core.errors import CoefficientOverflowError
from eafcal.design import fast_eaf as fe
from eafcal.design.fast_eaf import EAF, FastEAF, get_fast_eaf, get_fast_eafs, render, verify

# (rounding, k, eaf, a', b', U)
KNOWN = [
    ("down", 16, EAF(5, 461, 153), 2141, 197913, 734),
    ("up", 5, EAF(153, -457, 5), 980, -2928, 12),
    ("down", 5, EAF(153, -457, 5), 979, -2919, 34),
    ("up", 32, EAF(1, 0, 1461), 2939745, 0, 28825529),
    ("up", 32, EAF(1, 0, 3600), 1193047, 0, 2257199),
    ("up", 32, EAF(1, 0, 60), 71582789, 0, 97612919),
    ("up", 32, EAF(1, 0, 10), 429496730, 0, 1073741829),
]


@pytest.mark.parametrize("rounding,k,eaf,a,b,U", KNOWN)
def test_published_coefficients(rounding, k, eaf, a, b, U):
    fast = get_fast_eaf(rounding, k, eaf)
    assert fast == FastEAF(a=a, b=b, d=2**k, k=k, U=U)


@pytest.mark.parametrize("rounding,k,eaf", [(r, k, e) for r, k, e, *_ in KNOWN[:3]])
def test_bound_is_tight(rounding, k, eaf):
    fast = get_fast_eaf(rounding, k, eaf)
    assert verify(eaf, fast)
    assert eaf(fast.U) != fast(fast.U)


def test_worked_example_month_and_day():
    """(5 * N_Y + 461) / 153 with k = 16, as used by the optimised to_date."""
    eaf = EAF(5, 461, 153)
    fast = get_fast_eaf("down", 16, eaf)
    for n in range(734):
        assert eaf(n) == fast(n)
    assert eaf(734) != fast(734)


def test_exact_divisor_down_is_unbounded():
    # 2^2 * 1 / 4 has no remainder: a' = 1 and the error never grows.
    fast = get_fast_eaf("down", 2, EAF(1, 0, 4))
    assert (fast.a, fast.b, fast.U) == (1, 0, None)
    assert verify(EAF(1, 0, 4), fast, limit=5000)
    with pytest.raises(ValueError):
        verify(EAF(1, 0, 4), fast)


def test_coefficient_overflow():
    with pytest.raises(CoefficientOverflowError):
        get_fast_eaf("up", 1, EAF(fe.U64_MAX, 0, 1))
    # CoefficientOverflowError is an OverflowError too.
    with pytest.raises(OverflowError):
        get_fast_eaf("down", 2, EAF(fe.U64_MAX, 0, 1))


@pytest.mark.parametrize("kwargs", [dict(a=-1, b=0, d=1), dict(a=1, b=0, d=0),
                                    dict(a=1, b=2**63, d=1), dict(a=2**64, b=0, d=1)])
def test_eaf_ranges(kwargs):
    with pytest.raises(ValueError):
        EAF(**kwargs)


def test_bad_rounding_and_k():
    with pytest.raises(ValueError):
        get_fast_eaf("sideways", 8, EAF(1, 0, 3))
    with pytest.raises(ValueError):
        get_fast_eaf("up", 0, EAF(1, 0, 3))
    with pytest.raises(ValueError):
        get_fast_eaf("up", 65, EAF(1, 0, 3))


def test_render_k_64():
    fast = get_fast_eaf("up", 64, EAF(1, 0, 10))
    lines = render(fast).splitlines()
    assert lines[0] == "a'          = 1844674407370955162"
    assert lines[1] == "b'          = 0"
    assert lines[2] == "d'          = 18446744073709551616"
    assert lines[3] == "k           = 64"
    assert lines[4].startswith("upper bound = ")


def test_render_unbounded():
    assert render(get_fast_eaf("down", 2, EAF(1, 0, 4))).splitlines()[-1] == "upper bound = unbounded"


def test_main_prints_each_k(capsys):
    assert fe.main(["down", "5", "461", "153", "16", "99", "5"]) == 0
    out, err = capsys.readouterr()
    assert "a'          = 2141" in out
    assert "b'          = 197913" in out
    assert "upper bound = 734" in out
    assert "k           = 5" in out
    assert "skipping k = 99" in err


@pytest.mark.parametrize("argv,msg", [
    (["sideways", "1", "0", "1", "3"], "unknown 'rounding'"),
    (["up", "x", "0", "1", "3"], "cannot parse 'a'"),
    (["up", "1", "0", "0", "3"], "d must be in"),
    (["up", "1", "0", "7", "k"], "cannot parse 'k'"),
])
def test_main_rejects_bad_input(capsys, argv, msg):
    assert fe.main(argv) == 1
    assert msg in capsys.readouterr().err


def test_get_fast_eafs_one_per_k():
    fasts = get_fast_eafs("up", [5, 16], EAF(153, -457, 5))
    assert [f.k for f in fasts] == [5, 16]
    assert fasts[0].a == 980


def test_main_skips_overflowing_k(capsys):
    assert fe.main(["up", str(fe.U64_MAX), "0", "1", "1"]) == 0
    out, err = capsys.readouterr()
    assert out == ""
    assert "skipping k = 1" in err
