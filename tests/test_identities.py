# tests/test_identities.py

import numpy as np
import pytest

from eafcal.design import identities as ids

CAP = 300000


@pytest.mark.parametrize("claim", [c for c in ids.CLAIMS if c.holds], ids=lambda c: c.name)
def test_identity_holds(claim):
    assert ids.find_counterexamples(claim, stop=CAP, chunk=1 << 16) == []


@pytest.mark.parametrize("claim", [c for c in ids.CLAIMS if not c.holds], ids=lambda c: c.name)
def test_unsigned_rendition_breaks(claim):
    bad = ids.find_counterexamples(claim)
    assert bad and bad[0] == 0


@pytest.mark.parametrize("claim", [c for c in ids.CLAIMS if c.source is not None], ids=lambda c: c.name)
def test_derived_bound_matches_claim(claim):
    assert ids.check_derivation(claim) is True


def test_identity_fails_at_its_bound():
    claim = next(c for c in ids.CLAIMS if c.name == "example-13")
    assert ids.find_counterexamples(claim) == []
    n = np.array([claim.stop], dtype=np.int64)
    assert (claim.lhs(n) != claim.rhs(n)).all()


def test_main(capsys):
    assert ids.main(["--only", "example-08", "--only", "example-08u"]) == 0
    out = capsys.readouterr().out
    assert "Pass." in out
    assert "as expected" in out
    assert "Derived bound matches: yes" in out


def test_main_unknown_claim(capsys):
    assert ids.main(["--only", "example-99"]) == 1
    assert "Unknown claim" in capsys.readouterr().err
