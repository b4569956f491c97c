import math

import pytest

from toyrc.encoder import encode
from toyrc.examples import TXT
from toyrc.settings import ADAPTIVE, FLUSH_STEPS
from toyrc.stats import compare, empirical_entropy, entropy_digits, ideal_digits
from toyrc.utils import text_to_symbols


def test_entropy():
    assert empirical_entropy([0, 1] * 8) == pytest.approx(1.0)
    assert empirical_entropy([0] * 10) == 0.0
    assert empirical_entropy([]) == 0.0
    assert entropy_digits([0, 1] * 8) == pytest.approx(16 / math.log2(10))


def test_ideal_digits():
    assert ideal_digits([0] * 4, 8) == pytest.approx(4 * math.log10(2))
    assert ideal_digits([1], 12) == pytest.approx(math.log10(4))
    with pytest.raises(ValueError):
        ideal_digits([0], ADAPTIVE)


def test_compare_matches_encoder():
    symbols = text_to_symbols(TXT)
    rows = compare(symbols)
    assert [r["p"] for r in rows] == [4, 8, 12, 14, 15, ADAPTIVE]
    for r in rows:
        data, final_p = encode(r["p"], symbols)
        assert r["digits"] == len(data)
        assert r["renorms"] == len(data) - FLUSH_STEPS
        assert r["final_p"] == final_p
    assert rows[-1]["ideal"] is None
    assert rows[0]["ideal"] > rows[-2]["ideal"]


def test_rejects_bad_symbols():
    with pytest.raises(ValueError):
        empirical_entropy([0, 3])
