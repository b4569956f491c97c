import numpy as np
import pytest

from toyrc.interval import cascade


def test_cascade_half():
    rows = cascade(5000)
    assert rows.shape == (7, 3)
    assert tuple(rows[0]) == (0, 4999, 9999)
    assert rows[-1][1] == 8358
    assert np.all(rows[:, 0] <= rows[:, 1])
    assert np.all(rows[:, 1] <= rows[:, 2])


def test_cascade_two_thirds():
    rows = cascade(6667)
    assert tuple(rows[0]) == (0, 6666, 9999)
    assert 8300 <= rows[-1][1] < 8400


def test_cascade_bad_args():
    with pytest.raises(ValueError):
        cascade(0)
    with pytest.raises(ValueError):
        cascade(5000, lo=0.9, hi=0.8)
    with pytest.raises(ValueError):
        cascade(5000, max_rows=2)
