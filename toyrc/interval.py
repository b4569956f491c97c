"""
Interval narrowing, the picture behind range coding.

A probability splits the interval [x0, x2] at x1. Keeping whichever side
holds a target sub-range [lo, hi) and splitting again walks the interval
down until the split point lands inside the target.
"""

import numpy as np

SCALE = 10000


def cascade(prob: int, lo: float = 0.83, hi: float = 0.84, max_rows: int = 64) -> np.ndarray:
    """Return the (x0, x1, x2) rows of the cascade as an int array of shape (rows, 3).

    ``prob`` is in 1/10000 units (5000 is one half) and weights the split
    towards x2.
    """
    if not (0 < prob < SCALE):
        raise ValueError("prob must be in (0, 10000)")
    if not (0.0 <= lo < hi <= 1.0):
        raise ValueError("need 0 <= lo < hi <= 1")
    target_lo = int(SCALE * lo)
    target_hi = int(SCALE * hi)

    x0, x2 = 0, SCALE - 1
    rows = []
    while len(rows) < max_rows:
        x1 = (x0 * (SCALE - prob) + x2 * prob) // SCALE
        rows.append((x0, x1, x2))
        if x1 < target_lo:
            x0 = x1
        elif target_hi <= x1:
            x2 = x1
        else:
            return np.array(rows, dtype=np.int64)
    raise ValueError(f"cascade did not reach [{lo}, {hi}) within {max_rows} rows")
