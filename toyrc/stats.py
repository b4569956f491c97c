import math
from typing import Iterable, List, Sequence

import numpy as np

from .encoder import encode
from .settings import ADAPTIVE, FLUSH_STEPS
from .utils import check_prob, prob_label


def _as_array(symbols: Iterable[int]) -> np.ndarray:
    if not isinstance(symbols, np.ndarray):
        symbols = list(symbols)
    arr = np.asarray(symbols, dtype=np.int64)
    if arr.size and not np.isin(arr, (0, 1)).all():
        raise ValueError("symbols must be 0 or 1")
    return arr


def empirical_entropy(symbols: Iterable[int]) -> float:
    """Bits per symbol of the observed low/high frequencies."""
    arr = _as_array(symbols)
    if arr.size == 0:
        return 0.0
    freq = np.bincount(arr, minlength=2) / arr.size
    freq = freq[freq > 0]
    return float(-(freq * np.log2(freq)).sum())


def ideal_digits(symbols: Iterable[int], p: int) -> float:
    """Decimal digits an ideal coder needs with a fixed probability p/16 for the low symbol."""
    p = check_prob(p)
    if p == ADAPTIVE:
        raise ValueError("ideal_digits needs a fixed probability")
    arr = _as_array(symbols)
    probs = np.where(arr == 0, p / 16.0, 1.0 - p / 16.0)
    return float(-np.log10(probs).sum())


def compare(symbols: Sequence[int], probs: Iterable[int] = (4, 8, 12, 14, 15, ADAPTIVE)) -> List[dict]:
    arr = _as_array(symbols)
    rows = []
    for p in probs:
        data, final_p = encode(p, arr)
        rows.append(
            {
                "p": p,
                "label": prob_label(p),
                "digits": len(data),
                # one digit per shift; FLUSH_STEPS of them are the final drain
                "renorms": len(data) - FLUSH_STEPS,
                "ideal": None if p == ADAPTIVE else ideal_digits(arr, p),
                "final_p": final_p,
            }
        )
    return rows


def entropy_digits(symbols: Iterable[int]) -> float:
    """Empirical entropy of the whole sequence expressed in decimal digits."""
    arr = _as_array(symbols)
    return empirical_entropy(arr) * arr.size / math.log2(10)
