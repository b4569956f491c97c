from typing import Iterable, List

from .errors import MalformedStreamError
from .settings import ADAPTIVE, PROB_MAX, PROB_MIN, SYMBOL_LETTERS


def decode_ascii_digit(digit: int) -> int:
    if 0x30 <= digit <= 0x39:
        return digit - 0x30
    raise MalformedStreamError(f"not a decimal digit: {digit!r}")


def encode_ascii_digit(value: int) -> int:
    if not (0 <= value <= 9):
        raise ValueError("digit value must be 0..9")
    return 0x30 + value


def check_prob(p: int) -> int:
    p = int(p)
    if p != ADAPTIVE and not (PROB_MIN <= p <= PROB_MAX):
        raise ValueError(f"probability must be {PROB_MIN}..{PROB_MAX} (or adaptive), got {p}")
    return p


def parse_prob(s: str) -> int:
    """Parse a CLI probability: an integer 1..15 or 'adaptive'."""
    if s.strip().lower() in ("adaptive", "a"):
        return ADAPTIVE
    try:
        return check_prob(int(s))
    except ValueError:
        raise ValueError(f"invalid probability {s!r}: expected 1..15 or 'adaptive'") from None


def text_to_symbols(text: str) -> List[int]:
    out = []
    for ch in text:
        idx = SYMBOL_LETTERS.find(ch)
        if idx < 0:
            raise ValueError(f"unexpected letter {ch!r}: only {SYMBOL_LETTERS!r} are allowed")
        out.append(idx)
    return out


def symbols_to_text(symbols: Iterable[int]) -> str:
    return "".join(SYMBOL_LETTERS[int(s)] for s in symbols)


def prob_label(p: int) -> str:
    if p == ADAPTIVE:
        return "adaptive"
    return f" {p:2d} / 16"
