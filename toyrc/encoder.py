import logging
from typing import Iterable, Optional, Tuple

from .arith import CoderOptions, Prob, RangeEncoder
from .settings import ADAPTIVE, FLUSH_STEPS, PROB_START
from .utils import check_prob

log = logging.getLogger("toyrc")


def initial_prob(p: int, options: Optional[CoderOptions]) -> Tuple[Prob, CoderOptions]:
    options = options or CoderOptions()
    if check_prob(p) == ADAPTIVE:
        return Prob(PROB_START, adaptive=True), options
    return Prob(p, adaptive=options.adaptive), options


def encode(p: int, symbols: Iterable[int], options: Optional[CoderOptions] = None) -> Tuple[bytes, int]:
    """Encode a sequence of 0 (low) / 1 (high) symbols.

    ``p`` is the starting probability of the low symbol in 1/16ths, or
    ``ADAPTIVE`` for adaptive mode starting at 8/16. Returns the ASCII digit
    payload and the probability after the last symbol.
    """
    prob, options = initial_prob(p, options)
    enc = RangeEncoder(options)
    n = 0
    for sym in symbols:
        bym = int(sym)
        if bym not in (0, 1):
            raise ValueError(f"symbols must be 0 or 1, got {sym!r}")
        enc.encode_bit(prob, bym)
        n += 1
    data = enc.finish(FLUSH_STEPS)
    log.debug("encoded %d symbols into %d digits (final p=%d)", n, len(data), prob.value)
    return data, prob.value
