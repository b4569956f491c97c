import logging
from typing import List, Optional, Tuple, Union

from .arith import CoderOptions, RangeDecoder
from .encoder import initial_prob

log = logging.getLogger("toyrc")


def decode(
    p: int, data: Union[bytes, str], n: int, options: Optional[CoderOptions] = None
) -> Tuple[List[int], int]:
    """Decode ``n`` symbols from an ASCII digit payload.

    Raises MalformedStreamError when the payload is not a valid encoding.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if isinstance(data, str):
        data = data.encode("ascii", errors="replace")
    prob, options = initial_prob(p, options)
    dec = RangeDecoder(bytes(data), options)
    out = [dec.decode_bit(prob) for _ in range(n)]
    log.debug("decoded %d symbols from %d digits (final p=%d)", n, len(data), prob.value)
    return out, prob.value
