from dataclasses import dataclass
from typing import Callable, Optional

from .errors import MalformedStreamError
from .settings import (
    CARRY_THRESHOLD,
    HEADER_DIGITS,
    LOW_MODULUS,
    MARKER,
    PROB_BITS,
    PROB_MAX,
    PROB_MIN,
    RENORM_THRESHOLD,
    SYMBOL_LETTERS,
    WIDTH_INIT,
)
from .utils import decode_ascii_digit, encode_ascii_digit

# Trace columns line up under each other, like the blog post's listings.
_PAD = " " * 55


@dataclass(frozen=True)
class CoderOptions:
    """Per-call coder options."""

    adaptive: bool = False
    trace: Optional[Callable[[str], None]] = None


class Prob:
    """Probability of the low symbol, in 1/16ths. Owned by one coder for one call."""

    def __init__(self, value: int, adaptive: bool = False):
        if not (PROB_MIN <= value <= PROB_MAX):
            raise ValueError(f"probability must be {PROB_MIN}..{PROB_MAX}")
        self.value = value
        self.adaptive = adaptive

    def nudge(self, delta: int):
        # delta should be +1 or -1
        if not self.adaptive:
            return
        q = self.value + delta
        if PROB_MIN <= q <= PROB_MAX:
            self.value = q

    def threshold(self, width: int) -> int:
        return (width >> PROB_BITS) * self.value


class RangeEncoder:
    def __init__(self, options: CoderOptions = CoderOptions()):
        self.low = 0
        self.width = WIDTH_INIT
        self.pending_head = MARKER
        self.pending_extra = 0
        self.dst = bytearray()
        self.trace = options.trace
        if self.trace:
            self.trace(f"{_PAD}emit: {chr(self.pending_head)}")

    def encode_bit(self, p: Prob, bym: int):
        t = p.threshold(self.width)
        if self.trace:
            self.trace(
                f"low:  {self.low:5d}   width: {self.width:4d}   p: {p.value:2d}   "
                f"t: {t:4d}   bym: {SYMBOL_LETTERS[bym]}"
            )
        if bym == 0:
            self.width = t
            p.nudge(+1)
        else:
            self.low += t
            self.width -= t
            p.nudge(-1)

        while self.width < RENORM_THRESHOLD:
            self.shift_low(p)
            self.width *= 10

    def shift_low(self, p: Optional[Prob] = None, final: bool = False):
        if self.trace:
            if p is not None:
                head = f"low:  {self.low:5d}   width: {self.width:4d}   p: {p.value:2d}"
            else:
                head = f"low:  {self.low:5d}                      "

        if self.low < CARRY_THRESHOLD:
            self.dst.append(self.pending_head)
            self.dst.extend(b"9" * self.pending_extra)
            self.pending_head = encode_ascii_digit(self.low // 1000)
            self.pending_extra = 0
            self.low = (self.low * 10) % LOW_MODULUS
            if self.trace:
                self.trace(head if final else f"{head}                      emit: {chr(self.pending_head)}")

        elif self.low < LOW_MODULUS:
            self.pending_extra += 1
            self.low = (self.low * 10) % LOW_MODULUS
            if self.trace:
                self.trace(head if final else f"{head}                      emit: 9")

        else:
            old_low = self.low
            carried = (decode_ascii_digit(self.pending_head) + 1) % 10
            self.dst.append(encode_ascii_digit(carried))
            self.dst.extend(b"0" * self.pending_extra)
            self.pending_head = encode_ascii_digit((self.low // 1000) % 10)
            self.pending_extra = 0
            self.low = (self.low * 10) % LOW_MODULUS
            if self.trace:
                if final:
                    self.trace(head)
                else:
                    self.trace(f"{head}                      emit: carry")
                    pv = f"{p.value:2d}" if p is not None else "  "
                    self.trace(
                        f"low:  {old_low % LOW_MODULUS:5d}   width: {self.width:4d}   p: {pv}"
                        f"                      emit: {chr(self.pending_head)}"
                    )

    def finish(self, steps: int) -> bytes:
        # The width no longer matters; zeroed so the drain trace leaves it out.
        self.width = 0
        for i in range(steps):
            self.shift_low(None, final=(i == steps - 1))
        return bytes(self.dst)


class RangeDecoder:
    def __init__(self, data: bytes, options: CoderOptions = CoderOptions()):
        self.trace = options.trace
        if len(data) < 1 + HEADER_DIGITS:
            raise MalformedStreamError("stream too short for its header")
        if self.trace:
            for x in data[: 1 + HEADER_DIGITS]:
                self.trace(f"{_PAD}load: {chr(x)}")
        if data[0] != MARKER:
            raise MalformedStreamError(f"bad marker byte {data[0]!r}")

        self.bits = 0
        for x in data[1 : 1 + HEADER_DIGITS]:
            self.bits = self.bits * 10 + decode_ascii_digit(x)
        self.width = WIDTH_INIT
        if self.bits >= self.width:
            raise MalformedStreamError(f"bits {self.bits} not below width {self.width}")
        # From here onwards, bits < width is an invariant.
        self.src = data
        self.pos = 1 + HEADER_DIGITS

    def _next_digit(self) -> int:
        if self.pos >= len(self.src):
            raise MalformedStreamError("stream ended before all symbols were decoded")
        digit = self.src[self.pos]
        self.pos += 1
        return digit

    def decode_bit(self, p: Prob) -> int:
        t = p.threshold(self.width)
        if self.trace:
            line = f"bits:  {self.bits:4d}   width: {self.width:4d}   p: {p.value:2d}   "
        if self.bits < t:
            bym = 0
            self.width = t
            p.nudge(+1)
        else:
            bym = 1
            self.bits -= t
            self.width -= t
            p.nudge(-1)
        if self.trace:
            self.trace(f"{line}t: {t:4d}   bym: {SYMBOL_LETTERS[bym]}")

        while self.width < RENORM_THRESHOLD:
            digit = self._next_digit()
            if self.trace:
                self.trace(
                    f"bits:  {self.bits:4d}   width: {self.width:4d}   p: {p.value:2d}"
                    f"                      load: {chr(digit)}"
                )
            self.bits = self.bits * 10 + decode_ascii_digit(digit)
            self.width *= 10
        return bym
