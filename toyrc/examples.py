"""
Demo for the toy range coder, as walked through in the blog post.
"""

from .arith import CoderOptions
from .decoder import decode
from .encoder import encode
from .errors import RoundTripError
from .settings import ADAPTIVE
from .utils import prob_label, symbols_to_text, text_to_symbols

TXT = "ggggbbgbbbbbbgbbbgbbbbbbbbbbbbgbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"


def do(text: str, p: int, out=print, trace: bool = False) -> bytes:
    options = CoderOptions(trace=out if trace else None)
    symbols = text_to_symbols(text)
    encoded, _ = encode(p, symbols, options)
    out(f"encoded (p = {prob_label(p)}; len={len(text):2d}): «{encoded.decode('ascii')}»")
    decoded, _ = decode(p, encoded, len(symbols), options)
    if symbols_to_text(decoded) != text:
        raise RoundTripError(f"round trip failed for {text!r} with p={p}")
    return encoded


def run_demo(out=print):
    for p in (4, 8, 12, 14, 15, ADAPTIVE):
        do(TXT, p, out)

    out("\n----\n")
    for n in (64, 48, 32, 16):
        do(TXT[:n], ADAPTIVE, out)

    out("\n----\n")
    alt = TXT[:-1] + "g"
    do(TXT, ADAPTIVE, out)
    do(alt, ADAPTIVE, out)

    out("\n----\n")
    do(TXT[:16], ADAPTIVE, out, trace=True)


if __name__ == "__main__":
    run_demo()
