import dataclasses
from typing import Dict, Optional, Union

from .arith import CoderOptions
from .decoder import decode
from .encoder import encode
from .settings import ADAPTIVE
from .utils import check_prob, symbols_to_text, text_to_symbols

FORMAT = "TOYRC-DEC-v1"


def pack(
    text: str, p: int = ADAPTIVE, options: Optional[CoderOptions] = None
) -> Dict[str, Union[str, int, bool]]:
    """Encode a 'b'/'g' text into a JSON-able package."""
    symbols = text_to_symbols(text)
    data, _ = encode(p, symbols, options)
    p = check_prob(p)
    return {
        "format": FORMAT,
        "n": len(symbols),
        "p": p,
        "adaptive": p == ADAPTIVE or bool(options and options.adaptive),
        "data": data.decode("ascii"),
    }


def unpack(obj: Dict[str, Union[str, int, bool]], options: Optional[CoderOptions] = None) -> str:
    if not isinstance(obj, dict):
        raise ValueError("package must be a JSON object")
    if obj.get("format") != FORMAT:
        raise ValueError(f"unsupported package format: {obj.get('format')!r}")
    n = int(obj["n"])
    p = check_prob(obj.get("p", ADAPTIVE))
    options = dataclasses.replace(options or CoderOptions(), adaptive=bool(obj.get("adaptive", False)))
    symbols, _ = decode(p, str(obj["data"]), n, options)
    return symbols_to_text(symbols)
