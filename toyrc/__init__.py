"""Toy decimal range coder from the XZ/LZMA worked examples."""

__all__ = [
    "ADAPTIVE",
    "CoderOptions",
    "Prob",
    "RangeEncoder",
    "RangeDecoder",
    "encode",
    "decode",
    "pack",
    "unpack",
    "MalformedStreamError",
    "RoundTripError",
]

from .arith import CoderOptions, Prob, RangeDecoder, RangeEncoder
from .codec import pack, unpack
from .decoder import decode
from .encoder import encode
from .errors import MalformedStreamError, RoundTripError
from .settings import ADAPTIVE
