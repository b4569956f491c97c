class MalformedStreamError(ValueError):
    """The payload is not a valid encoding (bad marker, bits >= width, bad or missing digits)."""


class RoundTripError(RuntimeError):
    """decode(encode(x)) did not give x back."""
