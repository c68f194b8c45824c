"""Variable-width unsigned integer encoding, seven bits per byte."""

_CONTINUE = 0x80
_PAYLOAD = 0x7F


def encode(value: int) -> bytes:
    """Encode a non-negative integer, least significant group first."""
    if value < 0:
        raise ValueError("cannot encode a negative integer")
    out = bytearray()
    while value > _PAYLOAD:
        out.append((value & _PAYLOAD) | _CONTINUE)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode(buf) -> int:
    """Decode the integer encoded at the start of ``buf``."""
    result = 0
    shift = 0
    for byte in buf:
        result |= (byte & _PAYLOAD) << shift
        if not byte & _CONTINUE:
            return result
        shift += 7
    raise ValueError("truncated variable-width integer")


def next_offset(buf, offset: int) -> int:
    """Return the offset just past the integer that starts at ``offset``."""
    for index in range(offset, len(buf)):
        if not buf[index] & _CONTINUE:
            return index + 1
    raise ValueError("truncated variable-width integer")