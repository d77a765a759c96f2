"""
Compact-size integers.

The variable-length unsigned integer format used throughout the Zcash (and
Bitcoin) wire layout: values below 0xfd take a single byte, larger values are
written as a marker byte followed by 2, 4 or 8 little-endian bytes.
"""

import struct
from typing import Tuple

from ..runtime.errors import MalformedInputError

MAX_UINT64 = 0xFFFFFFFFFFFFFFFF

# (marker, payload size, struct format, largest value the form holds)
_FORMS = (
    (0xFD, 2, "<H", 0xFFFF),
    (0xFE, 4, "<I", 0xFFFFFFFF),
    (0xFF, 8, "<Q", MAX_UINT64),
)


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a compact-size varint.

    Args:
        value: Integer in [0, 2**64)

    Returns:
        1, 3, 5 or 9 encoded bytes

    Raises:
        MalformedInputError: If value is negative or wider than 64 bits
    """
    if value < 0 or value > MAX_UINT64:
        raise MalformedInputError(
            f"varint value out of range: {value}", details={"value": value}
        )
    if value < 0xFD:
        return bytes([value])
    marker, _, fmt, _ = next(form for form in _FORMS if value <= form[3])
    return bytes([marker]) + struct.pack(fmt, value)


def decode_varint(buf: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a compact-size varint starting at ``offset``.

    Args:
        buf: Buffer holding the encoded integer
        offset: Position of the first (marker) byte

    Returns:
        Tuple of (value, number of bytes consumed)

    Raises:
        MalformedInputError: If the buffer ends before the encoding does
    """
    if offset >= len(buf):
        raise MalformedInputError(
            "varint truncated: no marker byte",
            details={"offset": offset, "length": len(buf)},
        )
    first = buf[offset]
    if first < 0xFD:
        return first, 1

    _, size, fmt, _ = _FORMS[first - 0xFD]
    end = offset + 1 + size
    if end > len(buf):
        raise MalformedInputError(
            f"varint truncated: marker 0x{first:02x} needs {size} more bytes",
            details={"offset": offset, "length": len(buf)},
        )
    return struct.unpack(fmt, buf[offset + 1:end])[0], size + 1


def varint_size(value: int) -> int:
    """Number of bytes ``encode_varint(value)`` produces."""
    if value < 0xFD:
        return 1
    if value <= 0xFFFF:
        return 3
    if value <= 0xFFFFFFFF:
        return 5
    return 9
