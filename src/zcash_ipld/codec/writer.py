"""
Binary Writer

Accumulates the little-endian primitives and compact-size varints that make
up the Zcash transaction wire layout.
"""

import struct
from typing import List

from .varint import encode_varint


class BinaryWriter:
    """
    Append-only byte sink.

    Each writer is owned by the call that created it; ``to_bytes`` returns an
    immutable snapshot of everything written so far.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def __len__(self) -> int:
        return len(self._bb)

    def u8(self, v: int) -> None:
        """Write unsigned 8-bit integer."""
        self._bb.append(v & 0xFF)

    def u32le(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in little-endian format.

        Args:
            v: Integer value to write as 32-bit little-endian
        """
        self._bb.extend(struct.pack('<I', v & 0xFFFFFFFF))

    def u64le(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        self._bb.extend(struct.pack('<Q', v & 0xFFFFFFFFFFFFFFFF))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def varint(self, v: int) -> None:
        """
        Write unsigned compact-size varint.

        Args:
            v: Unsigned integer value to encode
        """
        self._bb.extend(encode_varint(v))

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes with a compact-size length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.varint(len(v))
        self.bytes(v)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
