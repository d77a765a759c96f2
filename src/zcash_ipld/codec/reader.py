"""
Binary Reader

Decodes the little-endian primitives and compact-size varints of the Zcash
transaction wire layout. Reading past the end of the buffer raises
``MalformedInputError``.
"""

import builtins
import struct

from ..runtime.errors import MalformedInputError
from .varint import decode_varint


class BinaryReader:
    """
    Cursor over an immutable byte buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @property
    def eof(self) -> bool:
        """True once every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        return self._off

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._off

    def _need(self, n: int, what: str) -> None:
        if self._off + n > len(self._buf):
            raise MalformedInputError(
                f"buffer too short reading {what}",
                details={"offset": self._off, "needed": n, "length": len(self._buf)},
            )

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        self._need(1, "u8")
        val = self._buf[self._off]
        self._off += 1
        return val

    def u32le(self) -> int:
        """
        Read unsigned 32-bit integer in little-endian format.

        Returns:
            Unsigned 32-bit integer value
        """
        self._need(4, "u32le")
        val = struct.unpack("<I", self._buf[self._off : self._off + 4])[0]
        self._off += 4
        return val

    def u64le(self) -> int:
        """
        Read unsigned 64-bit integer in little-endian format.

        Returns:
            Unsigned 64-bit integer value
        """
        self._need(8, "u64le")
        val = struct.unpack("<Q", self._buf[self._off : self._off + 8])[0]
        self._off += 8
        return val

    def varint(self) -> int:
        """
        Read unsigned compact-size varint.

        Returns:
            Decoded unsigned integer value
        """
        val, consumed = decode_varint(self._buf, self._off)
        self._off += consumed
        return val

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        self._need(n, f"{n} bytes")
        out = builtins.bytes(self._buf[self._off : self._off + n])
        self._off += n
        return out

    def len_prefixed_bytes(self) -> builtins.bytes:
        """
        Read bytes with a compact-size length prefix.

        Returns:
            Bytes with length read from varint prefix
        """
        n = self.varint()
        return self.bytes(n)
