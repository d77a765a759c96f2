"""
Zcash Binary Codec Module

Canonical binary encoding/decoding of Zcash transactions.

Key components:
- varint.py: Compact-size integer encoding
- writer.py: Binary writer with little-endian primitives and varints
- reader.py: Binary reader; truncation raises MalformedInputError
- transaction_codec.py: Transaction wire layout (version 1 and 2)
- hashes.py: SHA-256 and double SHA-256
"""

from .varint import decode_varint, encode_varint, varint_size
from .hashes import double_sha256, sha256_bytes
from .reader import BinaryReader
from .writer import BinaryWriter
from .transaction_codec import TransactionCodec

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "TransactionCodec",
    "decode_varint",
    "encode_varint",
    "varint_size",
    "double_sha256",
    "sha256_bytes",
]
