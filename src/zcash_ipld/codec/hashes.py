"""
Hash Functions

SHA-256 helpers. Zcash, like Bitcoin, names transactions by two rounds of
SHA-256 over their serialized bytes.
"""

import hashlib


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def double_sha256(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256(SHA-256(input)).

    Args:
        input_bytes: Input bytes to hash

    Returns:
        32-byte digest in internal (little-endian display) order
    """
    return sha256_bytes(sha256_bytes(input_bytes))
