"""
CID helpers for Zcash transactions.

A transaction is named by a CIDv1 whose codec is ``zcash-tx`` and whose
multihash is ``dbl-sha2-256`` over the serialized bytes. The multihash digest
is the transaction hash in internal byte order; block explorers display it
byte-reversed.
"""

from __future__ import annotations
from typing import Union

from multiformats import CID, multicodec, varint

from .errors import MalformedInputError

ZCASH_TX_CODEC = "zcash-tx"
DBL_SHA2_256 = "dbl-sha2-256"
HASH_SIZE = 32

CID_BASE = "base32"


def _multihash(raw_digest: bytes) -> bytes:
    code = multicodec.get(DBL_SHA2_256).code
    return varint.encode(code) + varint.encode(len(raw_digest)) + raw_digest


def tx_hash_to_cid(tx_hash: bytes) -> CID:
    """
    Wrap a raw 32-byte transaction hash in a ``zcash-tx`` CID.

    Args:
        tx_hash: Double SHA-256 digest in internal byte order

    Returns:
        CIDv1 naming the transaction

    Raises:
        MalformedInputError: If tx_hash is not 32 bytes
    """
    if len(tx_hash) != HASH_SIZE:
        raise MalformedInputError(
            f"Invalid length, value is not a hash: {len(tx_hash)}",
            details={"length": len(tx_hash)},
        )
    return CID(CID_BASE, 1, ZCASH_TX_CODEC, _multihash(bytes(tx_hash)))


def hex_hash_to_cid(hex_hash: str) -> CID:
    """
    Build a CID from a transaction hash as block explorers show it.

    Args:
        hex_hash: 64 hex characters, display (byte-reversed) order
    """
    try:
        raw = bytes.fromhex(hex_hash)
    except ValueError as e:
        raise MalformedInputError(f"Invalid hex hash: {hex_hash!r}", cause=e)
    return tx_hash_to_cid(raw[::-1])


def cid_to_hash(cid: CID) -> bytes:
    """
    Extract the raw digest embedded in a CID.

    This is the digest only, not the CID's or the multihash's encoded form.

    Raises:
        MalformedInputError: If the CID does not carry a 32-byte digest
    """
    raw = bytes(cid.raw_digest)
    if len(raw) != HASH_SIZE:
        raise MalformedInputError(
            f"CID digest is {len(raw)} bytes, expected {HASH_SIZE}",
            details={"cid": str(cid)},
        )
    return raw


def parse_cid(value: Union[str, bytes, CID]) -> CID:
    """Accept a CID, its string form or its binary form."""
    if isinstance(value, CID):
        return value
    try:
        return CID.decode(value)
    except (ValueError, KeyError) as e:
        raise MalformedInputError(f"Invalid CID: {value!r}", cause=e)
