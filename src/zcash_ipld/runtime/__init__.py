"""Runtime helpers: errors, CID envelope and options"""

from .errors import ZcashIpldError
from .cid import cid_to_hash, hex_hash_to_cid, tx_hash_to_cid
from .options import DecodeOptions

__all__ = [
    "ZcashIpldError",
    "cid_to_hash",
    "hex_hash_to_cid",
    "tx_hash_to_cid",
    "DecodeOptions",
]
