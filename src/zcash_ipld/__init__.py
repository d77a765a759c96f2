"""
zcash-ipld

Zcash transactions as IPLD nodes: the canonical wire codec, CIDs derived from
the double SHA-256 transaction hash, ``inputs/<i>/prevTx`` links, and
path-based navigation over the transaction's fields.
"""

from .runtime.errors import *
from .runtime.cid import ZCASH_TX_CODEC, cid_to_hash, hex_hash_to_cid, tx_hash_to_cid
from .runtime.options import DecodeOptions
from .node import Link, Node, NodeStat, decode_block, decode_node, register_decoder
from .codec import BinaryReader, BinaryWriter, TransactionCodec, decode_varint, encode_varint
from .tx import (
    JSDescription, Transaction, TxIn, TxOut, TxNode,
    Resolved, ValueKind, tx_hash_to_link,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "ErrorCode",
    "ZcashIpldError",
    "EncodingError",
    "MalformedInputError",
    "HashMismatchError",
    "UnsupportedCodecError",
    "PathError",
    "IndexOutOfRangeError",
    "NoSuchLinkError",
    "WrongTypeError",
    "ErrorHandler",

    # CIDs
    "ZCASH_TX_CODEC",
    "cid_to_hash",
    "hex_hash_to_cid",
    "tx_hash_to_cid",
    "tx_hash_to_link",

    # Codec
    "BinaryReader",
    "BinaryWriter",
    "TransactionCodec",
    "DecodeOptions",
    "decode_varint",
    "encode_varint",

    # Models
    "Transaction",
    "TxIn",
    "TxOut",
    "JSDescription",

    # Graph
    "Link",
    "Node",
    "NodeStat",
    "TxNode",
    "Resolved",
    "ValueKind",
    "decode_block",
    "decode_node",
    "register_decoder",
]
