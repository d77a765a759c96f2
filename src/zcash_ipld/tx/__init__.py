"""
Zcash transaction models, path resolution and the node adapter.
"""

from .models import JSDescription, Transaction, TxIn, TxOut, tx_hash_to_link
from .resolver import Resolved, ValueKind, resolve, resolve_link, tree
from .node import TxNode, decode_tx_node

__all__ = [
    "Transaction",
    "TxIn",
    "TxOut",
    "JSDescription",
    "tx_hash_to_link",
    "Resolved",
    "ValueKind",
    "resolve",
    "resolve_link",
    "tree",
    "TxNode",
    "decode_tx_node",
]
