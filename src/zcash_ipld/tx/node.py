"""
Node adapter for Zcash transactions.

Wraps a Transaction so graph code can treat it like any other
content-addressed node, and registers the ``zcash-tx`` decoder.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from multiformats import CID

from ..node import Link, Node, NodeStat, Path, register_decoder
from ..runtime.cid import ZCASH_TX_CODEC
from ..runtime.options import DecodeOptions
from .models import Transaction
from .resolver import Resolved, resolve, resolve_link, tree


class TxNode(Node):
    """
    ``Node`` view of a Transaction.

    Raw bytes and the CID are computed once per node; the transaction is
    immutable so they never go stale.
    """

    def __init__(self, tx: Transaction):
        self.tx = tx
        self._raw: Optional[bytes] = None
        self._cid: Optional[CID] = None

    @classmethod
    def from_bytes(cls, raw: bytes, options: Optional[DecodeOptions] = None) -> "TxNode":
        node = cls(Transaction.from_bytes(raw, options))
        node._raw = bytes(raw)
        return node

    def raw_data(self) -> bytes:
        if self._raw is None:
            self._raw = self.tx.raw_data()
        return self._raw

    def cid(self) -> CID:
        if self._cid is None:
            self._cid = self.tx.cid()
        return self._cid

    def links(self) -> List[Link]:
        return self.tx.links()

    def resolve(self, path: Path) -> Tuple[Resolved, List[str]]:
        return resolve(self.tx, path)

    def resolve_link(self, path: Path) -> Tuple[Link, List[str]]:
        return resolve_link(self.tx, path)

    def tree(self, path: str, depth: int) -> List[str]:
        return tree(self.tx, path, depth)

    def size(self) -> int:
        return len(self.raw_data())

    def stat(self) -> NodeStat:
        return NodeStat()

    def copy(self) -> "TxNode":
        """Shallow copy; shares the underlying (frozen) transaction parts."""
        return TxNode(self.tx.copy_shallow())

    def loggable(self) -> Dict[str, Any]:
        return {"type": "zcashTx"}

    def __str__(self) -> str:
        return "zcash transaction"

    def __repr__(self) -> str:
        return f"TxNode({self.cid()})"


def decode_tx_node(raw: bytes) -> TxNode:
    return TxNode.from_bytes(raw)


register_decoder(ZCASH_TX_CODEC, decode_tx_node)
