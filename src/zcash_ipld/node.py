"""
Generic Merkle-DAG node contract.

Defines the capability set every content-addressed record exposes (identify,
serialize, links, resolve, tree) and a registry that picks a node decoder by
multicodec tag rather than by subtyping.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple, Union
import logging

from multiformats import CID, multicodec

from .runtime.errors import HashMismatchError, UnsupportedCodecError

logger = logging.getLogger(__name__)

Path = Union[str, Sequence[str]]


@dataclass(frozen=True)
class Link:
    """Named edge to another node, identified by CID only."""
    cid: CID
    name: str = ""
    size: int = 0

    def __str__(self) -> str:
        return f"{self.name} -> {self.cid}" if self.name else str(self.cid)


@dataclass(frozen=True)
class NodeStat:
    """Size statistics for a node. Transactions report none."""
    num_links: int = 0
    block_size: int = 0
    links_size: int = 0
    data_size: int = 0
    cumulative_size: int = 0


class Node(ABC):
    """
    Content-addressed, traversable record.
    """

    @abstractmethod
    def cid(self) -> CID:
        """Content identifier of ``raw_data()``."""

    @abstractmethod
    def raw_data(self) -> bytes:
        """Canonical serialized bytes."""

    @abstractmethod
    def links(self) -> List[Link]:
        """Outgoing links in stable order."""

    @abstractmethod
    def resolve(self, path: Path) -> Tuple[Any, List[str]]:
        """Resolve as much of ``path`` as this node can; return the rest."""

    @abstractmethod
    def resolve_link(self, path: Path) -> Tuple[Link, List[str]]:
        """Like ``resolve`` but the value must be a ``Link``."""

    @abstractmethod
    def tree(self, path: str, depth: int) -> List[str]:
        """Enumerate addressable paths under ``path``."""

    @abstractmethod
    def copy(self) -> "Node":
        """Copy of this node."""

    def size(self) -> int:
        return len(self.raw_data())

    def stat(self) -> NodeStat:
        return NodeStat()

    def loggable(self) -> Dict[str, Any]:
        return {}


NodeDecoder = Callable[[bytes], Node]

_DECODERS: Dict[str, NodeDecoder] = {}


def _codec_name(codec: Union[str, int, Any]) -> str:
    try:
        if isinstance(codec, str):
            return multicodec.get(codec).name
        if isinstance(codec, int):
            return multicodec.get(code=codec).name
    except KeyError as e:
        raise UnsupportedCodecError(f"unknown multicodec {codec!r}", cause=e)
    return codec.name


def register_decoder(codec: Union[str, int], decoder: NodeDecoder) -> None:
    """
    Register the node decoder for a multicodec tag.

    Args:
        codec: Multicodec name or code, e.g. ``"zcash-tx"``
        decoder: Callable turning raw bytes into a ``Node``
    """
    name = _codec_name(codec)
    if name in _DECODERS:
        logger.debug("Replacing decoder for codec %s", name)
    _DECODERS[name] = decoder
    logger.debug("Registered decoder for codec %s", name)


def registered_codecs() -> List[str]:
    return sorted(_DECODERS)


def decode_node(raw: bytes, codec: Union[str, int]) -> Node:
    """
    Decode raw bytes with the decoder registered for ``codec``.

    Raises:
        UnsupportedCodecError: If no decoder is registered
    """
    name = _codec_name(codec)
    decoder = _DECODERS.get(name)
    if decoder is None:
        raise UnsupportedCodecError(
            f"no decoder registered for codec {name}",
            details={"codec": name, "registered": registered_codecs()},
        )
    return decoder(raw)


def decode_block(cid: CID, raw: bytes) -> Node:
    """
    Decode a stored block and check it against the CID it was fetched by.

    Raises:
        UnsupportedCodecError: If the CID's codec has no decoder
        HashMismatchError: If the decoded node does not hash to ``cid``
    """
    node = decode_node(raw, cid.codec.name)
    if node.cid() != cid:
        raise HashMismatchError(
            "decoded node does not match its CID",
            details={"expected": str(cid), "actual": str(node.cid())},
        )
    return node
