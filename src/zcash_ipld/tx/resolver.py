"""
Path resolution and tree enumeration for Zcash transactions.

Paths are slash-separated segments over the transaction's logical schema::

    version  lockTime  joinSplits  jsPubKey  jsSig
    inputs[/<i>[/prevTx | /seqNo | /script]]
    outputs[/<i>[/value | /script]]

``resolve`` consumes as many segments as the transaction can answer and hands
back the rest, so a graph walker can continue into a linked transaction.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Sequence, Tuple
import logging

from ..node import Link, Path
from ..runtime.errors import IndexOutOfRangeError, NoSuchLinkError, WrongTypeError
from .models import Transaction, TxIn, TxOut

logger = logging.getLogger(__name__)

TOP_LEVEL_FIELDS = ("version", "timeLock", "inputs", "outputs", "joinSplits", "jsPubKey", "jsSig")
INPUT_FIELDS = ("prevTx", "seqNo", "script")
OUTPUT_FIELDS = ("script", "value")


class ValueKind(str, Enum):
    """Tag of a resolved value."""
    SCALAR = "scalar"
    BYTES = "bytes"
    SUBNODE = "subnode"
    LINK = "link"


@dataclass(frozen=True)
class Resolved:
    """
    A value reached by ``resolve``.

    ``kind`` is one of:
      SCALAR   int (version, lock time, sequence number, output value)
      BYTES    bytes (scripts, jsPubKey, jsSig)
      SUBNODE  TxIn, TxOut, or a tuple of TxIn / TxOut / JSDescription
      LINK     Link to a previous transaction
    """
    kind: ValueKind
    value: Any

    @property
    def is_link(self) -> bool:
        return self.kind is ValueKind.LINK

    @classmethod
    def scalar(cls, v: int) -> "Resolved":
        return cls(ValueKind.SCALAR, v)

    @classmethod
    def field_bytes(cls, v: bytes) -> "Resolved":
        return cls(ValueKind.BYTES, v)

    @classmethod
    def subnode(cls, v: Any) -> "Resolved":
        return cls(ValueKind.SUBNODE, v)

    @classmethod
    def link(cls, v: Link) -> "Resolved":
        return cls(ValueKind.LINK, v)


def split_path(path: Path) -> List[str]:
    """Normalize ``"a/b/c"`` or ``["a", "b", "c"]`` to a segment list."""
    if isinstance(path, str):
        return [seg for seg in path.split("/") if seg]
    return list(path)


def _parse_index(segment: str, count: int, field: str) -> int:
    digits = segment[1:] if segment[:1] in ("+", "-") else segment
    if not digits.isascii() or not digits.isdigit():
        raise IndexOutOfRangeError(
            f"{field} index is not an integer: {segment!r}",
            details={"field": field, "segment": segment},
        )
    index = int(segment)
    if index < 0 or index >= count:
        raise IndexOutOfRangeError(
            "index out of range",
            details={"field": field, "index": index, "count": count},
        )
    return index


def _no_such_link(segment: str, where: str) -> NoSuchLinkError:
    logger.debug("Unknown path segment %r at %s", segment, where)
    return NoSuchLinkError("no such link", details={"segment": segment, "at": where})


def _resolve_input(inp: TxIn, path: Sequence[str]) -> Tuple[Resolved, List[str]]:
    if len(path) == 2:
        return Resolved.subnode(inp), []

    field = path[2]
    if field == "prevTx":
        if inp.prev_tx is None:
            raise NoSuchLinkError(
                "no such link", details={"segment": field, "at": f"inputs/{path[1]}"}
            )
        return Resolved.link(Link(cid=inp.prev_tx)), list(path[3:])
    if field == "seqNo":
        return Resolved.scalar(inp.seq_no), list(path[3:])
    if field == "script":
        return Resolved.field_bytes(inp.script), list(path[3:])
    raise _no_such_link(field, f"inputs/{path[1]}")


def _resolve_output(outp: TxOut, path: Sequence[str]) -> Tuple[Resolved, List[str]]:
    if len(path) == 2:
        return Resolved.subnode(outp), list(path[2:])

    field = path[2]
    if field == "value":
        return Resolved.scalar(outp.value), list(path[3:])
    if field == "script":
        return Resolved.field_bytes(outp.script), list(path[3:])
    raise _no_such_link(field, f"outputs/{path[1]}")


def resolve(tx: Transaction, path: Path) -> Tuple[Resolved, List[str]]:
    """
    Resolve a path against a transaction.

    Args:
        tx: Transaction to navigate
        path: Segments, or a slash-separated string

    Returns:
        Tuple of (resolved value, unconsumed segments)

    Raises:
        IndexOutOfRangeError: Index is not an integer or is out of bounds
        NoSuchLinkError: Unknown segment, or ``prevTx`` of a coinbase input
    """
    path = split_path(path)
    if not path:
        raise NoSuchLinkError("empty path")

    head = path[0]
    if head == "version":
        return Resolved.scalar(tx.version), path[1:]
    if head == "lockTime":
        return Resolved.scalar(tx.lock_time), path[1:]
    if head == "joinSplits":
        return Resolved.subnode(tx.join_splits), path[1:]
    if head == "jsPubKey":
        return Resolved.field_bytes(tx.js_pub_key), path[1:]
    if head == "jsSig":
        return Resolved.field_bytes(tx.js_sig), path[1:]

    if head == "inputs":
        if len(path) == 1:
            return Resolved.subnode(tx.inputs), []
        index = _parse_index(path[1], len(tx.inputs), "inputs")
        return _resolve_input(tx.inputs[index], path)

    if head == "outputs":
        if len(path) == 1:
            return Resolved.subnode(tx.outputs), []
        index = _parse_index(path[1], len(tx.outputs), "outputs")
        return _resolve_output(tx.outputs[index], path)

    raise _no_such_link(head, "/")


def resolve_link(tx: Transaction, path: Path) -> Tuple[Link, List[str]]:
    """
    Resolve a path that must end on a link.

    Raises:
        WrongTypeError: If the resolved value is not a link
    """
    value, rest = resolve(tx, path)
    if not value.is_link:
        raise WrongTypeError(
            "value was not a link", details={"path": split_path(path), "kind": value.kind.value}
        )
    return value.value, rest


def _tree_inputs(tx: Transaction, out: List[str], depth: int) -> List[str]:
    if depth < 2:
        return out
    for i in range(len(tx.inputs)):
        inp = f"inputs/{i}"
        out.append(inp)
        if depth > 2:
            out.extend(f"{inp}/{field}" for field in INPUT_FIELDS)
    return out


def _tree_outputs(tx: Transaction, out: List[str], depth: int) -> List[str]:
    if depth < 2:
        return out
    for i in range(len(tx.outputs)):
        o = f"outputs/{i}"
        out.append(o)
        if depth > 2:
            out.extend(f"{o}/{field}" for field in OUTPUT_FIELDS)
    return out


def tree(tx: Transaction, prefix: str, depth: int) -> List[str]:
    """
    Enumerate addressable paths under ``prefix`` up to ``depth`` levels.

    At the root, depth 1 gives the top-level names, depth 2 adds
    ``inputs/<i>`` and ``outputs/<i>``, depth 3 adds their fields. The
    ``inputs`` and ``outputs`` prefixes enumerate their sub-tree with
    ``depth + 1``; other prefixes yield nothing.
    """
    if depth <= 0:
        return []

    if prefix == "inputs":
        return _tree_inputs(tx, [], depth + 1)
    if prefix == "outputs":
        return _tree_outputs(tx, [], depth + 1)
    if prefix == "":
        out = list(TOP_LEVEL_FIELDS)
        out = _tree_inputs(tx, out, depth)
        return _tree_outputs(tx, out, depth)
    return []


__all__ = [
    "ValueKind",
    "Resolved",
    "split_path",
    "resolve",
    "resolve_link",
    "tree",
    "TOP_LEVEL_FIELDS",
]
