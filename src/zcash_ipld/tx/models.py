"""
Zcash transaction models.

TxIn, TxOut, JSDescription and the Transaction aggregate. Models are frozen:
no codec or navigation operation mutates a transaction, and copies share
their input/output/join-split tuples.

JSON aliases follow the field names used by the IPLD zcash format
(``txid``, ``vout``, ``sequence``, ``locktime``, ``joinSplits``...).
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from multiformats import CID

from ..codec.hashes import double_sha256
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter
from ..node import Link, Path
from ..runtime.cid import HASH_SIZE, cid_to_hash, parse_cid, tx_hash_to_cid
from ..runtime.options import (
    GROTH_PROOF_SIZE,
    JS_PUB_KEY_SIZE,
    JS_SIG_SIZE,
    PHGR_PROOF_SIZE,
    DecodeOptions,
)

UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF

ZERO_HASH = bytes(HASH_SIZE)

LEGACY_VERSION = 1

_MODEL_CONFIG = {
    "populate_by_name": True,
    "frozen": True,
    "arbitrary_types_allowed": True,
}


class TxIn(BaseModel):
    """
    Transaction input.

    ``prev_tx`` is a link to the transaction being spent. It is absent only
    for coinbase inputs, whose outpoint hash is written as 32 zero bytes.
    """
    prev_tx: Optional[CID] = Field(default=None, alias="txid")
    prev_tx_index: int = Field(default=0, alias="vout", ge=0, le=UINT32_MAX)
    script: bytes = Field(default=b"")
    seq_no: int = Field(default=UINT32_MAX, alias="sequence", ge=0, le=UINT32_MAX)

    model_config = _MODEL_CONFIG

    @field_validator("prev_tx", mode="before")
    @classmethod
    def parse_prev_tx(cls, v: Any) -> Optional[CID]:
        if v is None:
            return None
        cid = parse_cid(v)
        if cid_to_hash(cid) == ZERO_HASH:
            raise ValueError("all-zero outpoint hash is reserved for coinbase inputs")
        return cid

    @field_serializer("prev_tx")
    def serialize_prev_tx(self, v: Optional[CID]) -> Optional[str]:
        return None if v is None else str(v)

    @field_serializer("script")
    def serialize_script(self, v: bytes) -> str:
        return v.hex()

    @property
    def is_coinbase(self) -> bool:
        return self.prev_tx is None

    def write_to(self, writer: BinaryWriter) -> None:
        """Outpoint (32-byte hash + LE32 index), script, LE32 sequence."""
        if self.prev_tx is not None:
            writer.bytes(cid_to_hash(self.prev_tx))
        else:
            writer.bytes(ZERO_HASH)
        writer.u32le(self.prev_tx_index)
        writer.len_prefixed_bytes(self.script)
        writer.u32le(self.seq_no)

    @classmethod
    def read_from(cls, reader: BinaryReader) -> "TxIn":
        prev_hash = reader.bytes(HASH_SIZE)
        prev_tx = None if prev_hash == ZERO_HASH else tx_hash_to_cid(prev_hash)
        return cls(
            prev_tx=prev_tx,
            prev_tx_index=reader.u32le(),
            script=reader.len_prefixed_bytes(),
            seq_no=reader.u32le(),
        )


class TxOut(BaseModel):
    """Transaction output: a zatoshi value and its locking script."""
    value: int = Field(default=0, ge=0, le=UINT64_MAX)
    script: bytes = Field(default=b"")

    model_config = _MODEL_CONFIG

    @field_serializer("script")
    def serialize_script(self, v: bytes) -> str:
        return v.hex()

    def write_to(self, writer: BinaryWriter) -> None:
        writer.u64le(self.value)
        writer.len_prefixed_bytes(self.script)

    @classmethod
    def read_from(cls, reader: BinaryReader) -> "TxOut":
        return cls(value=reader.u64le(), script=reader.len_prefixed_bytes())


CIPHERTEXT_SIZE = 601

_JS_FIXED_32 = ("anchor", "ephemeral_key", "random_seed")
_JS_PAIRS_32 = ("nullifiers", "commitments", "macs")


class JSDescription(BaseModel):
    """
    Join-split description (Sprout shielded transfer).

    Treated by the aggregate as an opaque unit that writes itself; the field
    layout below is the version 2 ordering.
    """
    vpub_old: int = Field(default=0, alias="vpubOld", ge=0, le=UINT64_MAX)
    vpub_new: int = Field(default=0, alias="vpubNew", ge=0, le=UINT64_MAX)
    anchor: bytes = Field(default=ZERO_HASH)
    nullifiers: Tuple[bytes, bytes] = Field(default=(ZERO_HASH, ZERO_HASH))
    commitments: Tuple[bytes, bytes] = Field(default=(ZERO_HASH, ZERO_HASH))
    ephemeral_key: bytes = Field(default=ZERO_HASH, alias="ephemeralKey")
    random_seed: bytes = Field(default=ZERO_HASH, alias="randomSeed")
    macs: Tuple[bytes, bytes] = Field(default=(ZERO_HASH, ZERO_HASH))
    proof: bytes = Field(default=bytes(PHGR_PROOF_SIZE))
    ciphertexts: Tuple[bytes, bytes] = Field(
        default=(bytes(CIPHERTEXT_SIZE), bytes(CIPHERTEXT_SIZE))
    )

    model_config = _MODEL_CONFIG

    @field_validator(*_JS_FIXED_32)
    @classmethod
    def check_hash_size(cls, v: bytes) -> bytes:
        if len(v) != HASH_SIZE:
            raise ValueError(f"expected {HASH_SIZE} bytes, got {len(v)}")
        return v

    @field_validator(*_JS_PAIRS_32)
    @classmethod
    def check_pair_size(cls, v: Tuple[bytes, bytes]) -> Tuple[bytes, bytes]:
        for item in v:
            if len(item) != HASH_SIZE:
                raise ValueError(f"expected {HASH_SIZE} bytes, got {len(item)}")
        return v

    @field_validator("proof")
    @classmethod
    def check_proof_size(cls, v: bytes) -> bytes:
        if len(v) not in (PHGR_PROOF_SIZE, GROTH_PROOF_SIZE):
            raise ValueError(
                f"proof must be {PHGR_PROOF_SIZE} or {GROTH_PROOF_SIZE} bytes, got {len(v)}"
            )
        return v

    @field_validator("ciphertexts")
    @classmethod
    def check_ciphertext_size(cls, v: Tuple[bytes, bytes]) -> Tuple[bytes, bytes]:
        for item in v:
            if len(item) != CIPHERTEXT_SIZE:
                raise ValueError(f"expected {CIPHERTEXT_SIZE} bytes, got {len(item)}")
        return v

    @field_serializer(*_JS_FIXED_32, "proof")
    def serialize_blob(self, v: bytes) -> str:
        return v.hex()

    @field_serializer(*_JS_PAIRS_32, "ciphertexts")
    def serialize_pair(self, v: Tuple[bytes, bytes]) -> List[str]:
        return [item.hex() for item in v]

    def write_to(self, writer: BinaryWriter) -> None:
        writer.u64le(self.vpub_old)
        writer.u64le(self.vpub_new)
        writer.bytes(self.anchor)
        for nf in self.nullifiers:
            writer.bytes(nf)
        for cm in self.commitments:
            writer.bytes(cm)
        writer.bytes(self.ephemeral_key)
        writer.bytes(self.random_seed)
        for mac in self.macs:
            writer.bytes(mac)
        writer.bytes(self.proof)
        for ct in self.ciphertexts:
            writer.bytes(ct)

    @classmethod
    def read_from(cls, reader: BinaryReader, proof_size: int = PHGR_PROOF_SIZE) -> "JSDescription":
        def pair(size: int) -> Tuple[bytes, bytes]:
            return reader.bytes(size), reader.bytes(size)

        return cls(
            vpub_old=reader.u64le(),
            vpub_new=reader.u64le(),
            anchor=reader.bytes(HASH_SIZE),
            nullifiers=pair(HASH_SIZE),
            commitments=pair(HASH_SIZE),
            ephemeral_key=reader.bytes(HASH_SIZE),
            random_seed=reader.bytes(HASH_SIZE),
            macs=pair(HASH_SIZE),
            proof=reader.bytes(proof_size),
            ciphertexts=pair(CIPHERTEXT_SIZE),
        )

    def size(self) -> int:
        return 16 + HASH_SIZE * 9 + len(self.proof) + CIPHERTEXT_SIZE * 2


class Transaction(BaseModel):
    """
    Zcash transaction.

    The join-split fields are only part of the wire layout when
    ``version != 1``; a version 1 transaction serializes without them even if
    they hold data.
    """
    version: int = Field(default=1, ge=0, le=UINT32_MAX)
    inputs: Tuple[TxIn, ...] = Field(default=())
    outputs: Tuple[TxOut, ...] = Field(default=())
    lock_time: int = Field(default=0, alias="locktime", ge=0, le=UINT32_MAX)
    join_splits: Tuple[JSDescription, ...] = Field(default=(), alias="joinSplits")
    js_pub_key: bytes = Field(default=b"", alias="jsPubKey")
    js_sig: bytes = Field(default=b"", alias="jsSig")

    model_config = _MODEL_CONFIG

    @field_serializer("js_pub_key", "js_sig")
    def serialize_blob(self, v: bytes) -> str:
        return v.hex()

    @property
    def has_join_split_fields(self) -> bool:
        return self.version != LEGACY_VERSION

    @model_validator(mode="after")
    def check_join_split_tail(self) -> "Transaction":
        if not self.has_join_split_fields:
            return self
        if self.join_splits:
            if len(self.js_pub_key) != JS_PUB_KEY_SIZE or len(self.js_sig) != JS_SIG_SIZE:
                raise ValueError(
                    f"join-split key and signature must be {JS_PUB_KEY_SIZE} and "
                    f"{JS_SIG_SIZE} bytes, got {len(self.js_pub_key)} and {len(self.js_sig)}"
                )
        elif self.js_pub_key or self.js_sig:
            raise ValueError("join-split key and signature require at least one join-split")
        proof_sizes = {len(js.proof) for js in self.join_splits}
        if len(proof_sizes) > 1:
            raise ValueError("join-splits must all use the same proof size")
        return self

    # -- encoding ---------------------------------------------------------

    def raw_data(self) -> bytes:
        """Canonical bytes, the preimage of the transaction hash."""
        from ..codec.transaction_codec import TransactionCodec
        return TransactionCodec.encode(self)

    @classmethod
    def from_bytes(cls, raw: bytes, options: Optional[DecodeOptions] = None) -> "Transaction":
        from ..codec.transaction_codec import TransactionCodec
        return TransactionCodec.decode(raw, options)

    @classmethod
    def from_hex(cls, h: str, options: Optional[DecodeOptions] = None) -> "Transaction":
        return cls.from_bytes(bytes.fromhex(h), options)

    def size(self) -> int:
        return len(self.raw_data())

    # -- identity ---------------------------------------------------------

    def cid(self) -> CID:
        return tx_hash_to_cid(double_sha256(self.raw_data()))

    def zec_sha(self) -> bytes:
        """
        Transaction hash in internal byte order.

        Equal to the CID's multihash with its two framing bytes (hash code
        and digest length) removed.
        """
        return bytes(self.cid().digest)[2:]

    def hex_hash(self) -> str:
        """Transaction hash as block explorers display it (byte-reversed)."""
        return self.zec_sha()[::-1].hex()

    # -- navigation -------------------------------------------------------

    def links(self) -> List[Link]:
        out = []
        for i, inp in enumerate(self.inputs):
            if inp.prev_tx is not None:
                out.append(Link(cid=inp.prev_tx, name=f"inputs/{i}/prevTx"))
        return out

    def resolve(self, path: Path):
        from .resolver import resolve
        return resolve(self, path)

    def resolve_link(self, path: Path):
        from .resolver import resolve_link
        return resolve_link(self, path)

    def tree(self, prefix: str, depth: int) -> List[str]:
        from .resolver import tree
        return tree(self, prefix, depth)

    # -- copies / views ---------------------------------------------------

    def copy_shallow(self) -> "Transaction":
        """
        Copy sharing the input, output and join-split tuples with ``self``.

        Sharing is safe only because the models are frozen.
        """
        return self.model_copy()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def __str__(self) -> str:
        return "zcash transaction"


def tx_hash_to_link(tx_hash: Union[bytes, bytearray]) -> Link:
    """Link to a transaction known only by its raw 32-byte hash."""
    return Link(cid=tx_hash_to_cid(bytes(tx_hash)))
