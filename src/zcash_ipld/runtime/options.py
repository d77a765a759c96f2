"""
Decoder options.

Typed knobs for turning raw transaction bytes back into models. Encoding has
no options: the wire layout is fixed.
"""

from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator

# Zero-knowledge proof sizes inside a JSDescription
PHGR_PROOF_SIZE = 296
GROTH_PROOF_SIZE = 192

JS_PUB_KEY_SIZE = 32
JS_SIG_SIZE = 64


class DecodeOptions(BaseModel):
    """
    Options for ``TransactionCodec.decode``.

    ``joinsplit_proof_size`` selects the proof system of the join-split
    records (PHGR13 for version 2 transactions, Groth16 for Sapling-era ones).
    """
    joinsplit_proof_size: int = Field(
        default=PHGR_PROOF_SIZE,
        alias="joinSplitProofSize",
        description="Bytes of zk proof in each join-split record",
    )
    allow_trailing_bytes: bool = Field(
        default=False,
        alias="allowTrailingBytes",
        description="Accept bytes after the end of the transaction",
    )
    max_items: int = Field(
        default=100_000,
        alias="maxItems",
        ge=1,
        description="Upper bound on varint-declared input/output/join-split counts",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("joinsplit_proof_size")
    @classmethod
    def known_proof_size(cls, v: int) -> int:
        if v not in (PHGR_PROOF_SIZE, GROTH_PROOF_SIZE):
            raise ValueError(
                f"joinsplit proof size must be {PHGR_PROOF_SIZE} or {GROTH_PROOF_SIZE}, got {v}"
            )
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump(by_alias=True)


DEFAULT_DECODE_OPTIONS = DecodeOptions()
