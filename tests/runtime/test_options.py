"""
DecodeOptions validation tests.
"""

import pytest
from pydantic import ValidationError

from zcash_ipld import DecodeOptions
from zcash_ipld.runtime.options import GROTH_PROOF_SIZE, PHGR_PROOF_SIZE


def test_defaults():
    opts = DecodeOptions()
    assert opts.joinsplit_proof_size == PHGR_PROOF_SIZE
    assert opts.allow_trailing_bytes is False
    assert opts.max_items == 100_000


def test_aliases_and_to_dict():
    opts = DecodeOptions(joinSplitProofSize=GROTH_PROOF_SIZE, allowTrailingBytes=True)
    assert opts.joinsplit_proof_size == GROTH_PROOF_SIZE
    assert opts.to_dict() == {
        "joinSplitProofSize": GROTH_PROOF_SIZE,
        "allowTrailingBytes": True,
        "maxItems": 100_000,
    }


@pytest.mark.parametrize("kwargs", [
    {"joinsplit_proof_size": 100},
    {"max_items": 0},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        DecodeOptions(**kwargs)


def test_frozen():
    opts = DecodeOptions()
    with pytest.raises(ValidationError):
        opts.max_items = 5
