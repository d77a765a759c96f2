"""
Shared fixtures: a legacy coinbase transaction, a multi-input spend and a
version 2 transaction carrying a join-split.
"""

import pytest

from zcash_ipld import Transaction, TxIn, TxOut

from helpers import mk_coinbase_input, mk_join_split, mk_output, mk_spend_input


@pytest.fixture
def coinbase_tx():
    """Version 1 coinbase: one input without previous tx, one 50 ZEC output."""
    return Transaction(
        version=1,
        inputs=(TxIn(prev_tx=None, prev_tx_index=0, script=b"", seq_no=0xFFFFFFFF),),
        outputs=(TxOut(value=5000000000, script=b""),),
        lock_time=0,
    )


@pytest.fixture
def spend_tx():
    """Version 1 transaction with a coinbase input and three spending inputs."""
    return Transaction(
        version=1,
        inputs=(
            mk_spend_input("a", index=0, seq_no=10),
            mk_coinbase_input(seq_no=11),
            mk_spend_input("b", index=3, seq_no=12),
            mk_spend_input("a", index=1, seq_no=13),
        ),
        outputs=(mk_output(1000), mk_output(2500, script=b"\x6a")),
        lock_time=500000,
    )


@pytest.fixture
def shielded_tx():
    """Version 2 transaction with one join-split, its public key and signature."""
    return Transaction(
        version=2,
        inputs=(mk_spend_input("c", index=2),),
        outputs=(mk_output(12345),),
        lock_time=7,
        join_splits=(mk_join_split(0x10, vpub_old=5, vpub_new=0),),
        js_pub_key=b"\x11" * 32,
        js_sig=b"\x22" * 64,
    )
