"""
Factories for transaction parts used across the test suite.
"""

import hashlib

from zcash_ipld import JSDescription, TxIn, TxOut, tx_hash_to_cid


def mk_prev_cid(seed: str):
    """Deterministic CID of a made-up previous transaction."""
    return tx_hash_to_cid(hashlib.sha256(seed.encode()).digest())


def mk_coinbase_input(script: bytes = b"\x03\x01\x02\x03", seq_no: int = 0xFFFFFFFF) -> TxIn:
    return TxIn(prev_tx=None, prev_tx_index=0xFFFFFFFF, script=script, seq_no=seq_no)


def mk_spend_input(seed: str, index: int = 0, script: bytes = b"\x51", seq_no: int = 0xFFFFFFFE) -> TxIn:
    return TxIn(prev_tx=mk_prev_cid(seed), prev_tx_index=index, script=script, seq_no=seq_no)


def mk_output(value: int, script: bytes = b"\x76\xa9\x14" + bytes(20) + b"\x88\xac") -> TxOut:
    return TxOut(value=value, script=script)


def mk_join_split(fill: int = 0x01, vpub_old: int = 0, vpub_new: int = 0) -> JSDescription:
    h = bytes([fill]) * 32
    return JSDescription(
        vpub_old=vpub_old,
        vpub_new=vpub_new,
        anchor=h,
        nullifiers=(h, bytes([fill + 1]) * 32),
        commitments=(bytes([fill + 2]) * 32, bytes([fill + 3]) * 32),
        ephemeral_key=bytes([fill + 4]) * 32,
        random_seed=bytes([fill + 5]) * 32,
        macs=(bytes([fill + 6]) * 32, bytes([fill + 7]) * 32),
        proof=bytes([fill + 8]) * 296,
        ciphertexts=(bytes([fill + 9]) * 601, bytes([fill + 10]) * 601),
    )
