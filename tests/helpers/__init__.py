from .factories import mk_coinbase_input, mk_prev_cid, mk_spend_input, mk_output, mk_join_split
from .parity import assert_hex_equal

__all__ = [
    "mk_coinbase_input",
    "mk_prev_cid",
    "mk_spend_input",
    "mk_output",
    "mk_join_split",
    "assert_hex_equal",
]
