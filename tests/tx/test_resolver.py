"""
Path resolution tests.
"""

import pytest

from zcash_ipld import (
    IndexOutOfRangeError,
    Link,
    NoSuchLinkError,
    ValueKind,
    WrongTypeError,
)
from zcash_ipld.tx import resolve, resolve_link


class TestTopLevel:

    @pytest.mark.parametrize("field,attr,kind", [
        ("version", "version", ValueKind.SCALAR),
        ("lockTime", "lock_time", ValueKind.SCALAR),
        ("joinSplits", "join_splits", ValueKind.SUBNODE),
        ("jsPubKey", "js_pub_key", ValueKind.BYTES),
        ("jsSig", "js_sig", ValueKind.BYTES),
    ])
    def test_fields_consume_one_segment(self, shielded_tx, field, attr, kind):
        value, rest = resolve(shielded_tx, [field, "extra", "segments"])
        assert value.kind is kind
        assert value.value == getattr(shielded_tx, attr)
        assert rest == ["extra", "segments"]

    def test_unknown_field(self, shielded_tx):
        with pytest.raises(NoSuchLinkError):
            resolve(shielded_tx, ["timeLock"])

    def test_empty_path(self, shielded_tx):
        with pytest.raises(NoSuchLinkError):
            resolve(shielded_tx, [])

    def test_string_path(self, spend_tx):
        value, rest = resolve(spend_tx, "outputs/1/value")
        assert value.value == 2500
        assert rest == []


class TestInputs:

    def test_whole_sequence(self, spend_tx):
        value, rest = resolve(spend_tx, ["inputs"])
        assert value.kind is ValueKind.SUBNODE
        assert value.value == spend_tx.inputs
        assert rest == []

    def test_single_input(self, spend_tx):
        value, rest = resolve(spend_tx, ["inputs", "1"])
        assert value.value is spend_tx.inputs[1]
        assert rest == []

    def test_seq_no(self, spend_tx):
        value, rest = resolve(spend_tx, ["inputs", "2", "seqNo"])
        assert value.kind is ValueKind.SCALAR
        assert value.value == 12
        assert rest == []

    def test_script(self, spend_tx):
        value, _ = resolve(spend_tx, ["inputs", "1", "script"])
        assert value.kind is ValueKind.BYTES
        assert value.value == spend_tx.inputs[1].script

    def test_prev_tx_link_returns_remaining_path(self, spend_tx):
        value, rest = resolve(spend_tx, ["inputs", "0", "prevTx", "outputs", "3"])
        assert value.kind is ValueKind.LINK
        assert isinstance(value.value, Link)
        assert value.value.cid == spend_tx.inputs[0].prev_tx
        assert rest == ["outputs", "3"]

    def test_prev_tx_of_coinbase_input(self, spend_tx):
        with pytest.raises(NoSuchLinkError):
            resolve(spend_tx, ["inputs", "1", "prevTx"])

    @pytest.mark.parametrize("index", ["99", "4", "-1", "abc", "1.5", ""])
    def test_bad_index(self, spend_tx, index):
        with pytest.raises(IndexOutOfRangeError):
            resolve(spend_tx, ["inputs", index, "seqNo"])

    def test_unknown_input_field(self, spend_tx):
        with pytest.raises(NoSuchLinkError):
            resolve(spend_tx, ["inputs", "0", "value"])


class TestOutputs:

    def test_value(self, spend_tx):
        value, rest = resolve(spend_tx, ["outputs", "0", "value", "x"])
        assert value.kind is ValueKind.SCALAR
        assert value.value == 1000
        assert rest == ["x"]

    def test_script(self, spend_tx):
        value, _ = resolve(spend_tx, ["outputs", "1", "script"])
        assert value.value == b"\x6a"

    def test_single_output(self, spend_tx):
        value, rest = resolve(spend_tx, ["outputs", "1"])
        assert value.value is spend_tx.outputs[1]
        assert rest == []

    def test_out_of_range(self, spend_tx):
        with pytest.raises(IndexOutOfRangeError):
            resolve(spend_tx, ["outputs", "2"])

    def test_unknown_output_field(self, spend_tx):
        with pytest.raises(NoSuchLinkError):
            resolve(spend_tx, ["outputs", "0", "seqNo"])


class TestResolveLink:

    def test_returns_link(self, spend_tx):
        link, rest = resolve_link(spend_tx, ["inputs", "3", "prevTx"])
        assert link.cid == spend_tx.inputs[3].prev_tx
        assert rest == []

    def test_method_on_model(self, spend_tx):
        link, _ = spend_tx.resolve_link("inputs/0/prevTx")
        assert link.cid == spend_tx.inputs[0].prev_tx

    @pytest.mark.parametrize("path", [["version"], ["inputs", "0"], ["outputs", "0", "script"]])
    def test_non_link_is_wrong_type(self, spend_tx, path):
        with pytest.raises(WrongTypeError):
            resolve_link(spend_tx, path)

    def test_resolution_errors_propagate(self, spend_tx):
        with pytest.raises(IndexOutOfRangeError):
            resolve_link(spend_tx, ["inputs", "9", "prevTx"])
