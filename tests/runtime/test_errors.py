"""
Error model tests.
"""

from zcash_ipld import (
    ErrorCode,
    ErrorHandler,
    IndexOutOfRangeError,
    MalformedInputError,
    NoSuchLinkError,
    PathError,
    WrongTypeError,
    ZcashIpldError,
)
from zcash_ipld.runtime.errors import EncodingError, HashMismatchError, UnsupportedCodecError


def test_hierarchy_and_codes():
    cases = [
        (MalformedInputError(), EncodingError, ErrorCode.MALFORMED_INPUT),
        (HashMismatchError(), MalformedInputError, ErrorCode.HASH_MISMATCH),
        (UnsupportedCodecError(), EncodingError, ErrorCode.UNSUPPORTED_CODEC),
        (IndexOutOfRangeError(), PathError, ErrorCode.INDEX_OUT_OF_RANGE),
        (NoSuchLinkError(), PathError, ErrorCode.NO_SUCH_LINK),
        (WrongTypeError(), PathError, ErrorCode.WRONG_TYPE),
    ]
    for err, parent, code in cases:
        assert isinstance(err, parent)
        assert isinstance(err, ZcashIpldError)
        assert err.code == code


def test_str_and_to_dict():
    cause = ValueError("bad digit")
    err = IndexOutOfRangeError("index out of range", details={"index": 99}, cause=cause)
    text = str(err)
    assert text.startswith("[INDEX_OUT_OF_RANGE] index out of range")
    assert "99" in text
    assert "bad digit" in text

    d = err.to_dict()
    assert d["code"] == ErrorCode.INDEX_OUT_OF_RANGE.value
    assert d["details"] == {"index": 99}
    assert d["cause"] == "bad digit"


def test_default_messages():
    assert NoSuchLinkError().message == "no such link"
    assert WrongTypeError().message == "value was not a link"


def test_base_error_defaults_to_unknown():
    err = ZcashIpldError("boom")
    assert err.code == ErrorCode.UNKNOWN
    assert str(err).startswith("[UNKNOWN] boom")
    assert not ErrorHandler.is_path_error(err)
    assert not ErrorHandler.is_decode_error(err)


def test_categorization():
    assert ErrorHandler.is_path_error(IndexOutOfRangeError())
    assert not ErrorHandler.is_path_error(MalformedInputError())
    assert ErrorHandler.is_decode_error(HashMismatchError())
    assert not ErrorHandler.is_decode_error(WrongTypeError())
