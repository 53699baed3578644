# tests/test_domain.py
import pytest

from pkg_ajwt.domain.constants import ErrorKind
from pkg_ajwt.domain.entities import DecodeResult
from pkg_ajwt.domain.exceptions import (
    InvalidInputError,
    InvalidPayloadError,
    InvalidSignatureError,
    MalformedPayloadError,
    TokenError,
    UnencodablePayloadError,
)
from pkg_ajwt.domain.value_objects import SecretKey, Token


def test_secret_key_value_object():
    assert SecretKey("key").value == b"key"
    assert SecretKey(b"\x00\x01").value == b"\x00\x01"
    assert SecretKey("clé").value == "clé".encode("utf-8")
    assert "key" not in repr(SecretKey("key"))

    assert SecretKey(bytearray(b"key")).value == b"key"
    assert SecretKey(memoryview(b"key")).value == b"key"

    with pytest.raises(ValueError):
        SecretKey("")
    with pytest.raises(ValueError):
        SecretKey(b"")

    for not_a_key in (5, None, 1.5, ["k"]):
        with pytest.raises(TypeError):
            SecretKey(not_a_key)

    key = SecretKey("key")
    assert SecretKey.coerce(key) is key
    assert SecretKey.coerce(b"key") == key


def test_token_parse_and_render():
    token = Token.parse("cGF5bG9hZA==.c2ln")
    assert token.payload_segment == "cGF5bG9hZA=="
    assert token.signature_segment == "c2ln"
    assert token.serialized_payload() == b"payload"
    assert token.signature() == b"sig"
    assert str(token) == "cGF5bG9hZA==.c2ln"

    assert Token.build(b"payload", b"sig") == token


@pytest.mark.parametrize("raw", ["1234", "", "a.b.c", "a..b", "...."])
def test_token_parse_invalid_members_count(raw):
    with pytest.raises(InvalidInputError) as exc_info:
        Token.parse(raw)
    assert "Invalid members count" in exc_info.value.detail


@pytest.mark.parametrize("raw", [".abc", "abc.", "."])
def test_token_parse_empty_member(raw):
    with pytest.raises(InvalidInputError):
        Token.parse(raw)


def test_token_invalid_base64():
    token = Token.parse("not*base64.c2ln")
    with pytest.raises(InvalidInputError):
        token.serialized_payload()

    token = Token.parse("cGF5bG9hZA==.sïg")
    with pytest.raises(InvalidInputError):
        token.signature()


def test_error_kinds():
    assert InvalidInputError().kind is ErrorKind.INVALID_INPUT
    assert InvalidSignatureError().kind is ErrorKind.INVALID_SIGNATURE
    assert InvalidPayloadError().kind is ErrorKind.INVALID_PAYLOAD
    assert MalformedPayloadError().kind is ErrorKind.INVALID_PAYLOAD
    assert UnencodablePayloadError().kind is ErrorKind.UNENCODABLE_PAYLOAD

    # --- hierarchy ---
    assert issubclass(MalformedPayloadError, InvalidPayloadError)
    for cls in (InvalidInputError, InvalidSignatureError, InvalidPayloadError, UnencodablePayloadError):
        assert issubclass(cls, TokenError)

    exc = InvalidPayloadError("Missing required keys: test")
    assert exc.detail == "Missing required keys: test"
    assert str(exc) == "Missing required keys: test"


def test_decode_result():
    ok = DecodeResult.success({"key": "value"})
    assert ok.ok
    assert ok.error is None
    assert ok.unwrap() == {"key": "value"}

    failed = DecodeResult.failure(InvalidSignatureError("Invalid signature"))
    assert not failed.ok
    assert failed.payload == {}
    assert failed.error is ErrorKind.INVALID_SIGNATURE
    assert failed.detail == "Invalid signature"
    with pytest.raises(ValueError):
        failed.unwrap()
