"""Tests for the bridge token codec."""

import base64

import pytest

from simplefin_rotki.core.exceptions import AppException, ErrorKind
from simplefin_rotki.services import token_codec


@pytest.mark.unit
@pytest.mark.parametrize(
    "plaintext",
    [
        b"",
        b"http://localhost:8080",
        b"https://rotki.example.com:4242/sub/path?x=1",
        bytes(range(256)),
        "http://ünïcode.example/€".encode(),
    ],
)
def test_decode_recovers_encoded_bytes(plaintext: bytes):
    """Decoding an encoded token returns the original bytes exactly."""
    assert token_codec.decode(token_codec.encode(plaintext)) == plaintext


@pytest.mark.unit
def test_encode_uses_standard_alphabet():
    """Tokens use the standard alphabet, so "/" and "+" may appear."""
    token = token_codec.encode(b"\xfb\xff\xfe")
    assert token == "+//+"
    assert token == base64.b64encode(b"\xfb\xff\xfe").decode()


@pytest.mark.unit
@pytest.mark.parametrize(
    "token",
    [
        "not base64!",
        "aHR0cDovL2xvY2FsaG9zdDo4MDgw$",
        "aHR0cDovL2xvY2FsaG9zdDo4MDgw-_",
        "abc",  # bad padding
        "a===",
        "aHR0c\nDovL2xvY2FsaG9zdDo4MDgw",
    ],
)
def test_decode_rejects_malformed_tokens(token: str):
    """Malformed tokens raise a token decode error instead of decoding partially."""
    with pytest.raises(AppException) as exc_info:
        token_codec.decode(token)

    assert exc_info.value.kind is ErrorKind.TOKEN_DECODE
    assert exc_info.value.status_code == 400


@pytest.mark.unit
def test_decode_text_returns_url():
    """A claim token for a Rotki URL decodes to exactly that URL."""
    token = token_codec.encode(b"http://localhost:8080")
    assert token_codec.decode_text(token) == "http://localhost:8080"


@pytest.mark.unit
def test_decode_text_rejects_invalid_utf8():
    """Payloads that are not UTF-8 fail rather than being replaced lossily."""
    token = token_codec.encode(b"http://\xff\xfe")

    with pytest.raises(AppException) as exc_info:
        token_codec.decode_text(token)

    assert exc_info.value.kind is ErrorKind.TOKEN_DECODE
