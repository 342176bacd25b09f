"""Bridge token codec.

A bridge token is the standard-alphabet base64 encoding of a URL. The token
carries its own payload, so nothing is ever stored server-side. Tokens are an
obfuscation, not a secret: anyone holding one can decode the URL inside.

The standard alphabet includes ``/`` and ``+``; routes that carry a token in
the path must match it with a path converter.
"""

import base64
import binascii

from simplefin_rotki.core.exceptions import AppException, ErrorKind


def encode(plaintext: bytes) -> str:
    """Encode raw bytes into a bridge token."""
    return base64.b64encode(plaintext).decode("ascii")


def decode(token: str) -> bytes:
    """
    Decode a bridge token back into the exact bytes it was built from.

    Characters outside the base64 alphabet and malformed padding are rejected
    rather than skipped.

    Raises:
        AppException: ``ErrorKind.TOKEN_DECODE`` if the token is malformed
    """
    try:
        return base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AppException(ErrorKind.TOKEN_DECODE, f"Malformed bridge token: {e}") from e


def decode_text(token: str) -> str:
    """Decode a bridge token whose payload is UTF-8 text, such as a URL."""
    raw = decode(token)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AppException(ErrorKind.TOKEN_DECODE, f"Bridge token is not UTF-8: {e}") from e
