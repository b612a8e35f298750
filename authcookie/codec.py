"""Text encoding of authentication cookies.

Cookie format::

    login|expiration_time|signature

Login is stored escaped because ``|`` separates the fields: ``~`` becomes
``~~`` and ``|`` becomes ``~!``. Expiration time is a decimal number of
seconds since the Unix epoch and the signature is a hex-encoded 32-byte tag.
The signature covers ``escaped_login|expiration_time`` exactly as it appears
in the cookie.
"""

from __future__ import annotations

import re

from .errors import EscapeSequenceError, MalformedCookieError, TagLengthError
from .signing import TAG_SIZE
from .types import DecodedCookie

SEPARATOR = "|"
ESCAPE = "~"

MAX_EXPIRES = 2**32 - 1
_MAX_EXPIRES_DIGITS = len(str(MAX_EXPIRES))
_TAG_HEX_LENGTH = TAG_SIZE * 2

# One login character, one expiration digit, two separators and the tag.
MIN_LENGTH = 1 + 1 + 1 + 1 + _TAG_HEX_LENGTH

_UNESCAPED = {ESCAPE: ESCAPE, "!": SEPARATOR}
_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_DECIMAL_RE = re.compile(r"0|[1-9][0-9]*")


def max_encoded_length(max_login_length: int) -> int:
    """Return the longest cookie a login of *max_login_length* characters can produce."""
    if max_login_length < 1:
        raise ValueError("max_login_length must be positive")
    return 2 * max_login_length + 1 + _MAX_EXPIRES_DIGITS + 1 + _TAG_HEX_LENGTH


def escape(s: str) -> str:
    s = s.replace(ESCAPE, ESCAPE + ESCAPE)
    return s.replace(SEPARATOR, ESCAPE + "!")


def unescape(s: str) -> str:
    """Reverse :func:`escape`, rejecting unknown or unterminated escape sequences."""
    if ESCAPE not in s:
        return s

    out: list[str] = []
    pos = 0
    while True:
        i = s.find(ESCAPE, pos)
        if i < 0:
            out.append(s[pos:])
            break
        if i == len(s) - 1:
            raise EscapeSequenceError("malformed escape string")
        out.append(s[pos:i])
        marker = s[i + 1]
        if marker not in _UNESCAPED:
            raise EscapeSequenceError(f"unknown escape sequence: {ESCAPE}{marker}")
        out.append(_UNESCAPED[marker])
        pos = i + 2
    return "".join(out)


def encode_payload(login: str, expires: int) -> bytes:
    """Serialize the signed part of a cookie.

    *login* is text and is signed as UTF-8. *expires* must be an ``int``.
    """
    if not isinstance(login, str):
        raise TypeError(f"login must be str, not {type(login).__name__}")
    if isinstance(expires, bool) or not isinstance(expires, int):
        raise TypeError(f"expiration time must be int, not {type(expires).__name__}")
    if not 0 <= expires <= MAX_EXPIRES:
        raise ValueError(f"expiration time {expires} does not fit in 32 bits")
    try:
        return f"{escape(login)}{SEPARATOR}{expires}".encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("login is not encodable as UTF-8") from exc


def encode(payload: bytes, tag: bytes) -> str:
    if len(tag) != TAG_SIZE:
        raise ValueError(f"tag must be {TAG_SIZE} bytes, got {len(tag)}")
    return f"{payload.decode('utf-8')}{SEPARATOR}{tag.hex()}"


def decode(cookie: str) -> DecodedCookie:
    """Split a cookie into its fields without checking the signature.

    Raises :class:`MalformedCookieError` (or a subclass) if the cookie is not
    exactly ``escaped_login|expiration_time|hex_signature``.
    """
    parts = cookie.split(SEPARATOR)
    if len(parts) != 3:
        raise MalformedCookieError("malformed cookie")
    escaped_login, expires_str, sig_hex = parts

    if not _HEX_RE.fullmatch(sig_hex):
        raise MalformedCookieError("signature is not hex-encoded")
    if len(sig_hex) != _TAG_HEX_LENGTH:
        raise TagLengthError(f"signature must be {TAG_SIZE} bytes")
    tag = bytes.fromhex(sig_hex)

    if len(expires_str) > _MAX_EXPIRES_DIGITS or not _DECIMAL_RE.fullmatch(expires_str):
        raise MalformedCookieError("malformed expiration time")
    expires = int(expires_str)
    if expires > MAX_EXPIRES:
        raise MalformedCookieError("expiration time does not fit in 32 bits")

    if not escaped_login:
        raise MalformedCookieError("empty login")
    login = unescape(escaped_login)

    try:
        payload = f"{escaped_login}{SEPARATOR}{expires_str}".encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedCookieError("login is not valid unicode") from exc
    return DecodedCookie(login=login, expires=expires, payload=payload, tag=tag)
