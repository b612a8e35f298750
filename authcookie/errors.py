"""Cookie verification errors."""

from __future__ import annotations


class AuthCookieError(ValueError):
    """Base class for cookie decode and verification failures."""


class MalformedCookieError(AuthCookieError):
    """Cookie is not structurally well-formed."""


class EscapeSequenceError(MalformedCookieError):
    """Escaped login contains an unknown or unterminated escape sequence."""


class TagLengthError(MalformedCookieError):
    """Signature does not decode to exactly 32 bytes."""


class WrongSignatureError(AuthCookieError):
    """Cookie is well-formed but its signature does not match."""
