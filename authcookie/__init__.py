"""Signed, stateless authentication cookies.

A cookie binds a login to an expiration time and is signed with a two-pass
HMAC-SHA256 so that no server-side session storage is needed.
"""

from .codec import MIN_LENGTH, max_encoded_length
from .config import CookieConfig
from .cookie import issue, issue_relative, login_if_valid, verify
from .errors import (
    AuthCookieError,
    EscapeSequenceError,
    MalformedCookieError,
    TagLengthError,
    WrongSignatureError,
)
from .manager import CookieManager
from .types import Cookie, IssuedCookie, VerificationResult

__all__ = [
    "issue",
    "issue_relative",
    "verify",
    "login_if_valid",
    "MIN_LENGTH",
    "max_encoded_length",
    "Cookie",
    "IssuedCookie",
    "VerificationResult",
    "CookieConfig",
    "CookieManager",
    "AuthCookieError",
    "MalformedCookieError",
    "EscapeSequenceError",
    "TagLengthError",
    "WrongSignatureError",
]
