"""Config-bound cookie issuance and verification."""

from __future__ import annotations

import logging

from . import codec
from .config import CookieConfig
from .cookie import issue, verify
from .errors import MalformedCookieError, WrongSignatureError
from .types import Cookie, IssuedCookie, VerificationResult
from .utils.time import unix_now

logger = logging.getLogger(__name__)


class CookieManager:
    """Issue and verify authentication cookies with one secret key.

    Cookies longer than a login of ``max_login_length`` characters could
    produce are rejected before any decoding or hashing.
    """

    def __init__(self, config: CookieConfig | None = None) -> None:
        self.config = config or CookieConfig.from_env()
        self.max_length = codec.max_encoded_length(self.config.max_login_length)

    def issue(self, login: str, *, ttl_seconds: int | None = None, now: int | None = None) -> IssuedCookie | None:
        """Issue a cookie for *login*, or return None if *login* is empty."""
        if not login:
            return None
        if len(login) > self.config.max_login_length:
            raise ValueError(f"login is longer than {self.config.max_login_length} characters")
        if now is None:
            now = unix_now()
        expires = now + (self.config.ttl_seconds if ttl_seconds is None else ttl_seconds)
        token = issue(login, expires, self.config.secret_key)
        return IssuedCookie(token=token, login=login, expires=expires)

    def verify(self, token: str, *, now: int | None = None) -> VerificationResult:
        if len(token) < codec.MIN_LENGTH:
            return self._reject("malformed")
        if len(token) > self.max_length:
            return self._reject("oversized")

        try:
            cookie = verify(token, self.config.secret_key)
        except MalformedCookieError:
            return self._reject("malformed")
        except WrongSignatureError:
            return self._reject("wrong_signature")

        if now is None:
            now = unix_now()
        if cookie.is_expired(now):
            return self._reject("expired", cookie)
        return VerificationResult(valid=True, reason="ok", cookie=cookie)

    def login(self, token: str, *, now: int | None = None) -> str:
        """Return the login of a valid, unexpired cookie, or an empty string."""
        result = self.verify(token, now=now)
        if not result.valid or result.cookie is None:
            return ""
        return result.cookie.login

    def _reject(self, reason: str, cookie: Cookie | None = None) -> VerificationResult:
        logger.debug("Rejected cookie: %s", reason)
        return VerificationResult(valid=False, reason=reason, cookie=cookie)
