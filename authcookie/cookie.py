"""Creation and validation of signed authentication cookies."""

from __future__ import annotations

import logging

from . import codec
from .errors import AuthCookieError, WrongSignatureError
from .signing import Secret, compute_tag, tags_equal
from .types import Cookie
from .utils.time import unix_now

logger = logging.getLogger(__name__)

__all__ = ["issue", "issue_relative", "verify", "login_if_valid"]


def issue(login: str, expires: int, secret: Secret) -> str:
    """Return a signed cookie for *login* expiring at *expires* (Unix seconds, UTC).

    Returns an empty string if *login* is empty: a cookie for nobody is never
    issued. *login* is text signed as its UTF-8 encoding; a string that cannot
    be encoded (e.g. a lone surrogate) raises ``ValueError``. *expires* must be
    an ``int`` (``TypeError`` otherwise, floats and bools included) and raises
    ``ValueError`` if it does not fit in 32 unsigned bits.
    """
    if not login:
        return ""
    payload = codec.encode_payload(login, expires)
    return codec.encode(payload, compute_tag(payload, secret))


def issue_relative(login: str, seconds_from_now: int, secret: Secret, *, now: int | None = None) -> str:
    """Return a signed cookie for *login* expiring *seconds_from_now* after *now*."""
    if now is None:
        now = unix_now()
    return issue(login, now + seconds_from_now, secret)


def verify(cookie: str, secret: Secret) -> Cookie:
    """Validate *cookie* with *secret* and return its login and expiration time.

    Raises :class:`~authcookie.errors.MalformedCookieError` if the cookie is
    not well-formed and :class:`~authcookie.errors.WrongSignatureError` if its
    signature does not match. The expiration time is not checked: callers
    must deny access if it is in the past.
    """
    decoded = codec.decode(cookie)
    if not tags_equal(compute_tag(decoded.payload, secret), decoded.tag):
        raise WrongSignatureError("wrong cookie signature")
    return Cookie(login=decoded.login, expires=decoded.expires)


def login_if_valid(cookie: str, secret: Secret, *, now: int | None = None) -> str:
    """Return the login from a valid, unexpired cookie, or an empty string.

    Malformed, forged and expired cookies are indistinguishable to the caller.
    An empty *secret* is a caller error and raises ``ValueError``.
    """
    try:
        parsed = verify(cookie, secret)
    except AuthCookieError as exc:
        logger.debug("Rejected cookie: %s", exc)
        return ""
    if now is None:
        now = unix_now()
    if parsed.is_expired(now):
        logger.debug("Rejected cookie: expired at %d", parsed.expires)
        return ""
    return parsed.login
