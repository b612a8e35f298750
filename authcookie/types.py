"""Cookie datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Cookie:
    """Authenticated contents of a cookie."""

    login: str
    expires: int

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.expires, tz=timezone.utc)

    def is_expired(self, now: int) -> bool:
        """Return True if the cookie expired before *now* (Unix seconds)."""
        return self.expires < now


@dataclass(frozen=True)
class DecodedCookie:
    """Structurally valid cookie whose signature has not been checked yet."""

    login: str
    expires: int
    payload: bytes
    tag: bytes


@dataclass(frozen=True)
class IssuedCookie:
    token: str
    login: str
    expires: int


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    cookie: Cookie | None = None
