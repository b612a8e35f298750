"""Configuration for config-bound cookie management."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .signing import Secret

DEFAULT_TTL_SECONDS = 3600
DEFAULT_MAX_LOGIN_LENGTH = 256


@dataclass(frozen=True)
class CookieConfig:
    """Secret key and limits shared by issuing and verifying sides."""

    secret_key: Secret
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    max_login_length: int = DEFAULT_MAX_LOGIN_LENGTH

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError("secret_key must not be empty")
        if self.ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if self.max_login_length <= 0:
            raise ValueError("max_login_length must be positive")

    @classmethod
    def from_env(cls) -> "CookieConfig":
        """Build a config from ``AUTHCOOKIE_*`` environment variables."""
        return cls(
            secret_key=os.getenv("AUTHCOOKIE_SECRET_KEY", ""),
            ttl_seconds=int(os.getenv("AUTHCOOKIE_TTL_SECONDS", str(DEFAULT_TTL_SECONDS))),
            max_login_length=int(os.getenv("AUTHCOOKIE_MAX_LOGIN_LENGTH", str(DEFAULT_MAX_LOGIN_LENGTH))),
        )
