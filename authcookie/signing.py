"""Two-pass HMAC-SHA256 cookie signatures.

    k   = HMAC-SHA256(payload, secret)
    sig = HMAC-SHA256(payload, k)

Every payload is signed with its own derived key instead of the long-term
secret.
"""

from __future__ import annotations

import hmac
from hashlib import sha256
from typing import Union

Secret = Union[str, bytes]

TAG_SIZE = sha256().digest_size


def secret_bytes(secret: Secret) -> bytes:
    raw = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
    if not raw:
        raise ValueError("secret key must not be empty")
    return raw


def derive_key(payload: bytes, secret: Secret) -> bytes:
    """Return the per-payload signing key."""
    return hmac.new(secret_bytes(secret), payload, sha256).digest()


def compute_tag(payload: bytes, secret: Secret) -> bytes:
    """Return the 32-byte signature of *payload*."""
    return hmac.new(derive_key(payload, secret), payload, sha256).digest()


def tags_equal(a: bytes, b: bytes) -> bool:
    """Compare two tags in constant time."""
    return hmac.compare_digest(a, b)
