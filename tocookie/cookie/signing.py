"""HMAC-SHA1 signing primitive shared by the issuer and the verifier."""

from __future__ import annotations

import hmac
from hashlib import sha1


def sign(message: bytes, key: bytes) -> bytes:
    """Return the HMAC-SHA1 digest of ``message`` under ``key``."""
    return hmac.new(key, message, sha1).digest()


def check_hmac(message: bytes, message_mac: bytes, key: bytes) -> bool:
    """Compare ``message_mac`` with the expected digest in constant time."""
    return hmac.compare_digest(message_mac, sign(message, key))


def normalize_key(key: str | bytes) -> bytes:
    if isinstance(key, str):
        key = key.encode("utf-8")
    if not key:
        raise ValueError("A non-empty secret key is required.")
    return key
