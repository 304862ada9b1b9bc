"""Typed cookie rejection reasons."""

from __future__ import annotations

from typing import ClassVar

from .types import Cookie


class CookieError(ValueError):
    """Base class for every cookie rejection."""

    reason: ClassVar[str] = "invalid_cookie"


class MalformedCookieError(CookieError):
    reason = "malformed_cookie"


class SignatureDecodeError(CookieError):
    reason = "signature_decode_failed"


class BadSignatureError(CookieError):
    reason = "bad_signature"


class PayloadDecodeError(CookieError):
    reason = "payload_decode_failed"


class PayloadFormatError(CookieError):
    reason = "invalid_payload"


class CookieExpiredError(CookieError):
    """Signature was valid but the expiration time has passed."""

    reason = "expired"

    def __init__(self, cookie: Cookie, now: int) -> None:
        super().__init__(f"cookie expired at {cookie.expires} (now {now})")
        self.cookie = cookie
        self.now = now
