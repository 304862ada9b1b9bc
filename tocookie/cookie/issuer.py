"""HMAC-signed session cookie issuer."""

from __future__ import annotations

import json
import re
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from ..utils.encoding import b64_encode
from ..utils.time import epoch_seconds, to_epoch_seconds
from .signing import normalize_key, sign
from .types import DEFAULT_DURATION, GENERATED_BY, INT64_MAX, INT64_MIN, SEPARATOR, Cookie

if TYPE_CHECKING:
    from ..config import CookieConfig

_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


class CookieIssuer:
    """Mint and refresh signed session cookies."""

    def __init__(
        self,
        secret: str | bytes,
        *,
        issuer: str = GENERATED_BY,
        default_duration: int = DEFAULT_DURATION,
        clock: Callable[[], int] = epoch_seconds,
    ) -> None:
        if default_duration <= 0:
            raise ValueError("`default_duration` must be a positive number of seconds.")
        self._secret = normalize_key(secret)
        self.issuer = issuer
        self.default_duration = default_duration
        self._clock = clock

    @classmethod
    def from_config(cls, config: "CookieConfig", *, clock: Callable[[], int] = epoch_seconds) -> "CookieIssuer":
        return cls(config.secret, issuer=config.issuer, default_duration=config.default_duration, clock=clock)

    def issue_raw(self, message: bytes) -> str:
        """Encode and sign an arbitrary payload.

        The MAC covers the encoded text including its ``-`` padding, and is
        appended as lowercase hex after a ``--`` separator.
        """
        encoded = b64_encode(message)
        signature = sign(encoded.encode("ascii"), self._secret).hex()
        return f"{encoded}{SEPARATOR}{signature}"

    def issue(self, auth_data: str, expiration: datetime | int) -> str:
        """Mint a cookie for ``auth_data`` valid until ``expiration``.

        Lone surrogates in the text fields are replaced with U+FFFD.
        """
        expires = to_epoch_seconds(expiration)
        if not INT64_MIN <= expires <= INT64_MAX:
            raise ValueError(f"expiration {expires} does not fit in a signed 64-bit integer")
        cookie = Cookie(auth_data=auth_data, expires=expires, by=self.issuer)
        payload_text = json.dumps(cookie.to_payload(), separators=(",", ":"), ensure_ascii=False)
        payload_raw = _SURROGATE_RE.sub("\ufffd", payload_text).encode("utf-8")
        return self.issue_raw(payload_raw)

    def refresh(self, cookie: Cookie) -> str:
        """Re-mint ``cookie`` with a fresh expiration and this issuer's tag."""
        return self.issue(cookie.auth_data, self._clock() + self.default_duration)


def new_raw_cookie(message: bytes, key: str | bytes) -> str:
    return CookieIssuer(key).issue_raw(message)


def new_cookie(auth_data: str, expiration: datetime | int, key: str | bytes) -> str:
    return CookieIssuer(key).issue(auth_data, expiration)


def refresh_cookie(cookie: Cookie, key: str | bytes) -> str:
    return CookieIssuer(key).refresh(cookie)
