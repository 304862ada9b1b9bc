"""Session cookie datatypes and wire constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

GENERATED_BY = "trafficcontrol-go-tocookie"
COOKIE_NAME = "mojolicious"
DEFAULT_DURATION = 3600
SEPARATOR = "--"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Cookie:
    """Decoded cookie payload.

    Only trustworthy when returned by ``CookieVerifier``; a record built any
    other way has not had its signature or expiration checked.
    """

    auth_data: str
    expires: int
    by: str = GENERATED_BY

    def to_payload(self) -> Dict[str, Any]:
        return {"auth_data": self.auth_data, "expires": self.expires, "by": self.by}


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    cookie: Cookie | None = None
