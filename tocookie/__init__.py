"""tocookie package.

Mint and verify compact HMAC-signed session cookies carrying an identity,
an issuer tag and an expiration.
"""

from .config import CookieConfig
from .cookie import (
    Cookie,
    CookieError,
    CookieIssuer,
    CookieVerifier,
    VerificationResult,
    new_cookie,
    parse_cookie,
    refresh_cookie,
)

__all__ = [
    "Cookie",
    "CookieConfig",
    "CookieError",
    "CookieIssuer",
    "CookieVerifier",
    "VerificationResult",
    "new_cookie",
    "parse_cookie",
    "refresh_cookie",
]
