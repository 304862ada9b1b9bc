"""Signed session cookie issuance and verification."""

from .errors import (
    BadSignatureError,
    CookieError,
    CookieExpiredError,
    MalformedCookieError,
    PayloadDecodeError,
    PayloadFormatError,
    SignatureDecodeError,
)
from .issuer import CookieIssuer, new_cookie, new_raw_cookie, refresh_cookie
from .types import COOKIE_NAME, DEFAULT_DURATION, GENERATED_BY, Cookie, VerificationResult
from .verifier import CookieVerifier, parse_cookie

__all__ = [
    "Cookie",
    "CookieIssuer",
    "CookieVerifier",
    "VerificationResult",
    "new_cookie",
    "new_raw_cookie",
    "parse_cookie",
    "refresh_cookie",
    "COOKIE_NAME",
    "DEFAULT_DURATION",
    "GENERATED_BY",
    "CookieError",
    "MalformedCookieError",
    "SignatureDecodeError",
    "BadSignatureError",
    "PayloadDecodeError",
    "PayloadFormatError",
    "CookieExpiredError",
]
