"""Session cookie parsing and verification."""

from __future__ import annotations

import binascii
import json
import logging
from typing import TYPE_CHECKING, Any, Callable

from ..utils.encoding import b64_decode
from ..utils.time import epoch_seconds, format_epoch
from .errors import (
    BadSignatureError,
    CookieError,
    CookieExpiredError,
    MalformedCookieError,
    PayloadDecodeError,
    PayloadFormatError,
    SignatureDecodeError,
)
from .signing import check_hmac, normalize_key
from .types import INT64_MAX, INT64_MIN, Cookie, VerificationResult

if TYPE_CHECKING:
    from ..config import CookieConfig

logger = logging.getLogger(__name__)


class CookieVerifier:
    """Verify signed session cookies and decode their payload."""

    def __init__(self, secret: str | bytes, *, clock: Callable[[], int] = epoch_seconds) -> None:
        self._secret = normalize_key(secret)
        self._clock = clock

    @classmethod
    def from_config(cls, config: "CookieConfig", *, clock: Callable[[], int] = epoch_seconds) -> "CookieVerifier":
        return cls(config.secret, clock=clock)

    def parse(self, cookie: str) -> Cookie:
        """Return the decoded cookie or raise a ``CookieError`` subclass.

        Padding on the encoded text is ``-``, so the first dash may be padding
        rather than the separator. The payload is decoded from the text before
        the first dash. The signed text runs up to the last dash minus one,
        since hex signatures never contain a dash and the last one is always
        the second half of the ``--`` separator.
        """
        dash_pos = cookie.find("-")
        if dash_pos == -1:
            raise MalformedCookieError("malformed cookie: no dashes")
        last_dash_pos = cookie.rfind("-")
        if last_dash_pos == len(cookie) - 1:
            raise MalformedCookieError("malformed cookie: no signature")

        signed_text = cookie[: max(last_dash_pos - 1, 0)]
        try:
            signature = binascii.unhexlify(cookie[last_dash_pos + 1 :])
        except ValueError as exc:
            raise SignatureDecodeError(f"error decoding signature: {exc}") from exc

        if not check_hmac(signed_text.encode("utf-8", "surrogatepass"), signature, self._secret):
            raise BadSignatureError("bad signature")

        try:
            payload_raw = b64_decode(cookie[:dash_pos]).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise PayloadDecodeError(f"error decoding base64 data: {exc}") from exc

        decoded = _load_cookie(payload_raw)

        now = self._clock()
        if decoded.expires < now:
            logger.info(
                "signature expired: %s < %s",
                format_epoch(decoded.expires),
                format_epoch(now),
            )
            raise CookieExpiredError(decoded, now)
        return decoded

    def verify(self, cookie: str) -> VerificationResult:
        try:
            decoded = self.parse(cookie)
        except CookieExpiredError as exc:
            return VerificationResult(False, exc.reason, cookie=exc.cookie)
        except CookieError as exc:
            logger.debug("cookie rejected: %s", exc.reason)
            return VerificationResult(False, exc.reason)
        return VerificationResult(True, "ok", cookie=decoded)


def _load_cookie(payload_raw: str) -> Cookie:
    try:
        payload: Any = json.loads(payload_raw)
    except (ValueError, RecursionError) as exc:
        raise PayloadFormatError(f"error decoding cookie JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise PayloadFormatError("cookie payload is not an object")

    auth_data = payload.get("auth_data")
    expires = payload.get("expires")
    by = payload.get("by")
    if not isinstance(auth_data, str):
        raise PayloadFormatError("cookie payload missing string 'auth_data'")
    if isinstance(expires, bool) or not isinstance(expires, int) or not INT64_MIN <= expires <= INT64_MAX:
        raise PayloadFormatError("cookie payload missing integer 'expires'")
    if not isinstance(by, str):
        raise PayloadFormatError("cookie payload missing string 'by'")
    return Cookie(auth_data=auth_data, expires=expires, by=by)


def parse_cookie(cookie: str, key: str | bytes) -> Cookie:
    return CookieVerifier(key).parse(cookie)
