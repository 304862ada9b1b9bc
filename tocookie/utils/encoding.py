"""Base64 text encoding with ``-`` as the pad character."""

from __future__ import annotations

import base64
import binascii
import re

PAD_CHAR = "-"
ALTCHARS = b"._"

_ALPHABET_RE = re.compile(r"^[A-Za-z0-9._]*$")


def b64_encode(data: bytes) -> str:
    """Encode bytes as padded URL-safe base64, padding with ``-``."""
    text = base64.b64encode(data, altchars=ALTCHARS).decode("ascii")
    return text.replace("=", PAD_CHAR)


def b64_decode(text: str) -> bytes:
    """Decode base64 text whose trailing pad characters may be missing.

    Raises ``binascii.Error`` for characters outside the alphabet or an
    impossible length.
    """
    text = text.rstrip(PAD_CHAR)
    if not _ALPHABET_RE.match(text):
        raise binascii.Error("non-alphabet character in base64 text")
    if len(text) % 4 == 1:
        raise binascii.Error("invalid base64 length")
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded.encode("ascii"), altchars=ALTCHARS, validate=True)
