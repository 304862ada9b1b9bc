"""Utility helpers for text encoding and time operations."""

from .encoding import PAD_CHAR, b64_decode, b64_encode
from .time import epoch_seconds, format_epoch, to_epoch_seconds, utc_now

__all__ = [
    "PAD_CHAR",
    "b64_encode",
    "b64_decode",
    "utc_now",
    "epoch_seconds",
    "to_epoch_seconds",
    "format_epoch",
]
