"""Configuration model for cookie signing."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .cookie.types import DEFAULT_DURATION, GENERATED_BY


@dataclass(frozen=True)
class CookieConfig:
    """Secret and defaults shared by the issuer and verifier."""

    secret: str
    issuer: str = GENERATED_BY
    default_duration: int = DEFAULT_DURATION

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("CookieConfig requires a non-empty `secret`.")
        if self.default_duration <= 0:
            raise ValueError("`default_duration` must be a positive number of seconds.")

    @classmethod
    def from_env(cls, prefix: str = "TOCOOKIE_") -> "CookieConfig":
        """Build a config from ``<prefix>SECRET`` and ``<prefix>DEFAULT_DURATION``."""
        secret = os.getenv(f"{prefix}SECRET", "")
        if not secret:
            raise ValueError(f"Set {prefix}SECRET to configure cookie signing.")
        raw_duration = os.getenv(f"{prefix}DEFAULT_DURATION")
        if raw_duration is None:
            return cls(secret=secret)
        try:
            duration = int(raw_duration)
        except ValueError as exc:
            raise ValueError(f"{prefix}DEFAULT_DURATION must be an integer, got {raw_duration!r}.") from exc
        return cls(secret=secret, default_duration=duration)
