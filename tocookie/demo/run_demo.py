"""Run an end-to-end mint, verify, tamper and refresh walkthrough."""

from __future__ import annotations

import os
from typing import Dict

from ..config import CookieConfig
from ..cookie import CookieIssuer, CookieVerifier
from ..logging_config import configure_logging
from ..utils.time import epoch_seconds


def main() -> Dict[str, str]:
    configure_logging(os.getenv("TOCOOKIE_LOG_LEVEL", "INFO"))
    config = CookieConfig(secret=os.getenv("TOCOOKIE_SECRET", "demo-secret"))
    issuer = CookieIssuer.from_config(config)
    verifier = CookieVerifier.from_config(config)
    outcomes: Dict[str, str] = {}

    token = issuer.issue("alice", epoch_seconds() + 60)
    print("MINTED:", token)
    outcomes["fresh"] = verifier.verify(token).reason

    encoded, signature = token.rsplit("--", 1)
    flipped = "0" if signature[0] != "0" else "1"
    outcomes["tampered"] = verifier.verify(f"{encoded}--{flipped}{signature[1:]}").reason
    outcomes["wrong_key"] = CookieVerifier("not-the-secret").verify(token).reason
    outcomes["expired"] = verifier.verify(issuer.issue("alice", epoch_seconds() - 1)).reason

    result = verifier.verify(token)
    if result.cookie is not None:
        refreshed = issuer.refresh(result.cookie)
        print("REFRESHED:", refreshed)
        outcomes["refreshed"] = verifier.verify(refreshed).reason

    for name, reason in outcomes.items():
        print(f"{name.upper()}: {reason}")
    return outcomes


if __name__ == "__main__":
    main()
