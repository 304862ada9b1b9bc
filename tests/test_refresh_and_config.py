import logging

import pytest

from tocookie import CookieConfig
from tocookie.cookie import DEFAULT_DURATION, GENERATED_BY, Cookie, CookieIssuer, CookieVerifier, refresh_cookie
from tocookie.logging_config import configure_logging, get_logging_config

NOW = 1_700_000_000


def test_refresh_extends_expiration() -> None:
    issuer = CookieIssuer("unit-secret", clock=lambda: NOW)
    verifier = CookieVerifier("unit-secret", clock=lambda: NOW)
    original = verifier.parse(issuer.issue("alice", NOW + 5))
    refreshed = verifier.parse(issuer.refresh(original))
    assert refreshed.auth_data == "alice"
    assert refreshed.expires == NOW + DEFAULT_DURATION
    assert refreshed.expires > original.expires


def test_refresh_resets_issuer_tag() -> None:
    token = refresh_cookie(Cookie(auth_data="bob", expires=0, by="someone-else"), "unit-secret")
    cookie = CookieVerifier("unit-secret").parse(token)
    assert cookie.auth_data == "bob"
    assert cookie.by == GENERATED_BY


def test_refresh_uses_configured_duration() -> None:
    config = CookieConfig(secret="unit-secret", default_duration=30)
    issuer = CookieIssuer.from_config(config, clock=lambda: NOW)
    cookie = CookieVerifier.from_config(config, clock=lambda: NOW).parse(issuer.refresh(Cookie("carol", NOW)))
    assert cookie.expires == NOW + 30


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOCOOKIE_SECRET", "env-secret")
    monkeypatch.delenv("TOCOOKIE_DEFAULT_DURATION", raising=False)
    config = CookieConfig.from_env()
    assert config.secret == "env-secret"
    assert config.default_duration == DEFAULT_DURATION
    assert config.issuer == GENERATED_BY

    monkeypatch.setenv("TOCOOKIE_DEFAULT_DURATION", "120")
    assert CookieConfig.from_env().default_duration == 120


def test_config_requires_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TOCOOKIE_SECRET", raising=False)
    with pytest.raises(ValueError):
        CookieConfig.from_env()
    with pytest.raises(ValueError):
        CookieConfig(secret="")


@pytest.mark.parametrize("duration", ["soon", "0", "-5"])
def test_config_rejects_bad_duration(monkeypatch: pytest.MonkeyPatch, duration: str) -> None:
    monkeypatch.setenv("TOCOOKIE_SECRET", "env-secret")
    monkeypatch.setenv("TOCOOKIE_DEFAULT_DURATION", duration)
    with pytest.raises(ValueError):
        CookieConfig.from_env()


def test_config_from_custom_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TO_SECRET", "prefixed")
    assert CookieConfig.from_env(prefix="TO_").secret == "prefixed"


def test_empty_secret_rejected_by_codec() -> None:
    with pytest.raises(ValueError):
        CookieIssuer("")
    with pytest.raises(ValueError):
        CookieVerifier(b"")


def test_logging_config_targets_package_logger() -> None:
    config = get_logging_config("debug")
    assert config["loggers"]["tocookie"]["level"] == "DEBUG"
    configure_logging("warning")
    assert logging.getLogger("tocookie").level == logging.WARNING
    configure_logging("info")


@pytest.mark.parametrize("duration", [0, -60])
def test_issuer_rejects_non_positive_duration(duration: int) -> None:
    with pytest.raises(ValueError):
        CookieIssuer("unit-secret", default_duration=duration)


def test_package_logger_does_not_propagate() -> None:
    assert get_logging_config()["loggers"]["tocookie"]["propagate"] is False
