"""Tests for mylife.core.security: passwords and bearer tokens."""

from datetime import timedelta

from mylife.core.config import Settings
from mylife.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    normalize_email,
    parse_bearer,
    verify_password,
)


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, secret_key=overrides.pop("secret_key", "unit-secret"), **overrides)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("secret1")
        assert hashed != "secret1"
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)


class TestTokens:
    def test_round_trip_returns_subject(self):
        settings = _settings()
        token = create_access_token("user-1", settings)
        assert decode_access_token(token, settings) == "user-1"

    def test_expired_token_rejected(self):
        settings = _settings()
        token = create_access_token("user-1", settings, expires_delta=timedelta(seconds=-5))
        assert decode_access_token(token, settings) is None

    def test_wrong_secret_rejected(self):
        token = create_access_token("user-1", _settings(secret_key="one"))
        assert decode_access_token(token, _settings(secret_key="two")) is None

    def test_tampered_token_rejected(self):
        settings = _settings()
        header, _, signature = create_access_token("user-1", settings).split(".")
        _, payload, _ = create_access_token("user-2", settings).split(".")
        assert decode_access_token(f"{header}.{payload}.{signature}", settings) is None

    def test_garbage_rejected(self):
        settings = _settings()
        assert decode_access_token("not-a-token", settings) is None
        assert decode_access_token("", settings) is None


class TestParseBearer:
    def test_extracts_token(self):
        assert parse_bearer("Bearer abc.def") == "abc.def"

    def test_rejects_other_schemes_and_blanks(self):
        assert parse_bearer(None) is None
        assert parse_bearer("") is None
        assert parse_bearer("Basic abc") is None
        assert parse_bearer("Bearer ") is None


class TestNormalizeEmail:
    def test_trims_and_lowercases(self):
        assert normalize_email("  Ana@Example.COM ") == "ana@example.com"

    def test_missing_is_empty(self):
        assert normalize_email(None) == ""
