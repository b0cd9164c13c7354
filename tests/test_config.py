"""Tests for settings validation."""

import pytest

from config import Settings
from packages.shared.errors import ConfigurationError


def _settings(**values) -> Settings:
    s = Settings()
    for key, value in values.items():
        setattr(s, key, value)
    return s


def test_complete_settings_validate(configured_settings):
    assert configured_settings.missing() == []
    configured_settings.validate()


def test_missing_settings_are_all_reported():
    s = _settings(
        supabase_url="https://example.supabase.co",
        supabase_key="",
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret="",
        frontend_url="",
    )
    assert s.missing() == ["SUPABASE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET", "FRONTEND_URL"]
    with pytest.raises(ConfigurationError) as exc_info:
        s.validate()
    assert exc_info.value.details["missing"] == s.missing()


def test_is_production():
    assert _settings(environment="Production").is_production
    assert not _settings(environment="development").is_production
