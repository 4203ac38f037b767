"""Tests for sitegen.config."""

import pytest
from pydantic import ValidationError

from sitegen.config import DEFAULT_BASE_URL, Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.live_base_url == DEFAULT_BASE_URL
        assert settings.public_dir == "public"
        assert settings.http_timeout == 15.0
        assert settings.log_level == "INFO"

    def test_base_url_trailing_slash_is_stripped(self):
        settings = Settings.from_env({"SEO_BASE_URL": "https://staging.example.com/"})
        assert settings.base_url == "https://staging.example.com"

    def test_live_base_follows_base_url(self):
        settings = Settings.from_env({"SEO_BASE_URL": "https://staging.example.com"})
        assert settings.live_base_url == "https://staging.example.com"

    def test_live_base_can_be_overridden(self):
        settings = Settings.from_env(
            {"SEO_BASE_URL": "https://example.com", "SITEGEN_LIVE_BASE_URL": "http://localhost:4173"}
        )
        assert settings.base_url == "https://example.com"
        assert settings.live_base_url == "http://localhost:4173"

    def test_values_are_coerced(self):
        settings = Settings.from_env({"SITEGEN_HTTP_TIMEOUT": "2.5", "SITEGEN_LOG_LEVEL": "debug"})
        assert settings.http_timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_base_url_requires_http_scheme(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"SEO_BASE_URL": "www.example.com"})

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"SITEGEN_HTTP_TIMEOUT": "0"})
