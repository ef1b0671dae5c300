"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from fintrend_config import MAX_PAGE_SIZE, Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("API_BASE_URL", "DRAIN_PAGE_SIZE", "DRAIN_MAX_PAGES"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://127.0.0.1:8000"
        assert settings.drain_page_size == MAX_PAGE_SIZE
        assert settings.drain_max_pages == 50
        assert settings.grouped_window == "yearly"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://finance.example.com/api/")
        monkeypatch.setenv("API_ACCESS_TOKEN", "s3cret")
        monkeypatch.setenv("DRAIN_PAGE_SIZE", "25")

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://finance.example.com/api"
        assert settings.api_access_token.get_secret_value() == "s3cret"
        assert settings.drain_page_size == 25

    def test_blank_token_is_none(self, monkeypatch):
        monkeypatch.setenv("API_ACCESS_TOKEN", "   ")

        assert Settings(_env_file=None).api_access_token is None

    @pytest.mark.parametrize("size", [0, MAX_PAGE_SIZE + 1])
    def test_page_size_bounds(self, size):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, drain_page_size=size)

    def test_unknown_granularity_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_granularity="daily")


class TestGetSettings:
    def test_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        clear_settings_cache()

        second = get_settings()
        assert second is not first
        assert second.log_level == "DEBUG"
