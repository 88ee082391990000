"""Tests for settings helpers."""

from src.core.config import Settings
from src.core.env_manager import EnvManager


def test_get_now_uses_configured_time_zone():
    settings = Settings(TIME_ZONE="UTC")

    now = settings.get_now()

    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


def test_cors_origins_split_on_commas():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_env_manager_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("BLOG_CMS_UNSET", raising=False)
    monkeypatch.setenv("BLOG_CMS_FLAG", "yes")

    assert EnvManager.get_env_variable("BLOG_CMS_UNSET", "fallback") == "fallback"
    assert EnvManager.get_bool("BLOG_CMS_FLAG") is True
    assert EnvManager.get_bool("BLOG_CMS_UNSET") is False
