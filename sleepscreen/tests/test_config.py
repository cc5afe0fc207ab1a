from __future__ import annotations

from sleepscreen.api.core.config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PRACTICE_NAME", "Test Dental")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.practice_name == "Test Dental"
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"
