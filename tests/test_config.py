from peerfinder.core.config import Settings
from peerfinder.core.security import redact_id


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("REPOSITORY_URL", "http://profiles.internal")
    monkeypatch.setenv("profiles_poll_interval_seconds", "1.5")

    settings = Settings(_env_file=None)

    assert settings.REPOSITORY_URL == "http://profiles.internal"
    assert settings.PROFILES_POLL_INTERVAL_SECONDS == 1.5
    assert settings.REQUEST_MAX_RETRIES == 3


def test_redact_id():
    assert redact_id(None) == "None"
    assert redact_id("abc") == "abc"
    assert redact_id("0123456789") == "012345***"
