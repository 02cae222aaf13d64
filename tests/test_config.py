"""Tests for environment-driven settings."""

import pytest

from wex.config import DEFAULT_TAPI_URL, AppSettings, WexSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WEX_API_KEY", raising=False)
    monkeypatch.delenv("WEX_API_SECRET", raising=False)
    settings = WexSettings()
    assert settings.tapi_url == DEFAULT_TAPI_URL
    assert settings.timeout == 10.0
    assert settings.has_credentials is False


def test_reads_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEX_API_KEY", "env-key")
    monkeypatch.setenv("WEX_API_SECRET", "env-secret")
    monkeypatch.setenv("WEX_TIMEOUT", "2.5")
    settings = WexSettings()
    assert settings.api_key.get_secret_value() == "env-key"
    assert settings.timeout == 2.5
    assert settings.has_credentials is True


def test_secret_not_in_repr() -> None:
    settings = WexSettings(api_secret="hunter2")  # type: ignore[arg-type]
    assert "hunter2" not in repr(settings)


def test_app_settings_compose(mock_settings: AppSettings) -> None:
    assert mock_settings.log_level == "DEBUG"
    assert mock_settings.wex.has_credentials is True


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run in an empty directory with no WEX_* or logging variables set."""
    for name in ("WEX_API_KEY", "WEX_API_SECRET", "WEX__API_KEY", "WEX__API_SECRET",
                 "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDotEnv:
    def test_flat_credentials_in_dotenv(self, clean_env: None, tmp_path) -> None:
        (tmp_path / ".env").write_text(
            "WEX_API_KEY=file-key\nWEX_API_SECRET=file-secret\nLOG_LEVEL=DEBUG\n"
        )
        settings = AppSettings()
        assert settings.log_level == "DEBUG"
        assert settings.wex.has_credentials is True
        assert settings.wex.api_key.get_secret_value() == "file-key"

    def test_nested_credentials_in_dotenv(self, clean_env: None, tmp_path) -> None:
        (tmp_path / ".env").write_text("WEX__API_KEY=k\nWEX__API_SECRET=s\n")
        settings = AppSettings()
        assert settings.wex.api_secret.get_secret_value() == "s"

    def test_unrelated_keys_ignored(self, clean_env: None, tmp_path) -> None:
        (tmp_path / ".env").write_text("SOMETHING_ELSE=1\nWEX_UNKNOWN=2\n")
        settings = AppSettings()
        assert settings.wex.has_credentials is False

    def test_log_format_from_env(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert AppSettings().log_format == "json"
