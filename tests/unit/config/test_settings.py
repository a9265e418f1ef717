"""Unit tests for Settings class and get_settings function."""

import pytest
from pydantic import ValidationError

from resolve_vars.config import get_settings, reload_settings
from resolve_vars.config.models.storage import ConsulConfig
from resolve_vars.config.settings import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "resolve-vars"
        assert settings.debug is False

    def test_store_defaults(self) -> None:
        settings = Settings()
        assert settings.store.backend == "consul"
        assert settings.store.consul.base_url == "http://127.0.0.1:8500"
        assert settings.store.consul.token is None
        assert settings.store.redis.key_prefix == ""

    def test_observability_defaults(self) -> None:
        settings = Settings()
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.logging.redact_secrets is True

    def test_invalid_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(store={"backend": "etcd"})

    def test_token_is_secret(self) -> None:
        config = ConsulConfig(token="s3cr3t")
        assert "s3cr3t" not in repr(config)
        assert config.token is not None
        assert config.token.get_secret_value() == "s3cr3t"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_toml(self, mock_toml_files, monkeypatch: pytest.MonkeyPatch) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'\n[store]\nbackend = 'redis'\n"})
        monkeypatch.setenv("RESOLVE_VARS_ENV", "nonexistent")

        settings = get_settings()

        assert settings.app_name == "test"
        assert settings.store.backend == "redis"

    def test_settings_cached(self, mock_toml_files, monkeypatch: pytest.MonkeyPatch) -> None:
        mock_toml_files({"default.toml": "app_name = 'cached'"})
        monkeypatch.setenv("RESOLVE_VARS_ENV", "nonexistent")

        assert get_settings() is get_settings()

    def test_reload_settings_clears_cache(
        self, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_dir = mock_toml_files({"default.toml": "app_name = 'original'"})
        monkeypatch.setenv("RESOLVE_VARS_ENV", "nonexistent")
        assert get_settings().app_name == "original"

        (config_dir / "default.toml").write_text("app_name = 'updated'")

        assert reload_settings().app_name == "updated"


class TestEnvironmentVariableOverrides:
    """Tests for environment variable configuration overrides."""

    def test_top_level_override(
        self, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "debug = false"})
        monkeypatch.setenv("RESOLVE_VARS_ENV", "nonexistent")
        monkeypatch.setenv("RESOLVE_VARS_DEBUG", "true")

        assert get_settings().debug is True

    def test_nested_override(
        self, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nested values can be overridden with double underscore."""
        mock_toml_files({"default.toml": "[store.consul]\nhost = 'from-toml'\nport = 8501\n"})
        monkeypatch.setenv("RESOLVE_VARS_ENV", "nonexistent")
        monkeypatch.setenv("RESOLVE_VARS_STORE__CONSUL__HOST", "from-env")
        monkeypatch.setenv("RESOLVE_VARS_STORE__CONSUL__TOKEN", "acl-token")

        settings = get_settings()

        assert settings.store.consul.host == "from-env"
        assert settings.store.consul.port == 8501
        assert settings.store.consul.token is not None
        assert settings.store.consul.token.get_secret_value() == "acl-token"
