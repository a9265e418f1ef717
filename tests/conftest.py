"""Shared test fixtures for the resolve-vars test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from resolve_vars.stores.inmemory import InMemoryKeyValueStore


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(
    test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Callable[[dict[str, str]], Path]:
    """Factory fixture to create TOML files and point the loader at them.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> Path:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)
        monkeypatch.setenv("RESOLVE_VARS_CONFIG_DIR", str(test_config_dir))
        return test_config_dir

    return _create_toml_files


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """In-memory store seeded with a couple of keys."""
    return InMemoryKeyValueStore({"k1": "v1", "k2": "v2", "shared/key": "shared"})


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and loaded TOML before and after each test."""
    from resolve_vars.config import get_settings
    from resolve_vars.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})
