"""Configuration loading for resolve-vars.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from resolve_vars.config import get_settings

    settings = get_settings()
    backend = settings.store.backend
"""

from functools import lru_cache

from resolve_vars.config.loader import load_config
from resolve_vars.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process.

    Precedence, lowest first: model defaults, config/default.toml,
    config/{RESOLVE_VARS_ENV}.toml, RESOLVE_VARS_* environment variables.
    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    config_dict = load_config()
    set_toml_config(config_dict)

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
