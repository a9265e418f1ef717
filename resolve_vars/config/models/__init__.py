"""Configuration model exports.

    from resolve_vars.config.models import StoreConfig, ObservabilityConfig
"""

from resolve_vars.config.models.observability import LoggingConfig, ObservabilityConfig
from resolve_vars.config.models.storage import ConsulConfig, RedisStoreConfig, StoreConfig

__all__ = [
    "ConsulConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "RedisStoreConfig",
    "StoreConfig",
]
