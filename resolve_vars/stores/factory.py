"""Store construction from configuration."""

from resolve_vars.config.models.storage import StoreConfig
from resolve_vars.observability.logging import get_logger
from resolve_vars.stores.consul import ConsulKeyValueStore
from resolve_vars.stores.inmemory import InMemoryKeyValueStore
from resolve_vars.stores.interface import KeyValueStore
from resolve_vars.stores.redis import RedisKeyValueStore

logger = get_logger(__name__)


def create_store(config: StoreConfig | None = None) -> KeyValueStore:
    """Create the key-value store selected by ``config.backend``.

    Raises:
        ValueError: If the backend is unknown
    """
    config = config or StoreConfig()

    if config.backend == "consul":
        logger.info("store_created", backend="consul", url=config.consul.base_url)
        return ConsulKeyValueStore(config.consul)

    if config.backend == "redis":
        logger.info("store_created", backend="redis")
        return RedisKeyValueStore.from_config(config.redis)

    if config.backend == "inmemory":
        logger.info("store_created", backend="inmemory")
        return InMemoryKeyValueStore()

    raise ValueError(f"Unknown store backend: {config.backend}")
