"""Redis implementation of KeyValueStore.

Plain string keys, optionally namespaced with a prefix:
- {key_prefix}{key} - variable value
"""

import redis.asyncio as redis

from resolve_vars.config.models.storage import RedisStoreConfig
from resolve_vars.errors import StoreConnectionError
from resolve_vars.observability.logging import get_logger
from resolve_vars.stores.interface import KeyValueStore

logger = get_logger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """KeyValueStore backed by Redis GET/SET."""

    def __init__(
        self,
        client: redis.Redis,
        config: RedisStoreConfig | None = None,
    ) -> None:
        """Initialize Redis key-value store.

        Args:
            client: Redis client instance; should decode responses to str
            config: Redis store configuration (uses defaults if not provided)
        """
        self._client = client
        self._config = config or RedisStoreConfig()
        self._prefix = self._config.key_prefix
        self._owns_client = False

    @classmethod
    def from_config(cls, config: RedisStoreConfig) -> "RedisKeyValueStore":
        """Create a store with its own client from a Redis URL."""
        client = redis.Redis.from_url(config.url, decode_responses=True)
        store = cls(client, config)
        store._owns_client = True
        return store

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def read(self, key: str) -> str | None:
        """Read a key, returning None when it is unset."""
        try:
            value = await self._client.get(self._key(key))
        except redis.RedisError as e:
            logger.error("redis_read_error", key=key, error=str(e))
            raise StoreConnectionError(f"Failed to read {key}: {e}", cause=e) from e

        if isinstance(value, bytes):
            value = value.decode("utf-8")
        logger.debug("redis_key_read", key=key, found=value is not None)
        return value

    async def write(self, key: str, value: str) -> None:
        """Write a value to a key."""
        try:
            await self._client.set(self._key(key), value)
        except redis.RedisError as e:
            logger.error("redis_write_error", key=key, error=str(e))
            raise StoreConnectionError(f"Failed to write {key}: {e}", cause=e) from e

        logger.debug("redis_key_written", key=key, size=len(value))

    async def close(self) -> None:
        """Close the Redis connection pool if this store created it."""
        if self._owns_client:
            await self._client.aclose()
