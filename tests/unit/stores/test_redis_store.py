"""Unit tests for RedisKeyValueStore with a mocked client."""

from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from resolve_vars.config.models.storage import RedisStoreConfig
from resolve_vars.errors import StoreConnectionError
from resolve_vars.stores.redis import RedisKeyValueStore


@pytest.fixture
def client() -> AsyncMock:
    """Mock Redis client."""
    return AsyncMock()


class TestRedisKeyValueStore:
    """Tests for Redis read/write."""

    @pytest.mark.asyncio
    async def test_read(self, client: AsyncMock) -> None:
        client.get.return_value = "v1"
        store = RedisKeyValueStore(client)

        assert await store.read("k1") == "v1"
        client.get.assert_awaited_once_with("k1")

    @pytest.mark.asyncio
    async def test_read_bytes_decoded(self, client: AsyncMock) -> None:
        client.get.return_value = b"v1"
        assert await RedisKeyValueStore(client).read("k1") == "v1"

    @pytest.mark.asyncio
    async def test_read_missing(self, client: AsyncMock) -> None:
        client.get.return_value = None
        assert await RedisKeyValueStore(client).read("missing") is None

    @pytest.mark.asyncio
    async def test_key_prefix(self, client: AsyncMock) -> None:
        store = RedisKeyValueStore(client, RedisStoreConfig(key_prefix="vars:"))

        await store.write("k1", "v1")

        client.set.assert_awaited_once_with("vars:k1", "v1")

    @pytest.mark.asyncio
    async def test_read_error_wrapped(self, client: AsyncMock) -> None:
        client.get.side_effect = redis.ConnectionError("down")

        with pytest.raises(StoreConnectionError) as exc_info:
            await RedisKeyValueStore(client).read("k1")

        assert isinstance(exc_info.value.cause, redis.ConnectionError)

    @pytest.mark.asyncio
    async def test_write_error_wrapped(self, client: AsyncMock) -> None:
        client.set.side_effect = redis.TimeoutError("slow")

        with pytest.raises(StoreConnectionError):
            await RedisKeyValueStore(client).write("k1", "v1")

    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self, client: AsyncMock) -> None:
        await RedisKeyValueStore(client).close()
        client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close_owned_client(
        self, client: AsyncMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(redis.Redis, "from_url", lambda url, **kwargs: client)

        store = RedisKeyValueStore.from_config(RedisStoreConfig(url="redis://cache:6379/1"))
        await store.close()

        client.aclose.assert_awaited_once()
