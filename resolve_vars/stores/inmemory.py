"""In-memory implementation of KeyValueStore."""

from collections.abc import Mapping

from resolve_vars.stores.interface import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of KeyValueStore for testing and development.

    Counts reads and writes so callers can check how often the store was hit.
    """

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        """Initialize storage, optionally seeded with ``data``."""
        self._data: dict[str, str] = dict(data or {})
        self.reads = 0
        self.writes = 0

    async def read(self, key: str) -> str | None:
        """Read a key, returning None when it is unset."""
        self.reads += 1
        return self._data.get(key)

    async def write(self, key: str, value: str) -> None:
        """Write a value to a key."""
        self.writes += 1
        self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        """Return a copy of everything stored."""
        return dict(self._data)
