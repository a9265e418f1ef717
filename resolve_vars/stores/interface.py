"""KeyValueStore abstract interface.

The only capability the Resolver consumes from a remote store: read a key,
write a key. Implementations wrap their backend failures in
``RemoteStoreError`` subclasses.
"""

from abc import ABC, abstractmethod
from types import TracebackType


class KeyValueStore(ABC):
    """Abstract interface for a remote key-value store."""

    @abstractmethod
    async def read(self, key: str) -> str | None:
        """Read a key, returning None when it is unset."""
        pass

    @abstractmethod
    async def write(self, key: str, value: str) -> None:
        """Write a value to a key."""
        pass

    async def close(self) -> None:
        """Release transport resources held by the store."""
        return None

    async def __aenter__(self) -> "KeyValueStore":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
