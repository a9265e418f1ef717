"""Resolver: remote variables resolved in bulk and cached locally.

Most uses resolve many variables at once with a task, then query them
synchronously:

    resolver = Resolver(ConsulKeyValueStore())

    resolve = resolver.task({"db_url": "service/db/url", "bucket": "service/bucket"})
    await resolve()

    db_url = resolver.var("db_url")

The Resolver is plain caller-owned state. Build one and pass it to whatever
needs the variables.
"""

import asyncio
from collections.abc import Callable, Coroutine, Mapping
from types import MappingProxyType
from typing import Any

from resolve_vars.models import VariableEntry
from resolve_vars.observability.logging import get_logger
from resolve_vars.stores.interface import KeyValueStore

logger = get_logger(__name__)

DEFAULT_TASK_NAME = "resolve-vars"

ResolvedValues = dict[str, str | None]
DoneCallback = Callable[[ResolvedValues | None, BaseException | None], None]


class ResolveTask:
    """A bulk resolution built but not yet run.

    Every run reads every registered key again; results are never memoized
    at the task level. Fetched values land in the resolver cache as each
    read completes.
    """

    def __init__(
        self,
        resolver: "Resolver",
        variables: Mapping[str, str],
        name: str = DEFAULT_TASK_NAME,
    ) -> None:
        self._resolver = resolver
        self._variables = dict(variables)
        self.name = name

    @property
    def variables(self) -> Mapping[str, str]:
        """Registered local name to remote key pairs."""
        return MappingProxyType(self._variables)

    async def run(self) -> ResolvedValues:
        """Fetch all registered variables concurrently.

        Returns:
            Local name to value for every registered variable

        Raises:
            RemoteStoreError: The first error raised by any read. Reads that
                already completed keep their cached values; reads still in
                flight are not cancelled.
        """
        names = list(self._variables)
        logger.info("variables_resolving", task=self.name, count=len(names))

        try:
            values = await asyncio.gather(
                *(
                    self._resolver.get(name, self._variables[name])
                    for name in names
                )
            )
        except Exception as e:
            logger.error(
                "variables_resolve_failed",
                task=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.info("variables_resolved", task=self.name, count=len(names))
        return dict(zip(names, values, strict=True))

    def __call__(self) -> Coroutine[Any, Any, ResolvedValues]:
        return self.run()

    def start(self, on_done: DoneCallback | None = None) -> "asyncio.Task[ResolvedValues]":
        """Schedule the task on the running event loop.

        Args:
            on_done: Called with ``(values, None)`` on success or
                ``(None, error)`` on failure once the run finishes

        Returns:
            The scheduled asyncio task
        """
        task = asyncio.get_running_loop().create_task(self.run(), name=self.name)

        if on_done is not None:

            def _report(finished: "asyncio.Task[ResolvedValues]") -> None:
                if finished.cancelled():
                    on_done(None, asyncio.CancelledError())
                    return
                error = finished.exception()
                if error is not None:
                    on_done(None, error)
                else:
                    on_done(finished.result(), None)

            task.add_done_callback(_report)

        return task

    def __repr__(self) -> str:
        return f"ResolveTask(name={self.name!r}, variables={self._variables!r})"


class Resolver:
    """Resolves and updates variables held in a remote key-value store.

    Keeps the last observed value of every variable in a local cache keyed
    by local name. Entries are never evicted.
    """

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize an empty resolver over ``store``."""
        self._store = store
        self._vars: dict[str, VariableEntry] = {}

    @property
    def store(self) -> KeyValueStore:
        """The remote store this resolver reads and writes."""
        return self._store

    def task(
        self,
        variables: Mapping[str, str],
        name: str = DEFAULT_TASK_NAME,
    ) -> ResolveTask:
        """Register variables and build a task that resolves them.

        Each local name gets a fresh, unresolved cache entry recording its
        remote key. Nothing is fetched until the task runs.

        Args:
            variables: Local name to remote key. Use ``{k: k for k in keys}``
                when names and keys are the same.
            name: Task name, for schedulers that run named units of work
        """
        for local_name, remote_key in variables.items():
            self._vars[local_name] = VariableEntry(
                local_name=local_name,
                remote_key=remote_key,
            )
        return ResolveTask(self, variables, name=name)

    def var(self, name: str) -> str | None:
        """Return the cached value of ``name``, or None if never resolved.

        Never touches the remote store.
        """
        entry = self._vars.get(name)
        return entry.value if entry is not None else None

    def has(self, name: str) -> bool:
        """Whether ``name`` is tracked by this resolver."""
        return name in self._vars

    def entry(self, name: str) -> VariableEntry | None:
        """Return a copy of the cache entry for ``name``."""
        entry = self._vars.get(name)
        return entry.model_copy() if entry is not None else None

    def variables(self) -> ResolvedValues:
        """Snapshot of every cached value by local name."""
        return {name: entry.value for name, entry in self._vars.items()}

    async def get(self, local_name: str, remote_key: str | None = None) -> str | None:
        """Fetch one variable from the store and cache it.

        Args:
            local_name: Name to cache the value under
            remote_key: Key to read; defaults to ``local_name``

        Returns:
            The fetched value, None when the key is unset

        Raises:
            RemoteStoreError: If the read fails; the cache is left untouched
        """
        key = remote_key if remote_key is not None else local_name

        try:
            value = await self._store.read(key)
        except Exception as e:
            logger.error(
                "variable_fetch_failed",
                name=local_name,
                key=key,
                error=str(e),
            )
            raise

        self._vars[local_name] = VariableEntry(
            local_name=local_name,
            remote_key=key,
            value=value,
            resolved=True,
        )
        logger.debug("variable_fetched", name=local_name, key=key, found=value is not None)
        return value

    async def set_by_key(self, name: str, value: str) -> None:
        """Write ``value`` to remote key ``name`` and cache it under ``name``."""
        await self.set_by_path(name, name, value)

    async def set_by_path(self, local_name: str, remote_key: str, value: str) -> None:
        """Write ``value`` to ``remote_key`` and cache it under ``local_name``.

        Raises:
            RemoteStoreError: If the write fails; the cache is left untouched
        """
        try:
            await self._store.write(remote_key, value)
        except Exception as e:
            logger.error(
                "variable_write_failed",
                name=local_name,
                key=remote_key,
                error=str(e),
            )
            raise

        self._vars[local_name] = VariableEntry(
            local_name=local_name,
            remote_key=remote_key,
            value=value,
            resolved=True,
        )
        logger.debug("variable_written", name=local_name, key=remote_key)
