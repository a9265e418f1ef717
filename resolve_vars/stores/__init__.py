"""Remote key-value stores.

- KeyValueStore: the read/write capability the Resolver consumes
- InMemoryKeyValueStore: testing and development
- ConsulKeyValueStore: Consul KV over HTTP
- RedisKeyValueStore: Redis GET/SET
"""

from resolve_vars.stores.consul import ConsulKeyValueStore
from resolve_vars.stores.factory import create_store
from resolve_vars.stores.inmemory import InMemoryKeyValueStore
from resolve_vars.stores.interface import KeyValueStore
from resolve_vars.stores.redis import RedisKeyValueStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "ConsulKeyValueStore",
    "RedisKeyValueStore",
    "create_store",
]
