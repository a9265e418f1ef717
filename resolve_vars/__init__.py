"""resolve-vars: variables stored outside the process, resolved in bulk.

Declare local names backed by remote keys (Consul by default), resolve them
all at once, then read them from a local cache.
"""

from resolve_vars.errors import RemoteStoreError, StoreConnectionError, StoreResponseError
from resolve_vars.models import VariableEntry
from resolve_vars.resolver import ResolveTask, Resolver

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "Resolver",
    "ResolveTask",
    "VariableEntry",
    "RemoteStoreError",
    "StoreConnectionError",
    "StoreResponseError",
]
