"""Remote store error hierarchy.

Every store implementation wraps backend-specific failures in one of these
errors. The Resolver itself never translates them; callers see exactly what
the store raised.
"""


class RemoteStoreError(Exception):
    """Base exception for all remote key-value store failures.

    The original backend exception, if any, is kept as ``cause``.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StoreConnectionError(RemoteStoreError):
    """Raised when the remote store cannot be reached.

    Examples:
        - Connection refused
        - Request timeout
        - Redis server unavailable
    """

    pass


class StoreResponseError(RemoteStoreError):
    """Raised when the remote store answers with an unexpected result.

    Examples:
        - Consul returned a 5xx status
        - ACL denied the request (403)
        - Consul answered ``false`` to a KV write
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
