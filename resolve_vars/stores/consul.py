"""Consul implementation of KeyValueStore.

Talks to a Consul agent's HTTP KV endpoint:

- ``GET  /v1/kv/{key}`` returns ``[{"Key": ..., "Value": <base64>|null}]``,
  404 when unset
- ``PUT  /v1/kv/{key}`` stores the request body, answers ``true``/``false``
"""

import base64
from urllib.parse import quote

import httpx

from resolve_vars.config.models.storage import ConsulConfig
from resolve_vars.errors import StoreConnectionError, StoreResponseError
from resolve_vars.observability.logging import get_logger
from resolve_vars.stores.interface import KeyValueStore

logger = get_logger(__name__)

KV_PATH = "/v1/kv/"
TOKEN_HEADER = "X-Consul-Token"


class ConsulKeyValueStore(KeyValueStore):
    """KeyValueStore backed by the Consul KV HTTP API.

    Attributes:
        base_url: Consul agent URL, e.g. http://127.0.0.1:8500
    """

    def __init__(
        self,
        config: ConsulConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            config: Consul connection settings (defaults to a local agent)
            client: HTTP client to use; the store creates and owns one
                when not given
        """
        self._config = config or ConsulConfig()
        self.base_url = self._config.base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._config.timeout)

    def _url(self, key: str) -> str:
        """Build the KV URL for a key."""
        return f"{self.base_url}{KV_PATH}{quote(key.lstrip('/'), safe='/')}"

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._config.token is not None:
            headers[TOKEN_HEADER] = self._config.token.get_secret_value()
        return headers

    def _params(self, **extra: str) -> dict[str, str]:
        params = dict(extra)
        if self._config.datacenter:
            params["dc"] = self._config.datacenter
        return params

    async def _request(
        self,
        method: str,
        key: str,
        *,
        params: dict[str, str],
        content: bytes | None = None,
    ) -> httpx.Response:
        """Send a KV request, wrapping transport failures."""
        try:
            return await self._client.request(
                method,
                self._url(key),
                headers=self._headers(),
                params=params,
                content=content,
            )
        except httpx.HTTPError as e:
            logger.error(
                "consul_request_error",
                method=method,
                key=key,
                error=str(e),
            )
            raise StoreConnectionError(
                f"Consul {method} {key} failed: {e}", cause=e
            ) from e

    async def read(self, key: str) -> str | None:
        """Read a key, returning None when it is unset or holds a null value."""
        response = await self._request("GET", key, params=self._params())

        if response.status_code == 404:
            logger.debug("consul_key_not_found", key=key)
            return None

        if response.status_code != 200:
            logger.error(
                "consul_read_error",
                key=key,
                status_code=response.status_code,
                error=response.text,
            )
            raise StoreResponseError(
                f"Consul read of {key} failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            encoded = response.json()[0]["Value"]
            value = (
                None
                if encoded is None
                else base64.b64decode(encoded, validate=True).decode(self._config.encoding)
            )
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("consul_read_malformed", key=key, error=str(e))
            raise StoreResponseError(
                f"Consul read of {key} returned a malformed body: {e}",
                status_code=response.status_code,
                cause=e,
            ) from e

        logger.debug("consul_key_read", key=key, found=value is not None)
        return value

    async def write(self, key: str, value: str) -> None:
        """Write a value to a key."""
        response = await self._request(
            "PUT",
            key,
            params=self._params(),
            content=value.encode(self._config.encoding),
        )

        if response.status_code != 200:
            logger.error(
                "consul_write_error",
                key=key,
                status_code=response.status_code,
                error=response.text,
            )
            raise StoreResponseError(
                f"Consul write of {key} failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        # Consul answers false when the write was not applied
        if response.text.strip() != "true":
            logger.error("consul_write_rejected", key=key, body=response.text)
            raise StoreResponseError(
                f"Consul rejected write of {key}: {response.text}",
                status_code=response.status_code,
            )

        logger.debug("consul_key_written", key=key, size=len(value))

    async def close(self) -> None:
        """Close the HTTP client if this store created it."""
        if self._owns_client:
            await self._client.aclose()
