"""Remote key-value store configuration models."""

from typing import Literal

from pydantic import BaseModel, Field, SecretStr

BackendType = Literal["inmemory", "consul", "redis"]


class ConsulConfig(BaseModel):
    """Consul agent connection settings."""

    scheme: Literal["http", "https"] = Field(default="http", description="URL scheme")
    host: str = Field(default="127.0.0.1", description="Consul agent host")
    port: int = Field(default=8500, ge=1, le=65535, description="Consul agent port")
    token: SecretStr | None = Field(
        default=None,
        description="ACL token sent as X-Consul-Token",
    )
    datacenter: str | None = Field(
        default=None,
        description="Datacenter to query (agent's own datacenter when unset)",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds",
    )
    encoding: str = Field(default="utf-8", description="Encoding of stored values")

    @property
    def base_url(self) -> str:
        """Agent base URL, e.g. http://127.0.0.1:8500."""
        return f"{self.scheme}://{self.host}:{self.port}"


class RedisStoreConfig(BaseModel):
    """Redis connection settings."""

    url: str = Field(default="redis://localhost:6379/0", description="Redis URL")
    key_prefix: str = Field(
        default="",
        description="Prefix prepended to every key, e.g. 'vars:'",
    )


class StoreConfig(BaseModel):
    """Selects and configures the remote key-value store."""

    backend: BackendType = Field(default="consul", description="Backend type")
    consul: ConsulConfig = Field(
        default_factory=ConsulConfig,
        description="Consul backend settings",
    )
    redis: RedisStoreConfig = Field(
        default_factory=RedisStoreConfig,
        description="Redis backend settings",
    )
