"""Bootstrap module for one-call resolver setup.

Handles:
- Loading configuration from TOML files and environment
- Configuring structured logging
- Creating the configured store (consul, redis or in-memory)

Example usage:

    from resolve_vars.bootstrap import bootstrap

    resolver, store = bootstrap()
    async with store:
        await resolver.task({"db_url": "service/db/url"})()
        db_url = resolver.var("db_url")
"""

from resolve_vars.config import Settings, get_settings
from resolve_vars.observability.logging import get_logger, setup_logging
from resolve_vars.resolver import Resolver
from resolve_vars.stores.factory import create_store
from resolve_vars.stores.interface import KeyValueStore

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> tuple[Resolver, KeyValueStore]:
    """Build a Resolver over the configured store.

    Args:
        settings: Settings to use (default: loaded via get_settings())

    Returns:
        Tuple of (Resolver, store). The caller owns the store and closes it.
    """
    settings = settings or get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level="DEBUG" if settings.debug else log_config.level,
        format=log_config.format,
        redact_secrets=log_config.redact_secrets,
    )

    store = create_store(settings.store)
    logger.info(
        "resolver_bootstrapped",
        app_name=settings.app_name,
        backend=settings.store.backend,
    )
    return Resolver(store), store
