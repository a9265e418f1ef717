"""Observability: structured logging via structlog."""

from resolve_vars.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
