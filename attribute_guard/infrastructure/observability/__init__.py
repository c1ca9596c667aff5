"""Observability infrastructure: structured logging with structlog.

Usage:
    from attribute_guard.infrastructure.observability import configure_structlog

    # At startup
    configure_structlog(environment="production")
"""

from attribute_guard.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = ["configure_structlog", "get_logger_for_service"]
