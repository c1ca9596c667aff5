"""Apply a GuardConfig to logging and the shared validator."""

from __future__ import annotations

import structlog

from attribute_guard.config.guard_config import GuardConfig
from attribute_guard.domain.models.message_catalog import LOCKED, MessageCatalog
from attribute_guard.domain.services.locked_attributes_validator import (
    LOCKED_ATTRIBUTES_VALIDATOR,
    LockedAttributesValidator,
    write_to_stderr,
)
from attribute_guard.infrastructure.observability import configure_structlog

log = structlog.get_logger()


def structlog_sink(message: str) -> None:
    """Fallback warn sink that logs through structlog instead of stderr."""
    structlog.get_logger().warning(message)


def configure(
    config: GuardConfig | None = None,
    validator: LockedAttributesValidator = LOCKED_ATTRIBUTES_VALIDATOR,
) -> MessageCatalog:
    """Configure logging and the validator from a GuardConfig.

    Args:
        config: Configuration to apply; read from the environment if omitted.
        validator: Validator to configure (default: the shared instance
                   hosts register at class definition).

    Returns:
        The message catalog installed on the validator.
    """
    if config is None:
        config = GuardConfig.from_environment()

    configure_structlog(environment=config.log_environment)

    catalog = validator.catalog
    catalog.register(LOCKED, config.locked_message)
    validator.configure(
        fallback_sink=write_to_stderr if config.warn_to_stderr else structlog_sink,
    )
    log.debug(
        "attribute_guard_configured",
        log_environment=config.log_environment,
        warn_to_stderr=config.warn_to_stderr,
    )
    return catalog
