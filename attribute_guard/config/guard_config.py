"""Attribute guard configuration.

Defines the defaults the guard falls back to, with environment variable
overrides for deployment tuning.

Environment Variables:
- ATTRIBUTE_GUARD_LOCKED_MESSAGE: Text of the default "locked" message
  (default: "is locked and cannot be changed")
- ATTRIBUTE_GUARD_LOG_ENVIRONMENT: "production" (JSON logs) or
  "development" (console logs) (default: production)
- ATTRIBUTE_GUARD_WARN_TO_STDERR: Whether warn-mode lines for records
  without a logger go to stderr; when false they are logged through
  structlog instead (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from attribute_guard.domain.models.message_catalog import DEFAULT_LOCKED_TEXT

LOG_ENVIRONMENTS = ("production", "development")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognised.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class GuardConfig:
    """Configuration for the attribute guard.

    Attributes:
        locked_message: Text for the default "locked" message key.
        log_environment: Logging mode passed to configure_structlog.
        warn_to_stderr: Whether the fallback warn sink writes to stderr.
    """

    locked_message: str = DEFAULT_LOCKED_TEXT
    log_environment: str = "production"
    warn_to_stderr: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.locked_message or not self.locked_message.strip():
            raise ValueError("locked_message must not be blank")
        if self.log_environment not in LOG_ENVIRONMENTS:
            raise ValueError(
                f"log_environment must be one of: {', '.join(LOG_ENVIRONMENTS)}, "
                f"got {self.log_environment!r}"
            )

    @classmethod
    def from_environment(cls) -> GuardConfig:
        """Create config from environment variables with defaults.

        Returns:
            GuardConfig with values from environment or defaults.

        Raises:
            ValueError: If an environment value fails validation.
        """
        return cls(
            locked_message=os.environ.get(
                "ATTRIBUTE_GUARD_LOCKED_MESSAGE", DEFAULT_LOCKED_TEXT
            ),
            log_environment=os.environ.get(
                "ATTRIBUTE_GUARD_LOG_ENVIRONMENT", "production"
            ).strip().lower(),
            warn_to_stderr=_get_bool_env("ATTRIBUTE_GUARD_WARN_TO_STDERR", True),
        )


# Built-in defaults
DEFAULT_GUARD_CONFIG = GuardConfig()
