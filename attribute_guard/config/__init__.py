"""Configuration module for attribute guard.

Available Configurations:
- GuardConfig: default message text, logging mode and warn fallback
"""

from attribute_guard.config.guard_config import (
    DEFAULT_GUARD_CONFIG,
    LOG_ENVIRONMENTS,
    GuardConfig,
)

__all__ = [
    "DEFAULT_GUARD_CONFIG",
    "GuardConfig",
    "LOG_ENVIRONMENTS",
]
