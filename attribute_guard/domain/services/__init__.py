"""Domain services for attribute guard."""

from attribute_guard.domain.services.locked_attributes_validator import (
    LOCKED_ATTRIBUTES_VALIDATOR,
    LockedAttributesValidator,
    write_to_stderr,
)

__all__ = [
    "LOCKED_ATTRIBUTES_VALIDATOR",
    "LockedAttributesValidator",
    "write_to_stderr",
]
