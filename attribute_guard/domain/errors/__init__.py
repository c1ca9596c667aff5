"""Domain errors for attribute guard.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from AttributeGuardError.
"""

from attribute_guard.domain.errors.configuration import ConfigurationError
from attribute_guard.domain.errors.locked_attribute import LockedAttributeError
from attribute_guard.domain.errors.misuse import MisuseError
from attribute_guard.domain.errors.record_invalid import RecordInvalidError

__all__: list[str] = [
    "ConfigurationError",
    "LockedAttributeError",
    "MisuseError",
    "RecordInvalidError",
]
