"""Guarded record port.

This module defines the capabilities a host record type must offer for the
guard to enforce locks on it. Any object satisfying the protocol works;
the bundled TrackedModel is one implementation.

Required:
- is_new_record(): True until the record has been persisted
- changed_attribute_names(): names whose value differs from the persisted snapshot
- add_validation_error(attribute, message): record a validation failure

Optional:
- id: identity used in diagnostic text
- logger: object with warning()/warn(), used by the Warn reaction
"""

from __future__ import annotations

from collections.abc import Set
from typing import Protocol, runtime_checkable


@runtime_checkable
class GuardedRecord(Protocol):
    """Protocol for records the guard can validate."""

    def is_new_record(self) -> bool:
        """Return True if the record has not been persisted yet."""
        ...

    def changed_attribute_names(self) -> Set[str]:
        """Return names of attributes changed since the last persisted state."""
        ...

    def add_validation_error(self, attribute: str, message: str) -> None:
        """Attach a validation error message to an attribute."""
        ...
