"""Fatal locked attribute error.

Raised only by the RaiseFatal reaction. It propagates out of the validation
call instead of being recorded as a validation failure, so code relying on
"locked means impossible" gets an abort rather than an invalid record.
"""

from __future__ import annotations

from typing import Any

from attribute_guard.domain.exceptions import AttributeGuardError


class LockedAttributeError(AttributeGuardError):
    """Raised when a locked attribute configured to raise has been changed.

    Attributes:
        attribute: Name of the changed locked attribute.
        type_name: Name of the record's type.
        record_id: Identity of the record, if it has one.
    """

    def __init__(
        self,
        message: str,
        attribute: str | None = None,
        type_name: str | None = None,
        record_id: Any = None,
    ) -> None:
        super().__init__(message)
        self.attribute = attribute
        self.type_name = type_name
        self.record_id = record_id
