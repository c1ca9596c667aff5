"""Record validation failure raised by hosts on save."""

from __future__ import annotations

from typing import Any

from attribute_guard.domain.exceptions import AttributeGuardError


class RecordInvalidError(AttributeGuardError):
    """Raised when a record fails validation while being saved.

    Validation failures are the recoverable path: the record stays in
    memory with its errors attached, and the caller may revert the change
    or unlock the attribute deliberately and retry.

    Attributes:
        record: The record that failed validation.
    """

    def __init__(self, record: Any) -> None:
        self.record = record
        messages = "; ".join(record.errors.full_messages())
        super().__init__(f"Validation failed: {messages}")
