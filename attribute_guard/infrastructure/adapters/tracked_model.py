"""Tracked pydantic records: persistence lifecycle, dirty tracking, validation.

TrackedModel is the reference host for the attribute guard. It gives a
pydantic model the capabilities the guard relies on:

- lifecycle: is_new_record() is True until the first successful save()
- dirty tracking: changes and changed_attribute_names() compare current
  field values with the snapshot taken at the last save
- validation: validators registered with validates_with() run on
  is_valid(); their messages collect in errors

Records persist into an in-memory RecordStore.

Usage:
    class Note(TrackedModel):
        title: str

    note = Note.create(title="draft")
    note.title = "final"
    note.changes  # {"title": ("draft", "final")}
    note.save()
"""

from __future__ import annotations

from collections.abc import Callable
from copy import deepcopy
from typing import Any, ClassVar, Self

import structlog
from pydantic import BaseModel, ConfigDict, PrivateAttr

from attribute_guard.domain.errors.record_invalid import RecordInvalidError
from attribute_guard.infrastructure.adapters.record_store import (
    DEFAULT_RECORD_STORE,
    RecordStore,
)
from attribute_guard.infrastructure.adapters.validation_errors import ValidationErrors
from attribute_guard.infrastructure.observability.logging import get_logger_for_service

log = structlog.get_logger()

RecordValidator = Callable[[Any], None]


class TrackedModel(BaseModel):
    """Pydantic model with a persistence lifecycle and change tracking.

    Attributes:
        id: Assigned by the record store on first save.
        record_validators: Validators run by is_valid(), inherited by subclasses.
        record_store: Store that save() writes to.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None

    record_validators: ClassVar[tuple[RecordValidator, ...]] = ()
    record_store: ClassVar[RecordStore] = DEFAULT_RECORD_STORE

    _persisted: bool = PrivateAttr(default=False)
    _snapshot: dict[str, Any] = PrivateAttr(default_factory=dict)
    _errors: ValidationErrors = PrivateAttr(default_factory=ValidationErrors)

    @classmethod
    def validates_with(cls, validator: RecordValidator) -> None:
        """Register a validator to run whenever a record of this type is validated.

        Registering the same validator twice on a type is a no-op. The
        validator is called with the record and reports problems through
        ``record.errors`` (or by raising).
        """
        if validator in cls.record_validators:
            return
        cls.record_validators = (*cls.record_validators, validator)

    @classmethod
    def create(cls, **fields: Any) -> Self:
        """Build a record and save it.

        Raises:
            RecordInvalidError: If the new record fails validation.
        """
        return cls(**fields).save()

    @classmethod
    def find(cls, record_id: Any) -> Self | None:
        """Load a persisted record by id, or return None."""
        data = cls.record_store.get(cls, record_id)
        if data is None:
            return None
        record = cls.model_validate(data)
        record._persisted = True
        record.changes_applied()
        return record

    @property
    def persisted(self) -> bool:
        """True once the record has been saved."""
        return self._persisted

    @property
    def errors(self) -> ValidationErrors:
        """Validation errors from the last validation pass."""
        return self._errors

    @property
    def changes(self) -> dict[str, tuple[Any, Any]]:
        """Changed fields mapped to (previous, current) values."""
        return {
            name: (self._snapshot.get(name), getattr(self, name))
            for name in self._changed_field_names()
        }

    @property
    def logger(self) -> Any:
        """Logger bound to this record's type."""
        return get_logger_for_service(type(self).__name__, component="record")

    def is_new_record(self) -> bool:
        """Return True if the record has never been saved."""
        return not self._persisted

    def changed_attribute_names(self) -> set[str]:
        """Return names of fields that differ from the last saved state."""
        return set(self._changed_field_names())

    def changes_applied(self) -> None:
        """Take the current field values as the new saved state."""
        self._snapshot = {
            name: deepcopy(getattr(self, name)) for name in type(self).model_fields
        }

    def add_validation_error(self, attribute: str, message: str) -> None:
        """Attach a validation error to an attribute."""
        self._errors.add(attribute, message)

    def is_valid(self) -> bool:
        """Run all registered validators and report whether errors were added.

        Validators may raise instead of adding errors; such exceptions
        propagate to the caller.
        """
        self._errors.clear()
        for validator in type(self).record_validators:
            validator(self)
        return not self._errors

    def save(self) -> Self:
        """Validate and persist the record.

        Returns:
            The record itself.

        Raises:
            RecordInvalidError: If validation adds any errors.
        """
        if not self.is_valid():
            raise RecordInvalidError(self)
        if self.id is None:
            self.id = self.record_store.next_id(type(self))
        self.record_store.put(type(self), self.id, self.model_dump())
        created = not self._persisted
        self._persisted = True
        self.changes_applied()
        log.debug(
            "record_saved",
            model=type(self).__name__,
            record_id=self.id,
            created=created,
        )
        return self

    def update(self, **fields: Any) -> Self:
        """Assign fields and save.

        Raises:
            RecordInvalidError: If validation adds any errors.
        """
        for name, value in fields.items():
            setattr(self, name, value)
        return self.save()

    def reload(self) -> Self:
        """Discard unsaved changes by reloading the stored state."""
        data = self.record_store.get(type(self), self.id)
        if data is None:
            raise LookupError(
                f"{type(self).__name__} with id {self.id} is not persisted"
            )
        for name, value in data.items():
            setattr(self, name, value)
        self.changes_applied()
        self._errors.clear()
        return self

    def _changed_field_names(self) -> list[str]:
        if not self._persisted:
            return [
                name
                for name in type(self).model_fields
                if name in self.model_fields_set
            ]
        return [
            name
            for name in type(self).model_fields
            if getattr(self, name) != self._snapshot.get(name)
        ]
