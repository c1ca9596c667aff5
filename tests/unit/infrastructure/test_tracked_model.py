"""Unit tests for TrackedModel: lifecycle, dirty tracking and validation."""

from typing import Any

import pytest

from attribute_guard.domain.errors import RecordInvalidError
from attribute_guard.infrastructure.adapters import (
    DEFAULT_RECORD_STORE,
    RecordStore,
    TrackedModel,
)


class Note(TrackedModel):
    title: str
    tags: list[str] = []


def require_title(record: Any) -> None:
    if not record.title.strip():
        record.add_validation_error("title", "can't be blank")


class CheckedNote(Note):
    pass


CheckedNote.validates_with(require_title)


class TestLifecycle:
    """Tests for new/persisted state and saving."""

    def test_new_record(self) -> None:
        note = Note(title="draft")
        assert note.is_new_record() is True
        assert note.persisted is False
        assert note.id is None

    def test_save_assigns_id_and_persists(self) -> None:
        note = Note(title="draft").save()
        assert note.is_new_record() is False
        assert note.id == 1
        assert DEFAULT_RECORD_STORE.get(Note, 1) == {"id": 1, "title": "draft", "tags": []}

    def test_ids_are_per_model(self) -> None:
        assert Note.create(title="a").id == 1
        assert Note.create(title="b").id == 2
        assert CheckedNote.create(title="c").id == 1

    def test_find(self) -> None:
        Note.create(title="draft")
        found = Note.find(1)
        assert found is not None
        assert found.title == "draft"
        assert found.is_new_record() is False
        assert found.changes == {}

    def test_find_missing(self) -> None:
        assert Note.find(99) is None

    def test_update(self) -> None:
        note = Note.create(title="draft")
        note.update(title="final")
        assert DEFAULT_RECORD_STORE.get(Note, note.id)["title"] == "final"
        assert note.changes == {}

    def test_reload_discards_changes(self) -> None:
        note = Note.create(title="draft")
        note.title = "scratch"
        note.reload()
        assert note.title == "draft"
        assert note.changes == {}

    def test_reload_unsaved_record(self) -> None:
        with pytest.raises(LookupError):
            Note(title="draft").reload()

    def test_custom_store(self) -> None:
        store = RecordStore()

        class StoredNote(Note):
            record_store = store

        StoredNote.create(title="x")
        assert store.count(StoredNote) == 1
        assert DEFAULT_RECORD_STORE.count(StoredNote) == 0


class TestDirtyTracking:
    """Tests for changes and changed_attribute_names."""

    def test_new_record_changes_are_set_fields(self) -> None:
        note = Note(title="draft")
        assert note.changed_attribute_names() == {"title"}
        assert note.changes == {"title": (None, "draft")}

    def test_no_changes_after_save(self) -> None:
        note = Note.create(title="draft")
        assert note.changed_attribute_names() == set()

    def test_assignment_is_a_change(self) -> None:
        note = Note.create(title="draft")
        note.title = "final"
        assert note.changes == {"title": ("draft", "final")}

    def test_assigning_same_value_is_not_a_change(self) -> None:
        note = Note.create(title="draft")
        note.title = "draft"
        assert note.changed_attribute_names() == set()

    def test_in_place_mutation_is_a_change(self) -> None:
        note = Note.create(title="draft", tags=["a"])
        note.tags.append("b")
        assert note.changes == {"tags": (["a"], ["a", "b"])}

    def test_changes_applied(self) -> None:
        note = Note.create(title="draft")
        note.title = "final"
        note.changes_applied()
        assert note.changed_attribute_names() == set()


class TestValidation:
    """Tests for validators and errors."""

    def test_valid_without_validators(self) -> None:
        assert Note(title="").is_valid() is True

    def test_validator_adds_errors(self) -> None:
        note = CheckedNote(title=" ")
        assert note.is_valid() is False
        assert note.errors["title"] == ["can't be blank"]

    def test_errors_cleared_between_passes(self) -> None:
        note = CheckedNote(title=" ")
        note.is_valid()
        note.title = "ok"
        assert note.is_valid() is True
        assert not note.errors

    def test_save_raises_when_invalid(self) -> None:
        note = CheckedNote(title=" ")
        with pytest.raises(RecordInvalidError, match="Title can't be blank") as exc_info:
            note.save()
        assert exc_info.value.record is note
        assert note.is_new_record() is True

    def test_validators_inherited(self) -> None:
        class SubNote(CheckedNote):
            pass

        assert SubNote.record_validators == (require_title,)
        assert Note.record_validators == ()

    def test_validates_with_ignores_duplicates(self) -> None:
        class OnceNote(Note):
            pass

        OnceNote.validates_with(require_title)
        OnceNote.validates_with(require_title)
        assert OnceNote.record_validators == (require_title,)

    def test_logger_bound_to_model(self) -> None:
        note = Note(title="draft")
        assert callable(note.logger.warning)
