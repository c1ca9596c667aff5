"""Validator enforcing attribute locks on persisted records.

Runs once per validation pass. New records are skipped: locks protect
existing data, not initial construction. For a persisted record every
registered lock is checked in registry order; an attribute that changed
and is not unlocked gets its reaction applied. All reactions fire in one
pass, except that RaiseFatal aborts the pass immediately.

Usage:
    validator = LockedAttributesValidator()
    validator.validate(record)
"""

from __future__ import annotations

import sys
from typing import Any

import structlog

from attribute_guard.domain.errors.misuse import MisuseError
from attribute_guard.domain.models.message_catalog import MessageCatalog
from attribute_guard.domain.models.reaction_mode import DiagnosticSink, ReactionContext
from attribute_guard.domain.ports.guarded_record import GuardedRecord
from attribute_guard.domain.primitives.lock_registry import LOCK_REGISTRY, LockRegistry
from attribute_guard.domain.primitives.unlock_scope import is_unlocked

log = structlog.get_logger()


def write_to_stderr(message: str) -> None:
    """Default fallback sink: one line on the process's stderr."""
    print(message, file=sys.stderr)


class LockedAttributesValidator:
    """Checks changed locked attributes and applies their reactions.

    Attributes:
        registry: Lock registry consulted for each record type.
        catalog: Resolves MessageKey messages for AddError.
        fallback_sink: Receives Warn lines for records without a logger.
    """

    def __init__(
        self,
        registry: LockRegistry | None = None,
        catalog: MessageCatalog | None = None,
        fallback_sink: DiagnosticSink | None = None,
    ) -> None:
        self.registry = registry if registry is not None else LOCK_REGISTRY
        self.catalog = catalog if catalog is not None else MessageCatalog()
        self.fallback_sink = (
            fallback_sink if fallback_sink is not None else write_to_stderr
        )

    def configure(
        self,
        catalog: MessageCatalog | None = None,
        fallback_sink: DiagnosticSink | None = None,
    ) -> None:
        """Replace the catalog and/or fallback sink in place.

        Hosts register the shared validator instance at class definition
        time, so configuration swaps collaborators instead of the instance.
        """
        if catalog is not None:
            self.catalog = catalog
        if fallback_sink is not None:
            self.fallback_sink = fallback_sink

    def validate(self, record: GuardedRecord) -> None:
        """Apply lock reactions for every changed, locked attribute.

        Args:
            record: The record being validated.

        Raises:
            MisuseError: If the record has no is_new_record predicate.
            LockedAttributeError: If a RaiseFatal attribute changed.
        """
        is_new_record = getattr(record, "is_new_record", None)
        if not callable(is_new_record):
            raise MisuseError(
                f"guard requires lifecycle state capability: "
                f"{type(record).__name__} has no is_new_record()"
            )
        if is_new_record():
            return

        entries = self.registry.entries(type(record))
        if not entries:
            return

        changed = record.changed_attribute_names()
        context = ReactionContext(
            catalog=self.catalog, fallback_sink=self.fallback_sink
        )
        for attribute, spec in entries:
            if attribute not in changed or is_unlocked(record, attribute):
                continue
            log.debug(
                "locked_attribute_changed",
                model=type(record).__name__,
                record_id=getattr(record, "id", None),
                attribute=attribute,
                mode=type(spec.mode).__name__,
            )
            spec.mode.react(record, attribute, spec.message, context)

    def __call__(self, record: Any) -> None:
        self.validate(record)


LOCKED_ATTRIBUTES_VALIDATOR = LockedAttributesValidator()
