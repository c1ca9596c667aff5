"""Reaction modes for changed locked attributes.

A reaction mode decides what happens when validation finds a locked
attribute that changed on a persisted record and is not unlocked. The set
of modes is closed:

- AddError: add a validation error with the declared message (default)
- Warn: emit a diagnostic line, validation still succeeds
- RaiseFatal: abort validation with LockedAttributeError
- Custom: hand the record and attribute name to a callback

Declarations may use the shorthands "error", "warn", "raise" or a plain
callable; coerce_mode() turns them into a variant once, at declaration time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from attribute_guard.domain.errors.configuration import ConfigurationError
from attribute_guard.domain.errors.locked_attribute import LockedAttributeError
from attribute_guard.domain.models.message_catalog import MessageCatalog, MessageKey

DiagnosticSink = Callable[[str], None]
CustomCallback = Callable[[Any, str], object]


def diagnostic_text(record: Any, attribute: str) -> str:
    """Build the diagnostic line used by Warn and RaiseFatal.

    Args:
        record: The record whose attribute changed.
        attribute: Name of the changed attribute.

    Returns:
        Text naming the attribute, the record type and the record id.
    """
    return (
        f"Changed locked attribute {attribute} on {type(record).__name__} "
        f"with id {getattr(record, 'id', None)}"
    )


@dataclass(frozen=True)
class ReactionContext:
    """Collaborators available to a reaction.

    Attributes:
        catalog: Resolves MessageKey messages to text.
        fallback_sink: Receives warnings when the record has no logger.
    """

    catalog: MessageCatalog
    fallback_sink: DiagnosticSink


class ReactionMode(ABC):
    """Base class of the closed set of reaction modes."""

    @abstractmethod
    def react(
        self,
        record: Any,
        attribute: str,
        message: MessageKey | str,
        context: ReactionContext,
    ) -> None:
        """Apply the reaction to a changed locked attribute."""


@dataclass(frozen=True)
class AddError(ReactionMode):
    """Add a validation error keyed by the attribute (default mode)."""

    def react(
        self,
        record: Any,
        attribute: str,
        message: MessageKey | str,
        context: ReactionContext,
    ) -> None:
        record.add_validation_error(attribute, context.catalog.resolve(message))


@dataclass(frozen=True)
class Warn(ReactionMode):
    """Emit a warning and let validation succeed.

    The record's ``logger`` is used when it offers ``warning`` or ``warn``;
    otherwise the line goes to the context's fallback sink.
    """

    def react(
        self,
        record: Any,
        attribute: str,
        message: MessageKey | str,
        context: ReactionContext,
    ) -> None:
        text = diagnostic_text(record, attribute)
        logger = getattr(record, "logger", None)
        emit = getattr(logger, "warning", None) or getattr(logger, "warn", None)
        if callable(emit):
            emit(text)
        else:
            context.fallback_sink(text)


@dataclass(frozen=True)
class RaiseFatal(ReactionMode):
    """Abort validation by raising LockedAttributeError."""

    def react(
        self,
        record: Any,
        attribute: str,
        message: MessageKey | str,
        context: ReactionContext,
    ) -> None:
        raise LockedAttributeError(
            diagnostic_text(record, attribute),
            attribute=attribute,
            type_name=type(record).__name__,
            record_id=getattr(record, "id", None),
        )


@dataclass(frozen=True)
class Custom(ReactionMode):
    """Invoke a callback with (record, attribute).

    The callback owns every side effect; its return value is ignored.

    Attributes:
        callback: Callable receiving the record and the attribute name.
    """

    callback: CustomCallback

    def __post_init__(self) -> None:
        if not callable(self.callback):
            raise ConfigurationError(
                f"Custom reaction requires a callable, got {self.callback!r}"
            )

    def react(
        self,
        record: Any,
        attribute: str,
        message: MessageKey | str,
        context: ReactionContext,
    ) -> None:
        self.callback(record, attribute)


_SHORTHANDS: dict[str, ReactionMode] = {
    "error": AddError(),
    "warn": Warn(),
    "raise": RaiseFatal(),
}


def coerce_mode(mode: ReactionMode | str | CustomCallback) -> ReactionMode:
    """Turn a declared mode into a ReactionMode variant.

    Args:
        mode: A ReactionMode instance, a variant class without fields
              (AddError, Warn, RaiseFatal), one of the shorthands
              "error", "warn", "raise", or a callable.

    Returns:
        The matching ReactionMode.

    Raises:
        ConfigurationError: If the mode is not recognised.
    """
    if isinstance(mode, ReactionMode):
        return mode
    if isinstance(mode, type):
        if issubclass(mode, ReactionMode) and mode not in (Custom, ReactionMode):
            return mode()
        raise ConfigurationError(f"Unsupported lock mode class: {mode.__name__}")
    if isinstance(mode, str):
        try:
            return _SHORTHANDS[mode]
        except KeyError:
            raise ConfigurationError(
                f"Unknown lock mode {mode!r}; expected one of: {', '.join(_SHORTHANDS)}"
            ) from None
    if callable(mode):
        return Custom(mode)
    raise ConfigurationError(f"Unsupported lock mode: {mode!r}")
