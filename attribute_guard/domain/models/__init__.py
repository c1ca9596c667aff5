"""Domain models for attribute guard."""

from attribute_guard.domain.models.lock_spec import LockSpec
from attribute_guard.domain.models.message_catalog import (
    DEFAULT_LOCKED_TEXT,
    LOCKED,
    MessageCatalog,
    MessageKey,
)
from attribute_guard.domain.models.reaction_mode import (
    AddError,
    Custom,
    RaiseFatal,
    ReactionContext,
    ReactionMode,
    Warn,
    coerce_mode,
    diagnostic_text,
)

__all__ = [
    "AddError",
    "Custom",
    "DEFAULT_LOCKED_TEXT",
    "LOCKED",
    "LockSpec",
    "MessageCatalog",
    "MessageKey",
    "RaiseFatal",
    "ReactionContext",
    "ReactionMode",
    "Warn",
    "coerce_mode",
    "diagnostic_text",
]
