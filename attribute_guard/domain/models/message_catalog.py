"""Validation message keys and their human-readable text.

A lock declaration may carry literal text or a MessageKey. Keys are resolved
through a MessageCatalog when the validation error is added, so the text can
be replaced (for example from configuration) without redeclaring locks.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

DEFAULT_LOCKED_TEXT = "is locked and cannot be changed"


@dataclass(frozen=True)
class MessageKey:
    """Symbolic reference to a catalog message.

    Attributes:
        key: Catalog key, e.g. "locked".
    """

    key: str

    def __post_init__(self) -> None:
        """Validate the key is usable."""
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValueError(f"MessageKey requires a non-blank key, got {self.key!r}")

    def __str__(self) -> str:
        return self.key


LOCKED = MessageKey("locked")


class MessageCatalog:
    """Registry of message texts keyed by MessageKey.key.

    Unknown keys resolve to the key itself with underscores replaced by
    spaces, so a missing entry still yields readable output.

    Example:
        >>> catalog = MessageCatalog()
        >>> catalog.resolve(LOCKED)
        'is locked and cannot be changed'
        >>> catalog.resolve("Custom text")
        'Custom text'
    """

    def __init__(self, messages: dict[str, str] | None = None) -> None:
        self._messages: dict[str, str] = {LOCKED.key: DEFAULT_LOCKED_TEXT}
        if messages:
            self._messages.update(messages)
        self._mutex = threading.Lock()

    def register(self, key: MessageKey | str, text: str) -> None:
        """Add or replace the text for a key.

        Args:
            key: The key (or its name) to register.
            text: Human-readable message text.
        """
        name = key.key if isinstance(key, MessageKey) else str(key)
        with self._mutex:
            self._messages = {**self._messages, name: str(text)}

    def resolve(self, message: MessageKey | str) -> str:
        """Turn a declared message into text.

        Args:
            message: Literal text or a MessageKey.

        Returns:
            The literal text unchanged, or the catalog text for the key.
        """
        if isinstance(message, MessageKey):
            text = self._messages.get(message.key)
            if text is None:
                return message.key.replace("_", " ")
            return text
        return message

    def keys(self) -> list[str]:
        """Return the registered keys in registration order."""
        return list(self._messages)
