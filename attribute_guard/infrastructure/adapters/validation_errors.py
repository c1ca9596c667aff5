"""Per-attribute validation error collection for tracked records."""

from __future__ import annotations

from collections.abc import Iterator


class ValidationErrors:
    """Ordered validation messages keyed by attribute name.

    Example:
        >>> errors = ValidationErrors()
        >>> errors.add("owner_id", "is locked and cannot be changed")
        >>> errors["owner_id"]
        ['is locked and cannot be changed']
        >>> errors["name"]
        []
        >>> errors.full_messages()
        ['Owner id is locked and cannot be changed']
    """

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, attribute: str, message: str) -> None:
        """Append a message for an attribute."""
        self._messages.setdefault(str(attribute), []).append(message)

    def clear(self) -> None:
        """Remove all messages."""
        self._messages.clear()

    def attributes(self) -> list[str]:
        """Return the attributes that have at least one message."""
        return list(self._messages)

    def full_messages(self) -> list[str]:
        """Return messages prefixed with the humanized attribute name."""
        return [
            f"{attribute.replace('_', ' ').capitalize()} {message}"
            for attribute, message in self
        ]

    def to_dict(self) -> dict[str, list[str]]:
        """Return a copy of the messages keyed by attribute."""
        return {
            attribute: list(messages) for attribute, messages in self._messages.items()
        }

    def __getitem__(self, attribute: str) -> list[str]:
        return list(self._messages.get(str(attribute), []))

    def __contains__(self, attribute: object) -> bool:
        return str(attribute) in self._messages

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for attribute, messages in self._messages.items():
            for message in messages:
                yield attribute, message

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._messages!r})"
