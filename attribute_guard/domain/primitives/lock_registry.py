"""Per-type registry of locked attributes.

Each model type that participates in the guard owns a mapping from
attribute name to LockSpec. A subtype starts from a snapshot of its nearest
registered ancestor's mapping, taken when the subtype is registered, and
evolves independently afterwards:

- declarations on the ancestor made later do not reach existing subtypes
- declarations on the subtype never reach the ancestor or siblings

Mutations are serialized by a lock and replace the type's mapping
wholesale, so readers always see a consistent snapshot without locking.

Usage:
    registry = LockRegistry()
    registry.register_type(Account)
    registry.declare(Account, ["owner_id"])
    registry.policy_for(Account, "owner_id")  # LockSpec(...)
"""

from __future__ import annotations

import threading
import weakref
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from attribute_guard.domain.errors.configuration import ConfigurationError
from attribute_guard.domain.models.lock_spec import LockSpec
from attribute_guard.domain.models.message_catalog import LOCKED, MessageKey
from attribute_guard.domain.models.reaction_mode import (
    AddError,
    ReactionMode,
    coerce_mode,
)

log = structlog.get_logger()

_EMPTY: Mapping[str, LockSpec] = {}


def flatten_names(names: Any) -> list[str]:
    """Flatten nested sequences of attribute names into strings.

    Strings are taken as single names and bytes are decoded as UTF-8
    single names. Lists, tuples, sets and other iterables are walked
    recursively. Any other value is converted with str(). Duplicates are kept in first-seen order.

    Args:
        names: A name or an arbitrarily nested iterable of names.

    Returns:
        Flat list of attribute names.
    """
    if isinstance(names, str):
        return [names]
    if isinstance(names, (bytes, bytearray)):
        return [names.decode("utf-8")]
    if isinstance(names, Iterable):
        flat: list[str] = []
        for name in names:
            flat.extend(flatten_names(name))
        return flat
    return [str(names)]


class LockRegistry:
    """Registry mapping model types to their locked attribute specs."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        # Weak keys so types defined at runtime can still be collected.
        self._locks: weakref.WeakKeyDictionary[type, Mapping[str, LockSpec]] = (
            weakref.WeakKeyDictionary()
        )
        self._mutex = threading.Lock()

    def register_type(self, cls: type) -> None:
        """Register a type, snapshotting its nearest registered ancestor.

        Re-registering an already registered type is a no-op so its own
        declarations are never discarded.

        Args:
            cls: The model type to register.
        """
        with self._mutex:
            if cls in self._locks:
                return
            self._locks[cls] = dict(self._ancestor_locks(cls))

    def is_registered(self, cls: type) -> bool:
        """Return True if the type has its own registry entry."""
        return cls in self._locks

    def declare(
        self,
        cls: type,
        attributes: Any,
        message: MessageKey | str = LOCKED,
        mode: ReactionMode | str | Any = None,
    ) -> None:
        """Lock attributes on a type.

        Later declarations for the same attribute name replace the earlier
        spec while keeping the name's original position.

        Args:
            cls: The model type declaring the locks.
            attributes: Attribute names, possibly nested in sequences.
            message: Validation message, literal text or a MessageKey.
            mode: Reaction mode or shorthand; defaults to AddError.

        Raises:
            ConfigurationError: If no names are given, a name is blank,
                the message is not text or a MessageKey, or the mode
                is not recognised.
        """
        names = flatten_names(attributes)
        if not names:
            raise ConfigurationError(
                "lock_attributes requires at least one attribute name"
            )
        if any(not name.strip() for name in names):
            raise ConfigurationError(f"Attribute names must not be blank: {names!r}")
        if isinstance(message, str):
            message = str(message)
        elif not isinstance(message, MessageKey):
            raise ConfigurationError(
                "Lock message must be text or a MessageKey, "
                f"got {type(message).__name__}"
            )
        spec = LockSpec(
            message=message,
            mode=AddError() if mode is None else coerce_mode(mode),
        )

        with self._mutex:
            current = self._locks.get(cls)
            if current is None:
                current = self._ancestor_locks(cls)
            updated = dict(current)
            for name in names:
                updated[name] = spec
            self._locks[cls] = updated

        log.debug(
            "attribute_locks_declared",
            model=cls.__name__,
            attributes=names,
            mode=type(spec.mode).__name__,
        )

    def locked_attribute_names(self, cls: type) -> list[str]:
        """Return the names locked on a type, inherited names first."""
        return list(self._locks.get(cls, _EMPTY))

    def policy_for(self, cls: type, attribute: str) -> LockSpec | None:
        """Return the LockSpec for an attribute, or None if it is not locked."""
        return self._locks.get(cls, _EMPTY).get(str(attribute))

    def entries(self, cls: type) -> list[tuple[str, LockSpec]]:
        """Return (name, spec) pairs for a type in registry order."""
        return list(self._locks.get(cls, _EMPTY).items())

    def _ancestor_locks(self, cls: type) -> Mapping[str, LockSpec]:
        for ancestor in cls.__mro__[1:]:
            locks = self._locks.get(ancestor)
            if locks is not None:
                return locks
        return _EMPTY


LOCK_REGISTRY = LockRegistry()
