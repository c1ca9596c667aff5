"""Per-instance unlock scopes.

A record's unlocked attributes live on the record itself as either None
(nothing unlocked, the default) or a non-empty frozenset of names. Two ways
to unlock:

- latch: unlock() merges names into the set until clear() is called
- scoped: ScopedUnlock saves the current set, adds names for the duration
  of a with-block and restores the saved set on every exit path

Nested scopes restore exactly the enclosing scope's set. A restored set
that is empty collapses back to None.

Usage:
    with ScopedUnlock(record, ["owner_id"]):
        record.owner_id = 2
        record.save()
"""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import Any

UNLOCKED_ATTRIBUTES_ATTR = "_unlocked_attributes"


def unlocked_names(instance: Any) -> frozenset[str] | None:
    """Return the instance's unlocked names, or None if nothing is unlocked."""
    return getattr(instance, UNLOCKED_ATTRIBUTES_ATTR, None)


def _store(instance: Any, names: frozenset[str] | None) -> None:
    setattr(instance, UNLOCKED_ATTRIBUTES_ATTR, names or None)


def unlock(instance: Any, attributes: Iterable[str]) -> None:
    """Merge names into the instance's unlocked set until cleared.

    An empty name sequence leaves the instance untouched.
    """
    names = frozenset(attributes)
    if not names:
        return
    _store(instance, (unlocked_names(instance) or frozenset()) | names)


def clear(instance: Any) -> None:
    """Discard every unlock on the instance, regardless of nesting."""
    _store(instance, None)


def is_unlocked(instance: Any, attribute: str) -> bool:
    """Return True if the attribute is currently unlocked on the instance."""
    names = unlocked_names(instance)
    return names is not None and str(attribute) in names


class ScopedUnlock:
    """Context manager unlocking attributes for the duration of a block.

    The set active on entry is restored on exit whether the block returns
    normally or raises; exceptions are never suppressed.

    Attributes:
        _instance: The record being unlocked.
        _names: Names added to the unlocked set inside the block.
        _saved: Sets active on each entry, innermost last. The same
            object may be entered again while already active.
    """

    def __init__(self, instance: Any, attributes: Iterable[str]) -> None:
        self._instance = instance
        self._names = frozenset(attributes)
        self._saved: list[frozenset[str] | None] = []

    def __enter__(self) -> Any:
        """Unlock the names and return the instance."""
        saved = unlocked_names(self._instance)
        self._saved.append(saved)
        if self._names:
            _store(self._instance, (saved or frozenset()) | self._names)
        return self._instance

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        """Restore the set that was active on entry.

        Returns:
            False - exceptions from the block always propagate.
        """
        _store(self._instance, self._saved.pop())
        return False
