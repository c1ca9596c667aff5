"""Guard primitives: the lock registry and per-instance unlock scopes."""

from attribute_guard.domain.primitives.lock_registry import (
    LOCK_REGISTRY,
    LockRegistry,
    flatten_names,
)
from attribute_guard.domain.primitives.unlock_scope import (
    UNLOCKED_ATTRIBUTES_ATTR,
    ScopedUnlock,
    clear,
    is_unlocked,
    unlock,
    unlocked_names,
)

__all__ = [
    "LOCK_REGISTRY",
    "LockRegistry",
    "ScopedUnlock",
    "UNLOCKED_ATTRIBUTES_ATTR",
    "clear",
    "flatten_names",
    "is_unlocked",
    "unlock",
    "unlocked_names",
]
