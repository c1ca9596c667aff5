"""
Attribute Guard - lock attributes of persisted records against change

Declare attributes as locked on a model type, and any change to them on an
already-persisted record is reported at validation time unless the change
happens inside an explicit unlock.

Usage:
    from attribute_guard import GuardedModel

    class Account(GuardedModel):
        owner_id: int

    Account.lock_attributes("owner_id")
"""

from attribute_guard.domain.entities import AttributeGuardMixin
from attribute_guard.domain.errors import (
    ConfigurationError,
    LockedAttributeError,
    MisuseError,
    RecordInvalidError,
)
from attribute_guard.domain.exceptions import AttributeGuardError
from attribute_guard.domain.models import (
    LOCKED,
    AddError,
    Custom,
    LockSpec,
    MessageCatalog,
    MessageKey,
    RaiseFatal,
    ReactionMode,
    Warn,
)
from attribute_guard.domain.primitives import LOCK_REGISTRY, LockRegistry
from attribute_guard.domain.services import (
    LOCKED_ATTRIBUTES_VALIDATOR,
    LockedAttributesValidator,
)
from attribute_guard.infrastructure.adapters import GuardedModel, TrackedModel

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "AddError",
    "AttributeGuardError",
    "AttributeGuardMixin",
    "ConfigurationError",
    "Custom",
    "GuardedModel",
    "LOCKED",
    "LOCKED_ATTRIBUTES_VALIDATOR",
    "LOCK_REGISTRY",
    "LockRegistry",
    "LockSpec",
    "LockedAttributeError",
    "LockedAttributesValidator",
    "MessageCatalog",
    "MessageKey",
    "MisuseError",
    "RaiseFatal",
    "ReactionMode",
    "RecordInvalidError",
    "TrackedModel",
    "Warn",
]
