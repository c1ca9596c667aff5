"""Reference host adapters: tracked pydantic records and their store."""

from attribute_guard.infrastructure.adapters.guarded_model import GuardedModel
from attribute_guard.infrastructure.adapters.record_store import (
    DEFAULT_RECORD_STORE,
    RecordStore,
)
from attribute_guard.infrastructure.adapters.tracked_model import (
    RecordValidator,
    TrackedModel,
)
from attribute_guard.infrastructure.adapters.validation_errors import ValidationErrors

__all__ = [
    "DEFAULT_RECORD_STORE",
    "GuardedModel",
    "RecordStore",
    "RecordValidator",
    "TrackedModel",
    "ValidationErrors",
]
