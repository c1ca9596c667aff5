"""
Pytest configuration and shared fixtures for attribute guard tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Integration tests (guard through the pydantic host) go in tests/integration/
- Tests that need their own lock declarations use a fresh LockRegistry
  or define their model classes inside the test
"""

from collections.abc import Iterator

import pytest
import structlog

from attribute_guard.domain.models import MessageCatalog
from attribute_guard.domain.primitives import LockRegistry
from attribute_guard.domain.services import LOCKED_ATTRIBUTES_VALIDATOR
from attribute_guard.infrastructure.adapters import DEFAULT_RECORD_STORE


@pytest.fixture(autouse=True)
def isolate_shared_state() -> Iterator[None]:
    """Reset the record store, shared validator and structlog after each test."""
    catalog = LOCKED_ATTRIBUTES_VALIDATOR.catalog
    sink = LOCKED_ATTRIBUTES_VALIDATOR.fallback_sink
    LOCKED_ATTRIBUTES_VALIDATOR.catalog = MessageCatalog()
    yield
    LOCKED_ATTRIBUTES_VALIDATOR.catalog = catalog
    LOCKED_ATTRIBUTES_VALIDATOR.fallback_sink = sink
    DEFAULT_RECORD_STORE.clear()
    structlog.reset_defaults()


@pytest.fixture
def registry() -> LockRegistry:
    """Provide an empty lock registry."""
    return LockRegistry()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from attribute_guard import __version__

    return __version__
