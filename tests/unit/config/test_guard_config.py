"""Unit tests for GuardConfig."""

import os
from unittest.mock import patch

import pytest

from attribute_guard.config import DEFAULT_GUARD_CONFIG, GuardConfig


class TestGuardConfigDefaults:
    """Tests for default configuration values."""

    def test_defaults(self) -> None:
        config = GuardConfig()
        assert config.locked_message == "is locked and cannot be changed"
        assert config.log_environment == "production"
        assert config.warn_to_stderr is True

    def test_default_constant(self) -> None:
        assert DEFAULT_GUARD_CONFIG == GuardConfig()

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_GUARD_CONFIG.locked_message = "x"  # type: ignore[misc]


class TestGuardConfigValidation:
    """Tests for __post_init__ validation."""

    def test_blank_message_rejected(self) -> None:
        with pytest.raises(ValueError, match="locked_message"):
            GuardConfig(locked_message="  ")

    def test_unknown_log_environment_rejected(self) -> None:
        with pytest.raises(ValueError, match="log_environment"):
            GuardConfig(log_environment="staging")


class TestGuardConfigFromEnvironment:
    """Tests for from_environment()."""

    def test_defaults_without_environment(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert GuardConfig.from_environment() == GuardConfig()

    def test_reads_environment(self) -> None:
        env = {
            "ATTRIBUTE_GUARD_LOCKED_MESSAGE": "is frozen",
            "ATTRIBUTE_GUARD_LOG_ENVIRONMENT": "Development",
            "ATTRIBUTE_GUARD_WARN_TO_STDERR": "false",
        }
        with patch.dict(os.environ, env, clear=True):
            config = GuardConfig.from_environment()
        assert config.locked_message == "is frozen"
        assert config.log_environment == "development"
        assert config.warn_to_stderr is False

    def test_unrecognised_bool_uses_default(self) -> None:
        with patch.dict(os.environ, {"ATTRIBUTE_GUARD_WARN_TO_STDERR": "maybe"}, clear=True):
            assert GuardConfig.from_environment().warn_to_stderr is True

    def test_invalid_environment_value_raises(self) -> None:
        with patch.dict(os.environ, {"ATTRIBUTE_GUARD_LOG_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValueError):
                GuardConfig.from_environment()
