"""
Tests for process configuration.
"""

import pytest

from flight_tracker.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ConfigurationError,
    Settings,
)


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})

        assert settings.host == DEFAULT_HOST == "127.0.0.1"
        assert settings.port == DEFAULT_PORT == 8080
        assert settings.log_level == "INFO"
        assert settings.strict_chain is False
        assert settings.max_chain_steps is None

    def test_overrides(self) -> None:
        settings = Settings.from_env(
            {
                "FLIGHT_TRACKER_HOST": "0.0.0.0",
                "FLIGHT_TRACKER_PORT": "9000",
                "FLIGHT_TRACKER_LOG_LEVEL": "debug",
                "FLIGHT_TRACKER_STRICT_CHAIN": "yes",
                "FLIGHT_TRACKER_MAX_CHAIN_STEPS": "50",
            }
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.strict_chain is True
        assert settings.max_chain_steps == 50

    def test_reads_os_environ(self, monkeypatch) -> None:
        monkeypatch.setenv("FLIGHT_TRACKER_PORT", "8181")

        assert Settings.from_env().port == 8181

    @pytest.mark.parametrize(
        "variable,value",
        [
            ("FLIGHT_TRACKER_PORT", "http"),
            ("FLIGHT_TRACKER_PORT", "70000"),
            ("FLIGHT_TRACKER_PORT", "-1"),
            ("FLIGHT_TRACKER_LOG_LEVEL", "LOUD"),
            ("FLIGHT_TRACKER_STRICT_CHAIN", "maybe"),
            ("FLIGHT_TRACKER_MAX_CHAIN_STEPS", "-5"),
        ],
    )
    def test_invalid_values(self, variable, value) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_env({variable: value})

        assert exc_info.value.variable == variable
        assert isinstance(exc_info.value, ValueError)

    def test_settings_are_frozen(self) -> None:
        settings = Settings()

        with pytest.raises(AttributeError):
            settings.port = 1  # type: ignore[misc]
