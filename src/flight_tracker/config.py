"""
Configuration module for the Flight Tracker.

Loads environment variables (optionally from a .env file) and provides
centralized process configuration: bind address, log level and the
chain reconstruction policy.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigurationError(ValueError):
    """Raised when an environment variable has an invalid value."""

    def __init__(self, variable: str, value: str, expected: str) -> None:
        self.variable = variable
        self.value = value
        message = f"Invalid value for {variable}: {value!r} (expected {expected})"
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, established once at start-up.

    Attributes:
        host: Bind address for the HTTP server.
        port: Bind port for the HTTP server.
        log_level: Root logger level name.
        strict_chain: Reject batches where a destination has two origins.
        max_chain_steps: Optional step budget for chain walks.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    strict_chain: bool = False
    max_chain_steps: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from FLIGHT_TRACKER_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigurationError: If a variable cannot be parsed.
        """
        env = os.environ if environ is None else environ

        log_level = env.get("FLIGHT_TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                "FLIGHT_TRACKER_LOG_LEVEL", log_level, "a logging level name"
            )

        max_steps_raw = env.get("FLIGHT_TRACKER_MAX_CHAIN_STEPS")
        max_chain_steps = None
        if max_steps_raw:
            max_chain_steps = _parse_int(
                "FLIGHT_TRACKER_MAX_CHAIN_STEPS", max_steps_raw, minimum=0
            )

        return cls(
            host=env.get("FLIGHT_TRACKER_HOST", DEFAULT_HOST),
            port=_parse_int(
                "FLIGHT_TRACKER_PORT",
                env.get("FLIGHT_TRACKER_PORT", str(DEFAULT_PORT)),
                minimum=0,
                maximum=65535,
            ),
            log_level=log_level,
            strict_chain=_parse_bool(
                "FLIGHT_TRACKER_STRICT_CHAIN",
                env.get("FLIGHT_TRACKER_STRICT_CHAIN", "false"),
            ),
            max_chain_steps=max_chain_steps,
        )


def _parse_int(
    variable: str,
    value: str,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(variable, value, "an integer") from None
    if minimum is not None and parsed < minimum:
        raise ConfigurationError(variable, value, f"an integer >= {minimum}")
    if maximum is not None and parsed > maximum:
        raise ConfigurationError(variable, value, f"an integer <= {maximum}")
    return parsed


def _parse_bool(variable: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(variable, value, "true or false")
