"""Errors raised while building the nozzle configuration.

Every stage of the configuration pipeline raises a subclass of
`ConfigError`; the `stage` attribute tells which one aborted startup.
"""

from typing import Literal

Stage = Literal["environment", "validation", "identity", "event_filter"]


class ConfigError(Exception):
    """Base class for fatal configuration errors."""

    stage: Stage


class EnvironmentParseError(ConfigError):
    """Exception raised when an environment variable is missing or malformed."""

    stage = "environment"


class SettingsValidationError(ConfigError):
    """Exception raised when loaded settings violate a cross-field invariant."""

    stage = "validation"


class MetadataResolutionError(ConfigError):
    """Exception raised when the project id cannot be resolved."""

    stage = "identity"


class FilterFileError(ConfigError):
    """Exception raised when the event filter file cannot be read."""

    stage = "event_filter"


class FilterParseError(ConfigError):
    """Exception raised when the event filter file is not valid filter JSON."""

    stage = "event_filter"
