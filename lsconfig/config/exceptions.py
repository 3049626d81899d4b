from __future__ import annotations


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when a configuration document cannot be parsed at all."""


class ConfigValidationError(ConfigError):
    """Raised when configuration fields have the wrong type or value."""


class ConfigIOError(ConfigError):
    """Raised when a configuration file exists but cannot be read."""


class ThemeError(ConfigError):
    """Raised when an icon theme document cannot be used."""


__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConfigIOError",
    "ThemeError",
]
