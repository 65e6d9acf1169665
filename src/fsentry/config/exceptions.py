"""Configuration errors."""


class ConfigError(Exception):
    """Raised when configuration data cannot be processed."""
