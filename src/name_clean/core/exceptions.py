class NameCleanError(Exception):
    """Base exception for name_clean failures."""


class InvalidArgumentError(NameCleanError, TypeError):
    """Raised when a public function receives an argument of the wrong type."""


class ConfigError(NameCleanError):
    """Raised when the configuration file is malformed."""
