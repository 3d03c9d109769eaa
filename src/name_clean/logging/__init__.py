"""
Logging package for ``name_clean``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers and,
when file logging is enabled, write to a module-specific log file.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    reset_logging,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "reset_logging",
]
