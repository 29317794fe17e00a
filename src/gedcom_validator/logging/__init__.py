"""
Logging package for ``gedcom_validator``.

Use ``get_logger(<module name>)`` in modules to inherit shared handlers and,
when file logging is enabled, write to a module-specific log file.
"""

from .logger import get_logger, list_active_loggers

__all__ = [
    "get_logger",
    "list_active_loggers",
]
