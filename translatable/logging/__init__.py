"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
"""

from translatable.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
