"""Structlog logger setup.

Importing the package never touches logging configuration. Module loggers
are lazy structlog proxies that render with whatever configuration the
host application installs; applications without their own setup can call
``configure_logging()`` once at startup.

Usage:
    from translatable.logging import configure_logging, get_module_logger

    # Optional, at application startup
    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Any, Optional

import structlog

from translatable.configuration import Settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """Install a structlog pipeline and a root stdlib handler.

    Args:
        log_level: Override for settings.LOG_LEVEL (DEBUG, INFO, WARNING, ...).
        is_production: Override for settings.is_production; selects JSON
            over console rendering.
        settings: Settings instance (default: from environment).

    Returns:
        Configured logger instance
    """
    settings = settings or Settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.get_logger()


def get_module_logger() -> Any:
    """Get a lazy logger for the calling module.

    Binds ``component`` (last module path segment) and ``module_path``,
    e.g. ``{"component": "registry", "module_path": "translatable.i18n.registry"}``.
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.get_logger()

    module = inspect.getmodule(current_frame.f_back)
    if module:
        return structlog.get_logger(
            component=module.__name__.split(".")[-1],
            module_path=module.__name__,
        )

    return structlog.get_logger(component="unknown")
