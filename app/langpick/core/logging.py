"""Structured logging for langpick.

Importing the library never configures logging. Library modules get lazy
structlog loggers that follow whatever configuration the host application
installs. Applications without their own setup can call configure_logging().

Usage:
    from langpick.core.logging import configure_logging, get_module_logger

    # Once, at application startup (optional)
    configure_logging()

    # In a library module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Optional

import structlog

from langpick.core.config import settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
):
    """Install a structlog pipeline for applications embedding langpick.

    Args:
        log_level: Log level name; defaults to settings.LOG_LEVEL.
        is_production: JSON output when True, console output otherwise;
            defaults to settings.is_production.

    Returns:
        Logger bound to the configured pipeline.
    """
    prod_mode = is_production if is_production is not None else settings.is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    level = (log_level or settings.LOG_LEVEL).upper()
    logging.getLogger("langpick").setLevel(getattr(logging, level, logging.INFO))
    return structlog.get_logger("langpick")


def get_module_logger():
    """Get a lazy logger carrying the calling module's name.

    The logger binds ``component`` (last module path segment) and
    ``module_path`` and resolves the structlog configuration on first use.
    """
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.rsplit(".", 1)[-1], module_path=module_name
    )
