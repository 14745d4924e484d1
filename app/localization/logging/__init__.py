"""Structured logging infrastructure.

Centralized structlog configuration for the localization engine.

Public API:
    - configure_logging(): Initialize logging for the host application
    - get_module_logger(): Get a logger for the calling module
    - bind_language_context(): Context manager binding the active language

Example:
    from localization.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from localization.logging.context import bind_language_context
from localization.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_language_context",
]
