"""Structlog configuration and logger setup.

Importing the engine never configures logging: module loggers are lazy
structlog proxies that pick up whatever configuration the host installs.
Hosts that want the engine's defaults call ``configure_logging()`` once at
startup.

Usage:
    from localization.logging import configure_logging, get_module_logger

    # Configure logging at host startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from localization.configuration import Settings, get_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _silence_for_tests() -> None:
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Install the engine's structlog configuration.

    Under pytest all output is suppressed. Otherwise events carry callsite
    parameters and the bound language context, rendered as JSON in
    production and through the console renderer elsewhere.

    Args:
        log_level: Override for the log level. Defaults to settings.LOG_LEVEL.
        is_production: Override for production mode. Defaults to
            settings.is_production.
        settings: Settings to read defaults from (default: get_settings()).
            Only consulted for values not given explicitly.

    Returns:
        Logger for the "localization" namespace.
    """
    if _is_test_environment():
        _silence_for_tests()
        return structlog.stdlib.get_logger("localization")

    if log_level is None or is_production is None:
        settings = settings or get_settings()
        log_level = log_level or settings.LOG_LEVEL
        is_production = settings.is_production if is_production is None else is_production

    renderer = (
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger("localization")


def get_module_logger() -> BoundLogger:
    """Get a logger named after the calling module.

    Carries ``component`` (last dotted part) and ``module_path`` so events
    can be filtered per engine component. The logger resolves against the
    structlog configuration in effect when it first logs.

    Example:
        # In localization/i18n/store.py
        logger = get_module_logger()
        # context: {"component": "store", "module_path": "localization.i18n.store"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.stdlib.get_logger("localization", component="unknown")

    # Initial values keep the proxy lazy; bind() would freeze the current config.
    module_name = module.__name__
    return structlog.stdlib.get_logger(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
