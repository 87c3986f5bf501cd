"""
Logging infrastructure.

Console output for the storefront and console API loggers. Handlers live on
the two package loggers only; module loggers propagate to them.
"""
import logging

from storefront.settings import LoggingSettings

PACKAGE_LOGGERS = ("storefront", "console_api")


def _attach_handler(logger: logging.Logger, log_format: str) -> None:
    for handler in logger.handlers:
        if getattr(handler, "_storefront_console", False):
            handler.setFormatter(logging.Formatter(log_format))
            return
    handler = logging.StreamHandler()
    handler._storefront_console = True
    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance; output goes through the handler on its package logger
    """
    return logging.getLogger(name)


def configure_logging(settings: LoggingSettings) -> None:
    """Install the console handler and level from settings.

    Safe to call more than once; the existing handler is reused.
    """
    level = settings.level.upper()
    for name in PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        _attach_handler(package_logger, settings.format)
        package_logger.setLevel(level)
