"""Logging configuration for Inkmark PDF."""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: str = "INFO") -> None:
    """Send application logs to stderr at the given level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Avoid stacking handlers when called more than once
    for handler in root_logger.handlers:
        if getattr(handler, "_inkmark", False):
            return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._inkmark = True
    root_logger.addHandler(handler)
