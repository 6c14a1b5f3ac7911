"""
One-time PyMuPDF setup performed explicitly at application start.
"""
import logging

import fitz  # PyMuPDF

from inkmark.config import AppConfig

logger = logging.getLogger(__name__)

_engine_config = None


def initialize_engine(config: AppConfig) -> bool:
    """
    Apply the rendering engine settings from the configuration.

    Args:
        config: Application configuration

    Returns:
        True if the engine was configured by this call, False if it had
        already been initialized
    """
    global _engine_config

    if _engine_config is not None:
        logger.debug("Rendering engine already initialized")
        return False

    fitz.TOOLS.set_aa_level(config.antialias_level)
    fitz.TOOLS.mupdf_display_errors(config.show_mupdf_errors)

    _engine_config = config
    logger.info(
        "PyMuPDF %s initialized (antialias level %d)",
        fitz.VersionBind,
        config.antialias_level,
    )
    return True


def is_initialized() -> bool:
    """Check whether initialize_engine has run."""
    return _engine_config is not None
