"""
Math context logger.

Provides logging interface for math context with automatic [math] prefix.
All math modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from texmark.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[math]"


def setup_math_logger(log_dir: Optional[Path], math_engine: str, png_engine: str) -> Optional[Path]:
    """
    Setup logger for math context.

    Args:
        log_dir: Directory for this session (None for console only)
        math_engine: Configured MathML engine, recorded in the provenance header
        png_engine: Configured PNG engine, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="math",
        log_dir=log_dir,
        extra_provenance={"MathML engine": math_engine, "PNG engine": png_engine},
    )


def _log_info(message: str) -> None:
    """Log info message with [math] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [math] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [math] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [math] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
