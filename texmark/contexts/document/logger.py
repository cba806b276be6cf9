"""
Document context logger.

Provides logging interface for document context with automatic [document] prefix.
All document modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[document]"


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [document] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
