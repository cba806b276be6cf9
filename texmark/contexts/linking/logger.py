"""
Linking context logger.

Provides logging interface for linking context with automatic [link] prefix.
All linking modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[link]"


def _log_debug(message: str) -> None:
    """Log debug message with [link] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
