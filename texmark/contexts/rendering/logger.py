"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from texmark.contexts.math.config import MathOptions
from texmark.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path], options: MathOptions) -> Optional[Path]:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and the active math options.

    Args:
        log_dir: Directory for this rendering session (None for console only)
        options: Math options recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from texmark.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, options)
        _log_info("Rendering document...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "MathML engine": f"{options.math_engine} (enabled={options.output_mathml})",
            "PNG engine": f"{options.png_engine} (enabled={options.output_png})",
        },
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_result(title: str, fragment_count: int, issues: list, elapsed_time: float) -> None:
    """Log the outcome of rendering a whole document."""
    if issues:
        _log_warning(f"{title}: {fragment_count} fragments, {len(issues)} diagnostics ({elapsed_time:.2f}s)")
        for i, issue in enumerate(issues[:5], 1):
            _log_warning(f"  Issue {i}: {issue}")
        if len(issues) > 5:
            _log_warning(f"  ... and {len(issues) - 5} more issues")
    else:
        _log_success(f"{title}: {fragment_count} fragments ({elapsed_time:.2f}s)")
