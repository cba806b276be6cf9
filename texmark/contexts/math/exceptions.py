"""Custom exceptions for math context with engine references."""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Exception raised when the math setup itself is defective.

    Configuration errors are systemic: they would recur for every node using
    the same engine, so they abort rendering instead of degrading silently.
    """

    pass


class MathEngineNotFoundError(ConfigurationError):
    """
    Exception raised when the configured engine has no backend for a capability.

    Attributes:
        message: Error description
        engine: Configured engine name
        capability: Requested capability ('mathml' or 'png')
        available: Engines registered for that capability
    """

    def __init__(
        self,
        message: str,
        engine: Optional[str] = None,
        capability: Optional[str] = None,
        available: Optional[List[str]] = None,
    ):
        self.message = message
        self.engine = engine
        self.capability = capability
        self.available = available or []

        # Build enhanced error message
        parts = [message]

        if engine and capability:
            parts.append(f"\nEngine: {engine}")
            parts.append(f"Capability: {capability}")

        if available is not None:
            parts.append(f"Available engines: {self.available}")

        super().__init__("\n".join(parts))


class BaselineProbeError(ConfigurationError):
    """
    Exception raised when the PNG engine cannot render the baseline probe.

    Without the probe the pixels-per-ex metric is unknown and no raster image
    can be aligned with the surrounding text.
    """

    pass
