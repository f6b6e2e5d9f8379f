"""Error types raised by the instrumentation itself.

Errors raised by timed operations are never wrapped.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TimedMetricsError(Exception):
    """Base error for instrumentation failures."""

    message: str

    def __str__(self) -> str:
        return self.message


class ConfigurationError(TimedMetricsError):
    """Missing or invalid collaborator, raised at setup time."""
