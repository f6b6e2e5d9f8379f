"""Ports consumed by the timing interceptor.

Sinks and key generators are supplied by the host application. Both must be
safe to call from many threads at once.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from timed_metrics.models import CallContext, Timed


@runtime_checkable
class MetricSink(Protocol):
    def record(self, key: str, duration_ms: int) -> None:
        """Record one named sample. Fire-and-forget."""


@runtime_checkable
class KeyGenerator(Protocol):
    def get_key(self, context: CallContext, marker: Timed) -> str:
        """Metric key for a call, without the namespace prefix.

        Keys are period-separated segments, e.g. "OrderDao.find" or
        "PaymentClient.charge".
        """
