"""Metric sink adapters.

Aggregation and export belong to the backend behind each adapter; these
classes only forward samples.
"""

from __future__ import annotations

import logging
from threading import Lock

from prometheus_client import REGISTRY, CollectorRegistry, Summary

from timed_metrics.application.ports.metrics import MetricSink
from timed_metrics.config import LOGGING_SINK_LEVEL, SUMMARY_DOC, SUMMARY_NAME

_default_summary: Summary | None = None
_default_summary_lock = Lock()


def default_summary() -> Summary:
    """Summary on the global registry, registered once per process."""
    global _default_summary
    with _default_summary_lock:
        if _default_summary is None:
            _default_summary = Summary(SUMMARY_NAME, SUMMARY_DOC, ["key"], registry=REGISTRY)
        return _default_summary


class LoggingSink:
    """Writes one log line per sample."""

    def __init__(
        self, logger: logging.Logger | None = None, level: str | int | None = None
    ) -> None:
        lvl = level if level is not None else LOGGING_SINK_LEVEL
        if isinstance(lvl, str):
            lvl = getattr(logging, lvl.upper(), logging.INFO)
        self._log = logger or logging.getLogger(__name__)
        self._level = int(lvl)

    def record(self, key: str, duration_ms: int) -> None:
        self._log.log(
            self._level,
            "%s took %dms",
            key,
            duration_ms,
            extra={"event": "timing", "metric_key": key, "duration_ms": duration_ms},
        )


class PrometheusSink:
    """Observes samples on a Summary labelled by metric key.

    Dotted keys are not valid Prometheus metric names, so the key is a label
    value. Durations are exported in seconds. Without ``registry`` or
    ``summary`` all instances share one Summary on the global registry.
    """

    def __init__(
        self,
        *,
        registry: CollectorRegistry | None = None,
        summary: Summary | None = None,
    ) -> None:
        if summary is None:
            if registry is None:
                summary = default_summary()
            else:
                summary = Summary(SUMMARY_NAME, SUMMARY_DOC, ["key"], registry=registry)
        self._summary = summary

    def record(self, key: str, duration_ms: int) -> None:
        self._summary.labels(key=key).observe(duration_ms / 1000)


class FanoutSink:
    """Forwards each sample to several sinks, in order."""

    def __init__(self, *sinks: MetricSink) -> None:
        self._sinks = tuple(sinks)

    def record(self, key: str, duration_ms: int) -> None:
        for sink in self._sinks:
            sink.record(key, duration_ms)
