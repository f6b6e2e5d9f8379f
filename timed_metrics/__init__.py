"""Method timing instrumentation.

Mark operations with :func:`timed`, let a :class:`TimingInterceptor` wrap
them, and every call reports ``("timer.<key>", elapsed_ms)`` to a metric sink.
"""

from timed_metrics.application import (
    DefaultKeyGenerator,
    KeyGenerator,
    MetricSink,
    TimingInterceptor,
    timed,
)
from timed_metrics.config import KEY_PREFIX
from timed_metrics.core.errors import ConfigurationError, TimedMetricsError
from timed_metrics.models import CallContext, Timed, TimingSample
from timed_metrics.services.adapters import FanoutSink, LoggingSink, PrometheusSink

__version__ = "0.1.0"

__all__ = [
    "KEY_PREFIX",
    "CallContext",
    "ConfigurationError",
    "DefaultKeyGenerator",
    "FanoutSink",
    "KeyGenerator",
    "LoggingSink",
    "MetricSink",
    "PrometheusSink",
    "Timed",
    "TimedMetricsError",
    "TimingInterceptor",
    "TimingSample",
    "timed",
]
