"""Application layer: the interceptor and the collaborators it depends on."""

from .instrumentation import timed
from .interceptor import TimingInterceptor
from .key_generators import DefaultKeyGenerator
from .ports import KeyGenerator, MetricSink

__all__ = [
    "DefaultKeyGenerator",
    "KeyGenerator",
    "MetricSink",
    "TimingInterceptor",
    "timed",
]
