from .metrics import KeyGenerator, MetricSink

__all__ = ["KeyGenerator", "MetricSink"]
