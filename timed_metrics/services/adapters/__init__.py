from .sinks import FanoutSink, LoggingSink, PrometheusSink

__all__ = ["FanoutSink", "LoggingSink", "PrometheusSink"]
