from .errors import ConfigurationError, TimedMetricsError

__all__ = ["ConfigurationError", "TimedMetricsError"]
