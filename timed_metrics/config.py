"""Constants and environment-driven settings."""

import os

# Namespace prepended to every generated metric key
KEY_PREFIX = "timer."

# Prometheus adapter
SUMMARY_NAME = "timed_operation_duration_seconds"
SUMMARY_DOC = "Execution time of timed operations"

# Level used by LoggingSink when none is given
LOGGING_SINK_LEVEL = os.getenv("TIMED_METRICS_LOG_LEVEL", "INFO")
