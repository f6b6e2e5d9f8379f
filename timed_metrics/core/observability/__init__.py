from .logging_config import setup_logging
from .timing import nanos_to_millis, time_block

__all__ = ["nanos_to_millis", "setup_logging", "time_block"]
