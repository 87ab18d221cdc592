"""A simple profiler for measuring the elapsed time of code sections.

Records go to the ``timelapse`` logger, which discards them until the
application configures logging (see ``timelapse.utils.logging.setup_logger``).
"""

import logging

from .profiler import (
    TimeLapse,
    profile_start,
    profile_end,
    profile_end_print,
    profile_end_log,
    profiled,
)
from .utils.duration import format_duration

logging.getLogger("timelapse").addHandler(logging.NullHandler())

__version__ = "0.1.3"

__all__ = [
    "TimeLapse",
    "profile_start",
    "profile_end",
    "profile_end_print",
    "profile_end_log",
    "profiled",
    "format_duration",
]
