"""A simple profiler for measuring elapsed time.

``TimeLapse`` captures a monotonic start instant and reports the time since
then. The ``profile_*`` helpers cut down the boilerplate at call sites::

    the_profile = profile_start("the_profile")
    do_work()
    profile_end(the_profile)
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional, TypeVar, Union

from rich.console import Console

from .utils.duration import format_duration

T = TypeVar('T')

logger = logging.getLogger("timelapse")
console = Console()

# Monotonic, nanosecond resolution
_clock = time.perf_counter_ns

_MESSAGE = "TimeLapse %s - Elapsed time: %s"


class TimeLapse:
    """Measures time elapsed since creation or the last reset."""
    
    def __init__(self, name: Optional[str] = None, logger: Optional[logging.Logger] = None):
        self.name = name
        self.logger = logger
        self._start_ns: int = _clock()
    
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        return self.elapsed_seconds
    
    @property
    def elapsed_ns(self) -> int:
        """Get elapsed time in nanoseconds."""
        return max(_clock() - self._start_ns, 0)
    
    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        return self.elapsed_ns / 1_000_000_000
    
    @property
    def elapsed_ms(self) -> int:
        """Get elapsed time in whole milliseconds."""
        return self.elapsed_ns // 1_000_000
    
    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start_ns = _clock()
    
    @property
    def label(self) -> str:
        """Get the name used in records, "TimeLapse" when unnamed."""
        return self.name if self.name is not None else "TimeLapse"
    
    def message(self, label: str) -> str:
        """Get the elapsed-time line for the given label."""
        return _MESSAGE % (label, format_duration(self.elapsed_ns))
    
    def log(self, label: str, level: int = logging.INFO) -> None:
        """
        Emit one log record with the elapsed time.
        
        Args:
            label: Name of the measured section
            level: Severity of the record
        """
        elapsed_ns = self.elapsed_ns
        target = self.logger if self.logger is not None else logger
        target.log(
            level,
            _MESSAGE,
            label,
            format_duration(elapsed_ns),
            extra={"extra_data": {"label": label, "elapsed_ns": elapsed_ns}},
        )
    
    def __str__(self) -> str:
        return f"Elapsed time: {format_duration(self.elapsed_ns)}"
    
    def __repr__(self) -> str:
        return f"TimeLapse {{ elapsed: {format_duration(self.elapsed_ns)} }}"
    
    def __enter__(self) -> 'TimeLapse':
        self.reset()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.log(self.label)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def profile_start(name: str, logger: Optional[logging.Logger] = None) -> TimeLapse:
    """Start a named timer; bind it to a variable of the same name."""
    return TimeLapse(name, logger=logger)


def profile_end(timer: TimeLapse) -> None:
    """Log the timer's elapsed time at INFO, labelled with its name."""
    timer.log(timer.label)


def profile_end_print(timer: TimeLapse) -> None:
    """Print the timer's elapsed time to stdout instead of logging it."""
    console.print(
        timer.message(timer.label),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def profile_end_log(timer: TimeLapse, level: Union[int, str]) -> None:
    """Log the timer's elapsed time at the given level."""
    timer.log(timer.label, level=_resolve_level(level))


def profiled(
    name: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
    logger: Optional[logging.Logger] = None,
) -> Callable:
    """
    Decorator that logs the elapsed time of every call.
    
    The record is emitted even when the wrapped function raises.
    """
    resolved = _resolve_level(level)
    
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        label = name or func.__qualname__
        
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            timer = TimeLapse(label, logger=logger)
            try:
                return func(*args, **kwargs)
            finally:
                timer.log(label, level=resolved)
        
        return wrapper
    
    return decorator
