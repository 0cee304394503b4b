from .convert import (
    Policy,
    days,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
    weeks,
)
from .duration import Duration
from .errors import DurationError, DurationOverflowError, NegativeDurationError
from .num import Num

__all__ = [
    "Duration",
    "Num",
    "Policy",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "DurationError",
    "NegativeDurationError",
    "DurationOverflowError",
]
