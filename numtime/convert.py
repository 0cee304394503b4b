"""Integer-to-Duration conversions, one function per time unit.

Each function reads its argument as a count of the named unit. Units from
minutes upward are built from the next-smaller unit and its ratio, so the
conversion constants live only in `numtime.util`.

Example:
    >>> from datetime import datetime, timedelta, timezone
    >>> from numtime import hours, weeks
    >>>
    >>> now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> now + hours(1) == now + timedelta(seconds=3600)
    True
    >>> weeks(1).as_secs()
    604800

Counts are widened to an unsigned 64-bit integer before conversion. What
happens to counts outside that range, or to results past `Duration.MAX`, is
chosen with ``policy``:

- ``"strict"`` raises `NegativeDurationError` or `DurationOverflowError`
- ``"saturate"`` clamps to `Duration.ZERO` or `Duration.MAX`
"""

import logging
import operator
from collections.abc import Callable
from typing import Any, Literal, TypeAlias

from numtime.duration import Duration
from numtime.errors import DurationOverflowError, NegativeDurationError
from numtime.util import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    U64_MAX,
)

logger = logging.getLogger(__name__)

Policy: TypeAlias = Literal["strict", "saturate"]

POLICIES: tuple[Policy, ...] = ("strict", "saturate")


def as_count(value: Any) -> int:
    """Return ``value`` as a plain int, accepting anything with ``__index__``.

    Raises:
        TypeError: If value is a bool or is not an integer type
    """
    if isinstance(value, bool):
        raise TypeError(
            f"Duration count must be an integer, not a bool.\n"
            f"Got {value!r}\n"
            f"Hint: pass int(flag) if the truth value really is a count"
        )
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"Duration count must be an integer.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: convert explicitly or use a smaller unit:\n"
            f"  seconds(round(1.5))\n"
            f"  milliseconds(1500)"
        ) from None


def check_policy(policy: str) -> Policy:
    if policy not in POLICIES:
        raise ValueError(
            f"Unknown overflow policy {policy!r}; expected one of {POLICIES}"
        )
    return policy  # pyright: ignore[reportReturnType]


def _convert(
    value: Any, policy: Policy, build: Callable[[int], Duration]
) -> Duration:
    count = as_count(value)
    check_policy(policy)

    if count < 0:
        if policy == "strict":
            raise NegativeDurationError(
                f"Cannot build a Duration from a negative count ({count})",
                value=count,
            )
        logger.debug("Clamping negative count %d to Duration.ZERO", count)
        return Duration.ZERO

    if count > U64_MAX:
        if policy == "strict":
            raise DurationOverflowError(
                f"Count {count} does not fit in an unsigned 64-bit integer",
                value=count,
            )
        logger.debug("Clamping count %d to Duration.MAX", count)
        return Duration.MAX

    return build(count)


def _scale(count: Any, duration: Duration, ratio: int, policy: Policy) -> Duration:
    if policy == "strict":
        try:
            return ratio * duration
        except DurationOverflowError as exc:
            count = as_count(count)
            raise DurationOverflowError(
                f"Count {count} is too large to convert: {exc}", value=count
            ) from exc
    scaled = duration.saturating_mul(ratio)
    if scaled is Duration.MAX and duration is not Duration.MAX:
        logger.debug("Clamping %r * %d to Duration.MAX", duration, ratio)
    return scaled


def nanoseconds(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` nanoseconds."""
    return _convert(n, policy, Duration.from_nanos)


def microseconds(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` microseconds."""
    return _convert(n, policy, Duration.from_micros)


def milliseconds(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` milliseconds."""
    return _convert(n, policy, Duration.from_millis)


def seconds(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` seconds."""
    return _convert(n, policy, Duration.from_secs)


def minutes(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` minutes."""
    return _scale(n, seconds(n, policy=policy), SECONDS_PER_MINUTE, policy)


def hours(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` hours."""
    return _scale(n, minutes(n, policy=policy), MINUTES_PER_HOUR, policy)


def days(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` days (24 hours, not calendar days)."""
    return _scale(n, hours(n, policy=policy), HOURS_PER_DAY, policy)


def weeks(n: int, *, policy: Policy = "strict") -> Duration:
    """Create a Duration of ``n`` weeks (7 days)."""
    return _scale(n, days(n, policy=policy), DAYS_PER_WEEK, policy)
