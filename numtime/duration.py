import operator
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, ClassVar

from numtime.errors import DurationOverflowError, NegativeDurationError
from numtime.util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
    U64_MAX,
)

_MAX_NANOS = U64_MAX * SECOND + (SECOND - 1)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(
            f"Duration {name} must be an integer, not a bool.\n"
            f"Got {value!r}\n"
            f"Hint: pass int(flag) if the truth value really is a count"
        )
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"Duration {name} must be an integer.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: use a smaller unit instead of a fraction:\n"
            f"  Duration.from_millis(1500)  # not Duration.from_secs(1.5)"
        ) from None


@dataclass(frozen=True, kw_only=True, order=True)
class Duration:
    """A non-negative span of time: whole seconds plus a nanosecond remainder.

    Seconds are bounded by an unsigned 64-bit count. Instances compare and
    order by their total length.
    """

    secs: int
    nanos: int = 0

    ZERO: ClassVar["Duration"]
    MAX: ClassVar["Duration"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "secs", _as_int(self.secs, "secs"))
        object.__setattr__(self, "nanos", _as_int(self.nanos, "nanos"))
        if self.secs < 0 or self.nanos < 0:
            raise NegativeDurationError(
                f"Duration fields must be non-negative "
                f"(secs={self.secs}, nanos={self.nanos})",
                value=(self.secs, self.nanos),
            )
        if self.nanos >= SECOND:
            raise ValueError(
                f"Duration nanos ({self.nanos}) must be < {SECOND}; "
                f"use Duration.from_nanos() to normalize"
            )
        if self.secs > U64_MAX:
            raise DurationOverflowError(
                f"Duration secs ({self.secs}) exceeds the maximum of {U64_MAX}",
                value=self.secs,
            )

    @classmethod
    def _from_total(cls, total: int) -> "Duration":
        total = _as_int(total, "length")
        if total < 0:
            raise NegativeDurationError(
                f"Duration cannot be negative (got {total} ns)", value=total
            )
        if total > _MAX_NANOS:
            raise DurationOverflowError(
                f"Duration of {total} ns exceeds Duration.MAX", value=total
            )
        secs, nanos = divmod(total, SECOND)
        return cls(secs=secs, nanos=nanos)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        return cls._from_total(_as_int(nanos, "nanos"))

    @classmethod
    def from_micros(cls, micros: int) -> "Duration":
        return cls._from_total(_as_int(micros, "micros") * MICROSECOND)

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        return cls._from_total(_as_int(millis, "millis") * MILLISECOND)

    @classmethod
    def from_secs(cls, secs: int) -> "Duration":
        return cls._from_total(_as_int(secs, "secs") * SECOND)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Build a Duration from a non-negative timedelta (exact)."""
        return cls._from_total(
            delta.days * DAY + delta.seconds * SECOND + delta.microseconds * MICROSECOND
        )

    def as_nanos(self) -> int:
        return self.secs * SECOND + self.nanos

    def as_micros(self) -> int:
        return self.as_nanos() // MICROSECOND

    def as_millis(self) -> int:
        return self.as_nanos() // MILLISECOND

    def as_secs(self) -> int:
        return self.secs

    def total_seconds(self) -> float:
        return self.secs + self.nanos / SECOND

    def is_zero(self) -> bool:
        return self.secs == 0 and self.nanos == 0

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below microsecond resolution.

        Raises:
            DurationOverflowError: If the span is longer than `timedelta.max`
        """
        try:
            return timedelta(seconds=self.secs, microseconds=self.nanos // MICROSECOND)
        except OverflowError as exc:
            raise DurationOverflowError(
                f"{self!r} is too long for a timedelta (max {timedelta.max})",
                value=self,
            ) from exc

    def saturating_mul(self, factor: int) -> "Duration":
        """Multiply by an integer, clamping to `Duration.MAX` (or ZERO if negative)."""
        total = self.as_nanos() * operator.index(factor)
        if total > _MAX_NANOS:
            return Duration.MAX
        if total < 0:
            return Duration.ZERO
        return Duration._from_total(total)

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Duration):
            return Duration._from_total(self.as_nanos() + other.as_nanos())
        if isinstance(other, datetime):
            return other + self.to_timedelta()
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if isinstance(other, datetime):
            return other + self.to_timedelta()
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Duration):
            return Duration._from_total(self.as_nanos() - other.as_nanos())
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, datetime):
            return other - self.to_timedelta()
        return NotImplemented

    def __mul__(self, factor: Any) -> Any:
        if isinstance(factor, bool):
            return NotImplemented
        try:
            factor = operator.index(factor)
        except TypeError:
            return NotImplemented
        return Duration._from_total(self.as_nanos() * factor)

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        """Compact human-friendly form, e.g. ``1h30m``, ``2.5s`` or ``250ms``."""
        if self.is_zero():
            return "0s"
        if self.secs == 0:
            if self.nanos % MILLISECOND == 0:
                return f"{self.nanos // MILLISECOND}ms"
            if self.nanos % MICROSECOND == 0:
                return f"{self.nanos // MICROSECOND}us"
            return f"{self.nanos}ns"

        whole = self.secs * SECOND
        parts: list[str] = []
        for unit, suffix in ((DAY, "d"), (HOUR, "h"), (MINUTE, "m")):
            count, whole = divmod(whole, unit)
            if count:
                parts.append(f"{count}{suffix}")
        secs = whole // SECOND
        if self.nanos:
            parts.append(f"{secs}.{self.nanos:09d}".rstrip("0") + "s")
        elif secs or not parts:
            parts.append(f"{secs}s")
        return "".join(parts)


Duration.ZERO = Duration(secs=0)
Duration.MAX = Duration(secs=U64_MAX, nanos=SECOND - 1)
