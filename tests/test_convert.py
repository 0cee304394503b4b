"""Tests for the integer-to-Duration conversion functions."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from numtime import (
    Duration,
    DurationOverflowError,
    NegativeDurationError,
    days,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
    weeks,
)
from numtime.util import U64_MAX

ALL_UNITS = [
    nanoseconds,
    microseconds,
    milliseconds,
    seconds,
    minutes,
    hours,
    days,
    weeks,
]


class _Index:
    """Integer-like object that only implements __index__ (e.g. a NumPy scalar)."""

    def __init__(self, value: int):
        self.value = value

    def __index__(self) -> int:
        return self.value


def test_nanoseconds_of_one():
    """Test that one nanosecond is exactly 1 ns."""
    assert nanoseconds(1) == Duration.from_nanos(1)
    assert nanoseconds(1).as_nanos() == 1


def test_microseconds_of_one():
    """Test that one microsecond is 1,000 ns."""
    assert microseconds(1) == Duration.from_micros(1)
    assert microseconds(1).as_nanos() == 1_000


def test_milliseconds_of_one():
    """Test that one millisecond is 1,000,000 ns."""
    assert milliseconds(1) == Duration.from_millis(1)
    assert milliseconds(1).as_nanos() == 1_000_000


def test_seconds_of_one():
    """Test that one second is 1,000,000,000 ns."""
    assert seconds(1) == Duration.from_secs(1)
    assert seconds(1).as_nanos() == 1_000_000_000


@pytest.mark.parametrize(
    ("convert", "expected_secs"),
    [
        (minutes, 60),
        (hours, 3600),
        (days, 86400),
        (weeks, 604800),
    ],
)
def test_larger_units_of_one(convert, expected_secs):
    """Test the second counts of one minute, hour, day and week."""
    assert convert(1) == Duration.from_secs(expected_secs)


@pytest.mark.parametrize("convert", ALL_UNITS)
def test_zero_is_zero_for_every_unit(convert):
    """Test that a zero count gives the zero-length duration."""
    assert convert(0) == Duration.ZERO
    assert convert(0).is_zero()


@pytest.mark.parametrize("n", [0, 1, 7, 1000, 2**31 - 1])
def test_units_are_compositional(n):
    """Test that each unit equals the next-smaller unit times its ratio."""
    assert minutes(n) == seconds(60 * n)
    assert hours(n) == minutes(60 * n)
    assert days(n) == hours(24 * n)
    assert weeks(n) == days(7 * n)


@pytest.mark.parametrize("n", [0, 1, 999, 10**12])
def test_seconds_scale_to_nanoseconds(n):
    """Test that n seconds equals n * 10^9 nanoseconds."""
    assert seconds(n).as_nanos() == n * 1_000_000_000
    assert nanoseconds(n).as_nanos() == n


def test_hours_added_to_datetime():
    """Test that adding hours(1) matches adding a 3600 second timedelta."""
    now = datetime(2025, 1, 6, 9, 30, tzinfo=timezone.utc)

    assert now + hours(1) == now + timedelta(seconds=3600)
    assert now + days(1) == now + timedelta(seconds=86400)
    assert now - weeks(1) == now - timedelta(seconds=604800)


def test_accepts_index_types():
    """Test that any object with __index__ is accepted as a count."""
    assert seconds(_Index(5)) == seconds(5)
    assert weeks(_Index(2)) == days(14)


@pytest.mark.parametrize("bad", [1.5, "5", None])
def test_rejects_non_integers(bad):
    """Test that floats, strings and None are rejected."""
    with pytest.raises(TypeError, match="must be an integer"):
        seconds(bad)


def test_rejects_bool():
    """Test that bools are not treated as counts."""
    with pytest.raises(TypeError, match="not a bool"):
        minutes(True)


def test_unknown_policy():
    """Test that an unknown policy is rejected."""
    with pytest.raises(ValueError, match="Unknown overflow policy"):
        seconds(1, policy="wrap")  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize("convert", ALL_UNITS)
def test_strict_rejects_negative(convert):
    """Test that strict mode raises for negative counts."""
    with pytest.raises(NegativeDurationError) as exc_info:
        convert(-1)
    assert exc_info.value.value == -1
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("convert", ALL_UNITS)
def test_strict_rejects_counts_beyond_u64(convert):
    """Test that strict mode raises for counts wider than 64 bits."""
    with pytest.raises(DurationOverflowError):
        convert(U64_MAX + 1)


def test_strict_accepts_u64_max_for_small_units():
    """Test that the widest count fits for units up to seconds."""
    assert nanoseconds(U64_MAX).as_nanos() == U64_MAX
    assert seconds(U64_MAX).as_secs() == U64_MAX


def test_strict_detects_overflow_while_scaling():
    """Test that minutes and above raise when the product overflows."""
    with pytest.raises(DurationOverflowError):
        minutes(U64_MAX)
    with pytest.raises(OverflowError):
        weeks(U64_MAX // 604800 + 1)


def test_scaling_overflow_reports_the_count():
    """Test that overflow in a larger unit reports the caller's count."""
    with pytest.raises(DurationOverflowError) as exc_info:
        minutes(U64_MAX)
    assert exc_info.value.value == U64_MAX

    too_many_weeks = U64_MAX // 604800 + 1
    with pytest.raises(DurationOverflowError) as exc_info:
        weeks(too_many_weeks)
    assert exc_info.value.value == too_many_weeks

    with pytest.raises(DurationOverflowError) as exc_info:
        hours(_Index(U64_MAX))
    assert exc_info.value.value == U64_MAX


def test_largest_week_count_fits():
    """Test that the largest representable number of weeks converts."""
    largest = U64_MAX // 604800
    assert weeks(largest).as_secs() == largest * 604800


@pytest.mark.parametrize("convert", ALL_UNITS)
def test_saturate_clamps_negative_to_zero(convert):
    """Test that saturate mode maps negative counts to ZERO."""
    assert convert(-5, policy="saturate") == Duration.ZERO


@pytest.mark.parametrize("convert", ALL_UNITS)
def test_saturate_clamps_wide_counts_to_max(convert):
    """Test that saturate mode maps counts wider than 64 bits to MAX."""
    assert convert(U64_MAX + 1, policy="saturate") == Duration.MAX


def test_saturate_clamps_scaling_overflow_to_max():
    """Test that saturate mode clamps overflow in the compositional steps."""
    assert minutes(U64_MAX, policy="saturate") == Duration.MAX
    assert weeks(U64_MAX // 604800 + 1, policy="saturate") == Duration.MAX


def test_saturate_leaves_representable_values_alone():
    """Test that saturate mode matches strict mode when nothing overflows."""
    for convert in ALL_UNITS:
        assert convert(42, policy="saturate") == convert(42)


def test_saturate_logs_clamping(caplog):
    """Test that clamping is logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="numtime.convert"):
        hours(-3, policy="saturate")
        minutes(U64_MAX, policy="saturate")

    messages = [record.getMessage() for record in caplog.records]
    assert any("negative count -3" in m for m in messages)
    assert any("Duration.MAX" in m for m in messages)


def test_strict_does_not_log(caplog):
    """Test that ordinary conversions log nothing."""
    with caplog.at_level(logging.DEBUG, logger="numtime.convert"):
        weeks(3)

    assert caplog.records == []
