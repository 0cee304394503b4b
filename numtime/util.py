"""Utility constants for numtime.

Unit lengths are expressed in nanoseconds, the resolution of `Duration`.
Each unit past the second is defined from the one below it.
"""

# Ratios between neighbouring units
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = SECONDS_PER_MINUTE * SECOND
HOUR = MINUTES_PER_HOUR * MINUTE
DAY = HOURS_PER_DAY * HOUR
WEEK = DAYS_PER_WEEK * DAY

# Largest count accepted after widening to an unsigned 64-bit integer
U64_MAX = 2**64 - 1
