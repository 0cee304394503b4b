"""Method-style conversions on integers.

Python cannot attach methods to ``int`` itself, so `Num` wraps a count in an
``int`` subclass that carries the conversions:

    >>> from numtime import Num
    >>> Num(90).minutes()
    Duration(secs=5400, nanos=0)
    >>> str(Num(90).minutes())
    '1h30m'

A `Num` is still an ``int``; arithmetic on it returns a plain ``int``.
"""

from typing import Any

from typing_extensions import Self, override

from numtime import convert
from numtime.convert import Policy, as_count, check_policy
from numtime.duration import Duration


class Num(int):
    """An integer count with unit-conversion methods."""

    policy: Policy

    def __new__(cls, value: Any, policy: Policy = "strict") -> Self:
        self = super().__new__(cls, as_count(value))
        self.policy = check_policy(policy)
        return self

    @override
    def __repr__(self) -> str:
        return f"Num({int(self)}, policy={self.policy!r})"

    def nanoseconds(self) -> Duration:
        return convert.nanoseconds(self, policy=self.policy)

    def microseconds(self) -> Duration:
        return convert.microseconds(self, policy=self.policy)

    def milliseconds(self) -> Duration:
        return convert.milliseconds(self, policy=self.policy)

    def seconds(self) -> Duration:
        return convert.seconds(self, policy=self.policy)

    def minutes(self) -> Duration:
        return convert.minutes(self, policy=self.policy)

    def hours(self) -> Duration:
        return convert.hours(self, policy=self.policy)

    def days(self) -> Duration:
        return convert.days(self, policy=self.policy)

    def weeks(self) -> Duration:
        return convert.weeks(self, policy=self.policy)
