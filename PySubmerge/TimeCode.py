from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from PySubmerge.Helpers.Localization import _

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def RoundHalfAwayFromZero(value : int, unit : int) -> int:
    """
    Round an integer count to the nearest multiple of unit, ties away from zero
    """
    if unit <= 0:
        raise ValueError(_("Rounding unit must be positive"))

    quotient, remainder = divmod(abs(value), unit)
    if remainder * 2 >= unit:
        quotient += 1

    rounded = quotient * unit
    return rounded if value >= 0 else -rounded


@dataclass(frozen=True, order=True)
class TimeCode:
    """
    A point in time with millisecond precision, independent of any subtitle standard.

    Equality and ordering only consider the elapsed time, so two TimeCodes built from
    different component splits of the same duration are equal.
    """
    total_milliseconds : int = 0

    def __post_init__(self):
        if isinstance(self.total_milliseconds, bool) or not isinstance(self.total_milliseconds, int):
            raise TypeError(_("TimeCode requires an integer number of milliseconds, got {value!r}").format(value=self.total_milliseconds))
        if self.total_milliseconds < 0:
            raise ValueError(_("TimeCode cannot be negative ({value} ms)").format(value=self.total_milliseconds))

    @classmethod
    def from_components(cls, hours : int = 0, minutes : int = 0, seconds : int = 0, milliseconds : int = 0) -> TimeCode:
        """
        Build a TimeCode from components. Components may overflow their usual range (e.g. 90 seconds).
        """
        return cls(hours * MS_PER_HOUR + minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND + milliseconds)

    @classmethod
    def from_timedelta(cls, delta : timedelta) -> TimeCode:
        return cls(cls._delta_ms(delta))

    @classmethod
    def from_seconds(cls, seconds : float) -> TimeCode:
        return cls.from_timedelta(timedelta(seconds=seconds))

    @property
    def hours(self) -> int:
        return self.total_milliseconds // MS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self.total_milliseconds % MS_PER_HOUR) // MS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return (self.total_milliseconds % MS_PER_MINUTE) // MS_PER_SECOND

    @property
    def milliseconds(self) -> int:
        """Sub-second part of the time in milliseconds"""
        return self.total_milliseconds % MS_PER_SECOND

    @property
    def total_seconds(self) -> float:
        return self.total_milliseconds / MS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds)

    def __add__(self, other):
        if isinstance(other, timedelta):
            return TimeCode(self.total_milliseconds + TimeCode._delta_ms(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, TimeCode):
            return timedelta(milliseconds=self.total_milliseconds - other.total_milliseconds)
        if isinstance(other, timedelta):
            return TimeCode(self.total_milliseconds - TimeCode._delta_ms(other))
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}.{self.milliseconds:03d}"

    @staticmethod
    def _delta_ms(delta : timedelta) -> int:
        microseconds = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
        return RoundHalfAwayFromZero(microseconds, 1000) // 1000
