from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from PySubmerge.Helpers.Localization import _
from PySubmerge.SubtitleError import InvalidRangeError
from PySubmerge.TimeCode import TimeCode


@dataclass(frozen=True)
class TimeRange:
    """
    The start and end of a cue. Immutable: replace the whole range to change either end.
    """
    start : TimeCode
    end : TimeCode

    def __post_init__(self):
        if not isinstance(self.start, TimeCode) or not isinstance(self.end, TimeCode):
            raise TypeError(_("TimeRange requires TimeCode start and end"))
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    @classmethod
    def from_milliseconds(cls, start : int, end : int) -> TimeRange:
        return cls(TimeCode(start), TimeCode(end))

    @classmethod
    def from_timedeltas(cls, start : timedelta, end : timedelta) -> TimeRange:
        return cls(TimeCode.from_timedelta(start), TimeCode.from_timedelta(end))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, time : TimeCode) -> bool:
        return self.start <= time <= self.end

    def shift(self, offset : timedelta) -> TimeRange:
        """
        Return a new range moved by offset. Raises ValueError if the start would become negative.
        """
        return TimeRange(self.start + offset, self.end + offset)

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"
