import regex

from PySubmerge.SubtitleError import MalformedTimeError
from PySubmerge.TimeCode import TimeCode
from PySubmerge.TimeFormatter import TimeFormatter
from PySubmerge.TimeRange import TimeRange


class SrtTimeFormatter(TimeFormatter):
    """
    SubRip time format, HH:MM:SS,mmm with millisecond precision.

    Hours are padded to two digits. Longer hours are written and accepted as-is
    so that very long media still round-trips.
    """
    STANDARD = "SRT"
    UNIT_MS = 1
    RANGE_DELIMITER = " --> "

    _TIME_PATTERN = regex.compile(r'([0-9]{2,}):([0-9]{2}):([0-9]{2}),([0-9]{3})')

    def format(self, time : TimeCode) -> str:
        return f"{time.hours:02d}:{time.minutes:02d}:{time.seconds:02d},{time.milliseconds:03d}"

    def parse(self, text : str) -> TimeCode:
        if not isinstance(text, str):
            raise MalformedTimeError(text, self.STANDARD)

        match = self._TIME_PATTERN.fullmatch(text)
        if not match:
            raise MalformedTimeError(text, self.STANDARD)

        hours, minutes, seconds, milliseconds = map(int, match.groups())
        if minutes >= 60 or seconds >= 60:
            raise MalformedTimeError(text, self.STANDARD)

        return TimeCode.from_components(hours, minutes, seconds, milliseconds)

    def format_range(self, time_range : TimeRange) -> str:
        return f"{self.format(time_range.start)}{self.RANGE_DELIMITER}{self.format(time_range.end)}"

    def parse_range(self, text : str) -> TimeRange:
        """
        Parse a "start --> end" line. Raises MalformedTimeError or InvalidRangeError.
        """
        if not isinstance(text, str) or text.count(self.RANGE_DELIMITER) != 1:
            raise MalformedTimeError(text, self.STANDARD)

        start, end = text.split(self.RANGE_DELIMITER)
        return TimeRange(self.parse(start), self.parse(end))
