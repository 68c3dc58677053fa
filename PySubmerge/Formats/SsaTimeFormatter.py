import regex

from PySubmerge.SubtitleError import MalformedTimeError
from PySubmerge.TimeCode import TimeCode
from PySubmerge.TimeFormatter import TimeFormatter


class SsaTimeFormatter(TimeFormatter):
    """
    SubStation Alpha time format, H:MM:SS.cc with centisecond precision.
    Hours are unpadded and may be any width.
    """
    STANDARD = "SSA"
    UNIT_MS = 10

    _TIME_PATTERN = regex.compile(r'([0-9]+):([0-9]{2}):([0-9]{2})\.([0-9]{2})')

    def format(self, time : TimeCode) -> str:
        time = self.quantize(time)
        centiseconds = time.milliseconds // 10
        return f"{time.hours}:{time.minutes:02d}:{time.seconds:02d}.{centiseconds:02d}"

    def parse(self, text : str) -> TimeCode:
        if not isinstance(text, str):
            raise MalformedTimeError(text, self.STANDARD)

        match = self._TIME_PATTERN.fullmatch(text)
        if not match:
            raise MalformedTimeError(text, self.STANDARD)

        hours, minutes, seconds, centiseconds = map(int, match.groups())
        if minutes >= 60 or seconds >= 60:
            raise MalformedTimeError(text, self.STANDARD)

        return TimeCode.from_components(hours, minutes, seconds, centiseconds * 10)
