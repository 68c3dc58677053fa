from abc import ABC, abstractmethod

from PySubmerge.TimeCode import TimeCode, RoundHalfAwayFromZero


class TimeFormatter(ABC):
    """
    Renders TimeCodes in the textual pattern of one subtitle standard and parses them back.

    Each standard has a precision (UNIT_MS). Times are quantized to that unit before
    formatting, rounding to the nearest representable value with ties away from zero,
    so parse(format(t)) == t for every t that is already representable.
    """

    STANDARD : str = ""
    UNIT_MS : int = 1

    @abstractmethod
    def format(self, time : TimeCode) -> str:
        raise NotImplementedError

    @abstractmethod
    def parse(self, text : str) -> TimeCode:
        """Parse a time string, raising MalformedTimeError if it does not match the pattern"""
        raise NotImplementedError

    def quantize(self, time : TimeCode) -> TimeCode:
        """Round a time to the precision of this standard"""
        if self.UNIT_MS == 1:
            return time
        return TimeCode(RoundHalfAwayFromZero(time.total_milliseconds, self.UNIT_MS))

    def is_representable(self, time : TimeCode) -> bool:
        return time.total_milliseconds % self.UNIT_MS == 0
