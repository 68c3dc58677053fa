from __future__ import annotations

from collections.abc import Iterable

from PySubmerge.Effect import EffectDescriptor, ParseEffect
from PySubmerge.Helpers.Localization import _
from PySubmerge.TimeCode import TimeCode
from PySubmerge.TimeRange import TimeRange

DEFAULT_MARGIN = "0000"
DEFAULT_STYLE = "Default"


class Cue:
    """
    A single subtitle event: timing, text and display metadata.

    The time range is replaced as a whole so that start <= end always holds.
    Scalar fields (layer, name, margins, effect) can be assigned independently.

    Margins are four-digit pixel overrides where "0000" means the style's own margin is used.
    Higher layers are drawn over lower layers. Text lines may contain brace-delimited
    override codes, which are passed through untouched.
    """
    def __init__(self,
                 style : str,
                 time_range : TimeRange,
                 text_lines : Iterable[str]|None = None,
                 *,
                 layer : int = 0,
                 name : str = "",
                 margin_left : str|int = DEFAULT_MARGIN,
                 margin_right : str|int = DEFAULT_MARGIN,
                 margin_vertical : str|int = DEFAULT_MARGIN,
                 effect : str = ""):
        self.style = style
        self.time_range = time_range
        self.text_lines = text_lines
        self.layer = layer
        self.name = name
        self.margin_left = margin_left
        self.margin_right = margin_right
        self.margin_vertical = margin_vertical
        self.effect = effect

    @property
    def time_range(self) -> TimeRange:
        return self._time_range

    @time_range.setter
    def time_range(self, value : TimeRange):
        if not isinstance(value, TimeRange):
            raise TypeError(_("Cue time range must be a TimeRange, got {type}").format(type=type(value).__name__))
        self._time_range = value

    @property
    def start(self) -> TimeCode:
        return self._time_range.start

    @property
    def end(self) -> TimeCode:
        return self._time_range.end

    @property
    def layer(self) -> int:
        return self._layer

    @layer.setter
    def layer(self, value : int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(_("Layer must be a non-negative integer, got {value!r}").format(value=value))
        self._layer = value

    @property
    def style(self) -> str:
        return self._style

    @style.setter
    def style(self, value : str):
        self._style = self._text_field('Style', value)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value : str|None):
        self._name = self._text_field('Name', value or "")

    @property
    def effect(self) -> str:
        return self._effect

    @effect.setter
    def effect(self, value : str|None):
        self._effect = self._text_field('Effect', value or "")

    @property
    def effect_descriptor(self) -> EffectDescriptor|None:
        """The effect parsed as one of the recognised transition effects, if it is one"""
        return ParseEffect(self._effect)

    @property
    def margin_left(self) -> str:
        return self._margin_left

    @margin_left.setter
    def margin_left(self, value : str|int):
        self._margin_left = self._normalise_margin(value)

    @property
    def margin_right(self) -> str:
        return self._margin_right

    @margin_right.setter
    def margin_right(self, value : str|int):
        self._margin_right = self._normalise_margin(value)

    @property
    def margin_vertical(self) -> str:
        return self._margin_vertical

    @margin_vertical.setter
    def margin_vertical(self, value : str|int):
        self._margin_vertical = self._normalise_margin(value)

    @property
    def text_lines(self) -> list[str]:
        return self._text_lines

    @text_lines.setter
    def text_lines(self, value : Iterable[str]|None):
        if isinstance(value, str):
            raise TypeError(_("Text lines must be a sequence of strings, not a single string"))
        lines = list(value) if value is not None else []
        if not all(isinstance(line, str) for line in lines):
            raise TypeError(_("Text lines must all be strings"))
        self._text_lines = lines

    @property
    def has_text(self) -> bool:
        return bool(self._text_lines)

    def compare_to(self, other : Cue) -> int:
        """
        Order by start time only: -1 if this cue starts first, 1 if it starts later, 0 if they start together
        """
        if self.start < other.start:
            return -1
        if self.start > other.start:
            return 1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Cue):
            return NotImplemented
        return self.start < other.start

    def __eq__(self, other):
        if not isinstance(other, Cue):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None     # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cue(layer={self._layer}, time_range={self._time_range}, style={self._style!r}, text_lines={self._text_lines!r})"

    def _fields(self) -> tuple:
        return (self._layer, self._time_range, self._style, self._name, self._margin_left,
                self._margin_right, self._margin_vertical, self._effect, self._text_lines)

    @staticmethod
    def _text_field(field : str, value : str) -> str:
        if not isinstance(value, str):
            raise TypeError(_("{field} must be a string, got {type}").format(field=field, type=type(value).__name__))
        return value

    @staticmethod
    def _normalise_margin(value : str|int) -> str:
        """
        Accept an integer 0-9999 or a string of one to four digits, returning four zero-padded digits
        """
        if isinstance(value, bool):
            raise ValueError(_("Invalid margin value: {value!r}").format(value=value))

        if isinstance(value, int):
            if not 0 <= value <= 9999:
                raise ValueError(_("Margin must be between 0 and 9999, got {value}").format(value=value))
            return f"{value:04d}"

        if isinstance(value, str) and 1 <= len(value) <= 4 and value.isascii() and value.isdigit():
            return value.zfill(4)

        raise ValueError(_("Margin must be a number of up to four digits, got {value!r}").format(value=value))
