from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import regex

from PySubmerge.Cue import Cue, DEFAULT_MARGIN
from PySubmerge.Formats.EventFormat import (
    EFFECT, END, LAYER, MARGIN_L, MARGIN_R, MARGIN_V, MARKED, NAME, START, STYLE, TEXT,
    KNOWN_FIELDS, EventFormat,
)
from PySubmerge.Formats.SsaTimeFormatter import SsaTimeFormatter
from PySubmerge.Helpers.Localization import _
from PySubmerge.LineSerializer import LineSerializer
from PySubmerge.Options import Options
from PySubmerge.SubtitleError import FieldEncodingError, SubtitleParseError
from PySubmerge.SubtitleStandard import SubtitleStandard
from PySubmerge.TimeFormatter import TimeFormatter
from PySubmerge.TimeRange import TimeRange


class SsaLineSerializer(LineSerializer):
    """
    Writes cues as SubStation Alpha / Advanced SubStation Alpha "Dialogue:" event lines.

    Fields are written in the order of the configured EventFormat, which must match
    the "Format:" line preceding the events in the document (see format_declaration).
    Everything after the last delimiter is the text, so only the text may contain commas.
    Line breaks within the text are written as the \\N escape.
    """

    STANDARD = SubtitleStandard.SSA
    SUPPORTED_EXTENSIONS = {'.ass': 10, '.ssa': 10}
    SUPPORTED_FIELDS = frozenset(KNOWN_FIELDS)
    LINE_BREAK = "\\N"
    LINE_PREFIX = "Dialogue:"
    FIELD_DELIMITER = ","
    MARKED_VALUE = "Marked=0"

    _FIELD_HAZARDS = (FIELD_DELIMITER, "\r", "\n")
    _NEWLINE_PATTERN = regex.compile(r'\r\n|\r|\n')

    def __init__(self, options : Options|dict[str, Any]|None = None, event_format : EventFormat|str|None = None):
        super().__init__(options)
        self.event_format = event_format if event_format is not None else self.options.event_format

    @property
    def event_format(self) -> EventFormat:
        return self._event_format

    @event_format.setter
    def event_format(self, value : EventFormat|str|list[str]):
        self._event_format = value if isinstance(value, EventFormat) else EventFormat(value)

    def create_time_formatter(self) -> TimeFormatter:
        return SsaTimeFormatter()

    def format_declaration(self) -> str:
        """The "Format:" line that must precede events written by this serializer"""
        return self._event_format.declaration()

    def serialize(self, cue : Cue, sequence_index : int|None = None) -> str:
        """
        Compose a Dialogue line. SSA events carry no sequence number, so sequence_index is ignored.

        Raises FieldEncodingError if a field other than Text contains a delimiter or line break.
        """
        values = []
        for field in self._event_format.fields:
            value = self._field_writers.get(field, SsaLineSerializer._write_unknown)(self, cue)
            if field != TEXT and any(hazard in value for hazard in self._FIELD_HAZARDS):
                raise FieldEncodingError(field, value)
            values.append(value)

        return f"{self.LINE_PREFIX} {self.FIELD_DELIMITER.join(values)}"

    def parse(self, text : str) -> Cue:
        """
        Parse a Dialogue line laid out according to the configured event format.
        """
        if not isinstance(text, str):
            raise SubtitleParseError(_("Dialogue line must be a string, got {type}").format(type=type(text).__name__))

        line = text.rstrip("\r\n")
        if not line.startswith(self.LINE_PREFIX):
            raise SubtitleParseError(_("Not a Dialogue line: {line}").format(line=line))

        body = line[len(self.LINE_PREFIX):].lstrip()
        values = body.split(self.FIELD_DELIMITER, self._event_format.field_count - 1)
        if len(values) < self._event_format.field_count:
            raise SubtitleParseError(_("Dialogue line has {count} fields, expected {expected}: {line}").format(
                count=len(values), expected=self._event_format.field_count, line=line))

        fields = dict(zip(self._event_format.fields, values))

        start = self.time_formatter.parse(fields[START].strip())
        end = self.time_formatter.parse(fields[END].strip())
        time_range = TimeRange(start, end)

        try:
            return Cue(
                fields.get(STYLE, self.options.default_style),
                time_range,
                self.split_text(fields[TEXT]),
                layer=self._parse_layer(fields.get(LAYER, "0")),
                name=fields.get(NAME, ""),
                margin_left=self._parse_margin(fields.get(MARGIN_L)),
                margin_right=self._parse_margin(fields.get(MARGIN_R)),
                margin_vertical=self._parse_margin(fields.get(MARGIN_V)),
                effect=fields.get(EFFECT, ""),
            )
        except ValueError as e:
            raise SubtitleParseError(_("Invalid field in Dialogue line: {line}").format(line=line), e)

    def join_text(self, lines : Iterable[str]) -> str:
        """Join text lines with \\N, also converting any real line breaks inside a line"""
        return self.LINE_BREAK.join(self._NEWLINE_PATTERN.sub(lambda _match: self.LINE_BREAK, line) for line in lines)

    def _parse_layer(self, value : str) -> int:
        value = value.strip()
        if not value.isascii() or not value.isdigit():
            raise ValueError(_("Layer must be a non-negative integer, got {value!r}").format(value=value))
        return int(value)

    def _parse_margin(self, value : str|None) -> str:
        """An empty or missing margin inherits the style's margin, written as 0000"""
        value = value.strip() if value else ""
        return value or DEFAULT_MARGIN

    def _write_unknown(self, cue : Cue) -> str:
        return ""

    _field_writers : dict[str, Callable[[SsaLineSerializer, Cue], str]] = {
        LAYER: lambda self, cue: str(cue.layer),
        MARKED: lambda self, cue: self.MARKED_VALUE,
        START: lambda self, cue: self.time_formatter.format(cue.start),
        END: lambda self, cue: self.time_formatter.format(cue.end),
        STYLE: lambda self, cue: cue.style,
        NAME: lambda self, cue: cue.name,
        MARGIN_L: lambda self, cue: cue.margin_left,
        MARGIN_R: lambda self, cue: cue.margin_right,
        MARGIN_V: lambda self, cue: cue.margin_vertical,
        EFFECT: lambda self, cue: cue.effect,
        TEXT: lambda self, cue: self.join_text(cue.text_lines),
    }
