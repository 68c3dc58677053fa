from __future__ import annotations

from PySubmerge.Cue import Cue
from PySubmerge.Formats.EventFormat import END, START, TEXT
from PySubmerge.Formats.SrtTimeFormatter import SrtTimeFormatter
from PySubmerge.Helpers.Localization import _
from PySubmerge.LineSerializer import LineSerializer
from PySubmerge.SubtitleError import FieldEncodingError, SubtitleParseError
from PySubmerge.SubtitleStandard import SubtitleStandard
from PySubmerge.TimeFormatter import TimeFormatter


class SrtLineSerializer(LineSerializer):
    """
    Writes cues as SubRip blocks: sequence number, time range, then one physical line per text line.

    SubRip has no layer, style, name, margin or effect fields. Cues read from SubRip
    get the default values for those fields. Separating blocks with blank lines is
    left to whoever assembles the document.
    """

    STANDARD = SubtitleStandard.SRT
    SUPPORTED_EXTENSIONS = {'.srt': 10}
    SUPPORTED_FIELDS = frozenset({ START, END, TEXT })
    LINE_BREAK = "\n"

    time_formatter : SrtTimeFormatter

    def create_time_formatter(self) -> TimeFormatter:
        return SrtTimeFormatter()

    def serialize(self, cue : Cue, sequence_index : int|None = None) -> str:
        """
        Compose a SubRip block for the cue. The caller assigns the 1-based sequence index.

        Raises FieldEncodingError if the cue has no text or a text line is blank,
        since a blank line would end the block early.
        """
        if isinstance(sequence_index, bool) or not isinstance(sequence_index, int) or sequence_index < 1:
            raise ValueError(_("SRT cues need a sequence index of 1 or more, got {index!r}").format(index=sequence_index))

        text_lines : list[str] = []
        for line in cue.text_lines:
            text_lines.extend(self._physical_lines(line))

        if not text_lines:
            raise FieldEncodingError(TEXT, "", _("SRT cues must have at least one line of text"))

        for line in text_lines:
            if not line.strip():
                raise FieldEncodingError(TEXT, line, _("SRT cues cannot contain blank text lines"))

        lines = [ str(sequence_index), self.time_formatter.format_range(cue.time_range) ]
        lines.extend(text_lines)
        return self.LINE_BREAK.join(lines)

    def parse(self, text : str) -> Cue:
        _index, cue = self.parse_block(text)
        return cue

    def parse_block(self, text : str) -> tuple[int, Cue]:
        """
        Parse a SubRip block, returning its sequence index and the cue.
        """
        if not isinstance(text, str):
            raise SubtitleParseError(_("SRT block must be a string, got {type}").format(type=type(text).__name__))

        lines = self._physical_lines(text.strip("\r\n"))
        if len(lines) < 2:
            raise SubtitleParseError(_("SRT block needs a sequence number and a time range: {block!r}").format(block=text))

        index_text = lines[0].lstrip('\ufeff').strip()
        if not index_text.isascii() or not index_text.isdigit() or int(index_text) < 1:
            raise SubtitleParseError(_("Invalid SRT sequence number: {index!r}").format(index=lines[0]))

        time_range = self.time_formatter.parse_range(lines[1].strip())

        cue = Cue(self.options.default_style, time_range, lines[2:])
        return int(index_text), cue

    @staticmethod
    def _physical_lines(text : str) -> list[str]:
        return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
