from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from PySubmerge.Cue import Cue
from PySubmerge.Helpers.Localization import _
from PySubmerge.Options import Options
from PySubmerge.SubtitleError import SubtitleError
from PySubmerge.SubtitleStandard import SubtitleStandard
from PySubmerge.TimeFormatter import TimeFormatter
from PySubmerge.TimeRange import TimeRange


class LineSerializer(ABC):
    """
    Abstract interface for writing a cue in the text layout of one subtitle standard and reading it back.

    Each variant owns the time formatter of its standard and its line-break representation.
    """

    STANDARD : SubtitleStandard
    SUPPORTED_EXTENSIONS : dict[str, int] = {}
    SUPPORTED_FIELDS : frozenset[str] = frozenset()
    LINE_BREAK : str = "\n"

    def __init__(self, options : Options|dict[str, Any]|None = None):
        self.options : Options = Options(options)
        self.time_formatter : TimeFormatter = self.create_time_formatter()

    @abstractmethod
    def create_time_formatter(self) -> TimeFormatter:
        raise NotImplementedError

    @abstractmethod
    def serialize(self, cue : Cue, sequence_index : int|None = None) -> str:
        """Compose the text representation of a cue"""
        raise NotImplementedError

    @abstractmethod
    def parse(self, text : str) -> Cue:
        """Parse the text representation of a cue. Fields the standard lacks get their defaults."""
        raise NotImplementedError

    def join_text(self, lines : Iterable[str]) -> str:
        return self.LINE_BREAK.join(lines)

    def split_text(self, text : str) -> list[str]:
        """An empty text field holds no lines, so a cue whose only line is empty reads back with none"""
        return text.split(self.LINE_BREAK) if text else []

    def quantize_range(self, time_range : TimeRange) -> TimeRange:
        """Round both ends of a range to the precision of this standard"""
        return TimeRange(self.time_formatter.quantize(time_range.start), self.time_formatter.quantize(time_range.end))

    def parse_all(self, items : Iterable[str]) -> tuple[list[Cue], list[SubtitleError]]:
        """
        Parse several lines or blocks, collecting errors for malformed items instead of stopping at the first one
        """
        cues : list[Cue] = []
        errors : list[SubtitleError] = []
        for item in items:
            try:
                cues.append(self.parse(item))
            except SubtitleError as e:
                logging.warning(_("Skipping malformed {standard} cue: {error}").format(standard=self.STANDARD, error=str(e)))
                errors.append(e)

        return cues, errors

    def get_file_extensions(self) -> list[str]:
        """Get file extensions this standard is used for"""
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        return self.__class__.SUPPORTED_EXTENSIONS.copy()
