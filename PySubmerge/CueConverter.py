from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from PySubmerge.ConversionEvents import ConversionEvents
from PySubmerge.Cue import Cue, DEFAULT_MARGIN
from PySubmerge.Formats.EventFormat import EFFECT, LAYER, MARGIN_L, MARGIN_R, MARGIN_V, NAME, STYLE
from PySubmerge.LineSerializer import LineSerializer
from PySubmerge.Options import Options
from PySubmerge.SerializerRegistry import SerializerRegistry
from PySubmerge.SubtitleError import UnsupportedFieldError
from PySubmerge.SubtitleStandard import SubtitleStandard


@dataclass
class ConversionResult:
    cue : Cue
    warnings : list[UnsupportedFieldError] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class CueConverter:
    """
    Converts cues from one subtitle standard to another.

    Timing is rounded to the precision of the target standard, line breaks are
    re-expressed in the target's representation, and fields the target cannot hold
    are reset to their defaults. Dropping a populated field is reported as an
    UnsupportedFieldError warning; conversion itself always completes.
    """
    def __init__(self, options : Options|dict[str, Any]|None = None):
        self.options : Options = Options(options)
        self.events : ConversionEvents = ConversionEvents()

    def convert(self, cue : Cue, source : SubtitleStandard|LineSerializer, target : SubtitleStandard|LineSerializer) -> ConversionResult:
        source_serializer = self._get_serializer(source)
        target_serializer = self._get_serializer(target)

        time_range = target_serializer.quantize_range(cue.time_range)
        text_lines = source_serializer.split_text(source_serializer.join_text(cue.text_lines))

        warnings : list[UnsupportedFieldError] = []
        values : dict[str, Any] = {}
        for field_name, attribute, default in self._optional_fields():
            value = getattr(cue, attribute)
            if field_name not in target_serializer.SUPPORTED_FIELDS:
                if value != default:
                    warnings.append(UnsupportedFieldError(field_name, value, str(target_serializer.STANDARD)))
                value = default
            values[attribute] = value

        converted = Cue(values.pop('style'), time_range, text_lines, **values)

        for warning in warnings:
            if self.options.warn_unsupported_fields:
                logging.warning(str(warning))
            self.events.warning.send(self, warning=warning)

        self.events.converted.send(self, cue=converted)
        return ConversionResult(converted, warnings)

    def convert_cues(self, cues : Iterable[Cue], source : SubtitleStandard|LineSerializer, target : SubtitleStandard|LineSerializer) -> tuple[list[Cue], list[UnsupportedFieldError]]:
        source_serializer = self._get_serializer(source)
        target_serializer = self._get_serializer(target)

        converted : list[Cue] = []
        warnings : list[UnsupportedFieldError] = []
        for cue in cues:
            result = self.convert(cue, source_serializer, target_serializer)
            converted.append(result.cue)
            warnings.extend(result.warnings)

        return converted, warnings

    def convert_line(self, text : str, source : SubtitleStandard|LineSerializer, target : SubtitleStandard|LineSerializer, sequence_index : int|None = None) -> tuple[str, list[UnsupportedFieldError]]:
        """
        Parse a line or block in the source standard and serialize it in the target standard.
        SubRip output needs a sequence_index.
        """
        source_serializer = self._get_serializer(source)
        target_serializer = self._get_serializer(target)

        result = self.convert(source_serializer.parse(text), source_serializer, target_serializer)
        return target_serializer.serialize(result.cue, sequence_index), result.warnings

    def _get_serializer(self, standard : SubtitleStandard|LineSerializer) -> LineSerializer:
        if isinstance(standard, LineSerializer):
            return standard
        return SerializerRegistry.create_serializer(standard, options=self.options)

    def _optional_fields(self) -> list[tuple[str, str, Any]]:
        """Fields beyond timing and text, with the attribute that holds them and their default"""
        return [
            (LAYER, 'layer', 0),
            (STYLE, 'style', self.options.default_style),
            (NAME, 'name', ""),
            (MARGIN_L, 'margin_left', DEFAULT_MARGIN),
            (MARGIN_R, 'margin_right', DEFAULT_MARGIN),
            (MARGIN_V, 'margin_vertical', DEFAULT_MARGIN),
            (EFFECT, 'effect', ""),
        ]
