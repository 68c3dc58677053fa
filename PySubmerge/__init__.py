"""
PySubmerge - Subtitle Cue Model

Represents individual subtitle events and writes them in the exact line layouts of
SubStation Alpha ("Dialogue:" event lines) and SubRip (numbered cue blocks).

Basic Usage
-----------
    from PySubmerge import Cue, TimeRange, TimeCode, SubtitleStandard, create_serializer

    cue = Cue("Default", TimeRange(TimeCode(0), TimeCode.from_components(seconds=5)), ["Hello", "World"])

    ssa = create_serializer(SubtitleStandard.SSA)
    ssa.serialize(cue)       # Dialogue: 0,0:00:00.00,0:00:05.00,Default,,0000,0000,0000,,Hello\\NWorld

    srt = create_serializer(SubtitleStandard.SRT)
    srt.serialize(cue, 1)    # 1\\n00:00:00,000 --> 00:00:05,000\\nHello\\nWorld

    # Convert between standards, dropping fields the target cannot represent
    result = convert_cue(cue, SubtitleStandard.SSA, SubtitleStandard.SRT)
"""
from __future__ import annotations

from typing import Any

from PySubmerge.Cue import Cue
from PySubmerge.CueConverter import ConversionResult, CueConverter
from PySubmerge.CueOrdering import compare_cues, merge_cues, sort_cues
from PySubmerge.Effect import EffectDescriptor, ParseEffect
from PySubmerge.Formats.EventFormat import DEFAULT_EVENT_FORMAT, EventFormat
from PySubmerge.Formats.SrtLineSerializer import SrtLineSerializer
from PySubmerge.Formats.SrtTimeFormatter import SrtTimeFormatter
from PySubmerge.Formats.SsaLineSerializer import SsaLineSerializer
from PySubmerge.Formats.SsaTimeFormatter import SsaTimeFormatter
from PySubmerge.LineSerializer import LineSerializer
from PySubmerge.Options import Options
from PySubmerge.SerializerRegistry import SerializerRegistry
from PySubmerge.SubtitleError import (
    EventFormatError,
    FieldEncodingError,
    InvalidRangeError,
    MalformedTimeError,
    SubtitleError,
    SubtitleParseError,
    UnsupportedFieldError,
)
from PySubmerge.SubtitleStandard import SubtitleStandard
from PySubmerge.TimeCode import TimeCode
from PySubmerge.TimeFormatter import TimeFormatter
from PySubmerge.TimeRange import TimeRange
from PySubmerge.version import __version__


def create_serializer(standard : SubtitleStandard, options : Options|dict[str, Any]|None = None) -> LineSerializer:
    """
    Create the line serializer for a subtitle standard.

    Parameters
    ----------
    standard : SubtitleStandard
        The standard to write, e.g. SubtitleStandard.SSA or SubtitleStandard.SRT.
    options : Options or dict, optional
        Settings such as `default_style` and `event_format`.

    Returns
    -------
    LineSerializer
        A serializer for the standard.
    """
    return SerializerRegistry.create_serializer(standard, options=options)

def convert_cue(cue : Cue, source : SubtitleStandard, target : SubtitleStandard, options : Options|dict[str, Any]|None = None) -> ConversionResult:
    """
    Convert a cue from one standard to another.

    Returns a :class:`ConversionResult` with the converted cue and a warning for
    every populated field that the target standard could not represent.
    """
    return CueConverter(options).convert(cue, source, target)

__all__ = [
    '__version__',
    'ConversionResult',
    'Cue',
    'CueConverter',
    'DEFAULT_EVENT_FORMAT',
    'EffectDescriptor',
    'EventFormat',
    'EventFormatError',
    'FieldEncodingError',
    'InvalidRangeError',
    'LineSerializer',
    'MalformedTimeError',
    'Options',
    'ParseEffect',
    'SerializerRegistry',
    'SrtLineSerializer',
    'SrtTimeFormatter',
    'SsaLineSerializer',
    'SsaTimeFormatter',
    'SubtitleError',
    'SubtitleParseError',
    'SubtitleStandard',
    'TimeCode',
    'TimeFormatter',
    'TimeRange',
    'UnsupportedFieldError',
    'compare_cues',
    'convert_cue',
    'create_serializer',
    'merge_cues',
    'sort_cues',
]
