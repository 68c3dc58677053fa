from __future__ import annotations

from PySubmerge.Helpers.Localization import _
from PySubmerge.SubtitleError import EventFormatError

FORMAT_PREFIX = "Format:"

LAYER = "Layer"
MARKED = "Marked"
START = "Start"
END = "End"
STYLE = "Style"
NAME = "Name"
MARGIN_L = "MarginL"
MARGIN_R = "MarginR"
MARGIN_V = "MarginV"
EFFECT = "Effect"
TEXT = "Text"

KNOWN_FIELDS = (LAYER, MARKED, START, END, STYLE, NAME, MARGIN_L, MARGIN_R, MARGIN_V, EFFECT, TEXT)

DEFAULT_EVENT_FORMAT = "Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"

_canonical_names = { name.lower(): name for name in KNOWN_FIELDS }


class EventFormat:
    """
    The field order declared by the "Format:" line of an [Events] section.

    Dialogue lines must follow the declared order. The Text field is always last
    so that it can contain commas. Field names are matched case-insensitively;
    unrecognised fields are kept in position so that extended declarations still work.
    """
    def __init__(self, fields : list[str]|tuple[str, ...]|str|None = None):
        if fields is None:
            fields = DEFAULT_EVENT_FORMAT

        if isinstance(fields, str):
            fields = EventFormat._split_declaration(fields)

        self.fields : tuple[str, ...] = tuple(_canonical_names.get(field.strip().lower(), field.strip()) for field in fields)
        self._validate()

    @classmethod
    def parse(cls, declaration : str) -> EventFormat:
        """Parse a declaration such as "Format: Layer, Start, End, ..." """
        return cls(declaration)

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def unknown_fields(self) -> list[str]:
        return [field for field in self.fields if field not in KNOWN_FIELDS]

    def index_of(self, field : str) -> int:
        return self.fields.index(field)

    def declaration(self) -> str:
        return f"{FORMAT_PREFIX} {', '.join(self.fields)}"

    def __eq__(self, other):
        if not isinstance(other, EventFormat):
            return NotImplemented
        return self.fields == other.fields

    def __hash__(self):
        return hash(self.fields)

    def __str__(self) -> str:
        return ", ".join(self.fields)

    def __repr__(self) -> str:
        return f"EventFormat({str(self)!r})"

    def _validate(self) -> None:
        if not self.fields or any(not field for field in self.fields):
            raise EventFormatError(_("Event format declaration has empty fields: {fields}").format(fields=list(self.fields)))

        duplicates = sorted({ field for field in self.fields if self.fields.count(field) > 1 })
        if duplicates:
            raise EventFormatError(_("Event format declares fields more than once: {fields}").format(fields=", ".join(duplicates)))

        for required in (START, END, TEXT):
            if required not in self.fields:
                raise EventFormatError(_("Event format must declare the {field} field").format(field=required))

        if self.fields[-1] != TEXT:
            raise EventFormatError(_("Text must be the last field of the event format"))

    @staticmethod
    def _split_declaration(declaration : str) -> list[str]:
        declaration = declaration.strip()
        if declaration.startswith(FORMAT_PREFIX):
            declaration = declaration[len(FORMAT_PREFIX):]
        return [field.strip() for field in declaration.split(",")]
