from PySubmerge.Helpers.Localization import _


class SubtitleError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message}: {self.error}" if self.message else str(self.error)
        return self.message or super().__str__()

class SubtitleParseError(SubtitleError):
    """A subtitle line or block could not be parsed"""
    pass

class MalformedTimeError(SubtitleError):
    """Time text does not match the pattern of its subtitle standard"""
    def __init__(self, text, standard : str|None = None, error : Exception|None = None):
        message = _("Malformed {standard} time: '{text}'").format(standard=standard or "", text=text)
        super().__init__(message, error)
        self.text = text
        self.standard = standard

class InvalidRangeError(SubtitleError):
    def __init__(self, start, end):
        super().__init__(_("Invalid time range: start {start} is after end {end}").format(start=start, end=end))
        self.start = start
        self.end = end

class FieldEncodingError(SubtitleError):
    """A field value contains a character that would corrupt the line layout"""
    def __init__(self, field : str, value : str, message : str|None = None):
        message = message or _("Field {field} cannot be encoded: {value!r}").format(field=field, value=value)
        super().__init__(message)
        self.field = field
        self.value = value

class UnsupportedFieldError(SubtitleError):
    """
    The target standard cannot represent a populated field.
    Reported as a warning by conversions, which replace the field with its default.
    """
    def __init__(self, field : str, value, standard : str):
        super().__init__(_("{standard} does not support field {field} (value {value!r} was dropped)").format(
            standard=standard, field=field, value=value))
        self.field = field
        self.value = value
        self.standard = standard

class EventFormatError(SubtitleError):
    """The event format declaration is not usable"""
    pass
