from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from PySubmerge.Cue import DEFAULT_STYLE
from PySubmerge.Formats.EventFormat import DEFAULT_EVENT_FORMAT


class SettingsType(dict[str, Any]):
    """Settings dictionary with typed accessors"""

    def get_str(self, key : str, default : str|None = None) -> str|None:
        value = self.get(key, default)
        return str(value) if value is not None else None

    def get_bool(self, key : str, default : bool = False) -> bool:
        value = self.get(key, default)
        if isinstance(value, str):
            return value.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(value)


default_settings = SettingsType({
    'default_style': os.getenv('PYSUBMERGE_DEFAULT_STYLE', DEFAULT_STYLE),
    'event_format': os.getenv('PYSUBMERGE_EVENT_FORMAT', DEFAULT_EVENT_FORMAT),
    'warn_unsupported_fields': os.getenv('PYSUBMERGE_WARN_UNSUPPORTED_FIELDS', 'True'),
})


class Options:
    """
    Settings for serializers and converters, seeded from defaults and environment variables
    """
    def __init__(self, options : Options|dict[str, Any]|None = None, **settings : Any):
        self.options : SettingsType = deepcopy(default_settings)

        if isinstance(options, Options):
            self.options.update(options.options)
        elif options:
            self.options.update(options)

        self.options.update({ key: value for key, value in settings.items() if value is not None })

    def get(self, option : str, default : Any = None) -> Any:
        return self.options.get(option, default)

    def set(self, option : str, value : Any) -> None:
        self.options[option] = value

    @property
    def default_style(self) -> str:
        return self.options.get_str('default_style') or DEFAULT_STYLE

    @property
    def event_format(self) -> str:
        return self.options.get_str('event_format') or DEFAULT_EVENT_FORMAT

    @property
    def warn_unsupported_fields(self) -> bool:
        return self.options.get_bool('warn_unsupported_fields', True)

    def __repr__(self) -> str:
        return f"Options({dict(self.options)!r})"
