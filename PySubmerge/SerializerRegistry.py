import importlib
import inspect
import os
import pkgutil
from pathlib import Path
from typing import Any

from PySubmerge.Helpers.Localization import _
from PySubmerge.LineSerializer import LineSerializer
from PySubmerge.Options import Options
from PySubmerge.SubtitleStandard import SubtitleStandard


class SerializerRegistry:
    """Manages discovery and lookup of line serializers by standard and file extension."""

    _serializers : dict[str, type[LineSerializer]] = {}
    _priorities : dict[str, int] = {}
    _standards : dict[SubtitleStandard, type[LineSerializer]] = {}
    _standard_priorities : dict[SubtitleStandard, int] = {}
    _discovered : bool = False

    @classmethod
    def register_serializer(cls, serializer_class : type[LineSerializer]) -> None:
        priorities = serializer_class.SUPPORTED_EXTENSIONS
        for ext, priority in priorities.items():
            ext = ext.lower()
            if ext not in cls._serializers or priority >= cls._priorities[ext]:
                cls._serializers[ext] = serializer_class
                cls._priorities[ext] = priority

        # A standard is served by its highest priority serializer, ties go to the latest registration
        standard = serializer_class.STANDARD
        standard_priority = max(priorities.values(), default=0)
        if standard not in cls._standards or standard_priority >= cls._standard_priorities[standard]:
            cls._standards[standard] = serializer_class
            cls._standard_priorities[standard] = standard_priority

    @classmethod
    def get_serializer_by_extension(cls, extension : str) -> type[LineSerializer]:
        cls._ensure_discovered()
        ext = extension.lower()
        if ext not in cls._serializers:
            raise ValueError(_("Unknown subtitle format: {extension}. Available formats: {available}").format(extension=extension, available=cls.list_available_formats()))
        return cls._serializers[ext]

    @classmethod
    def get_serializer_by_standard(cls, standard : SubtitleStandard) -> type[LineSerializer]:
        cls._ensure_discovered()
        if standard not in cls._standards:
            raise ValueError(_("No serializer registered for {standard}").format(standard=standard))
        return cls._standards[standard]

    @classmethod
    def create_serializer(cls, standard : SubtitleStandard|None = None, extension : str|None = None, filename : str|None = None, options : Options|dict[str, Any]|None = None) -> LineSerializer:
        """Instantiate a line serializer for the given standard, extension or filename."""
        if standard is not None:
            return cls.get_serializer_by_standard(standard)(options)

        if extension is None and filename is not None:
            extension = os.path.splitext(filename)[1].lower()

        if extension is None or not extension:
            raise ValueError(
                _("Format cannot be deduced from filename or extension '{name}'. Available formats: {formats}").format(
                    name=filename or extension or "None", formats=cls.list_available_formats()))

        serializer_cls = cls.get_serializer_by_extension(extension)
        return serializer_cls(options)

    @classmethod
    def enumerate_formats(cls) -> list[str]:
        cls._ensure_discovered()
        return sorted(cls._serializers.keys())

    @classmethod
    def list_available_formats(cls) -> str:
        formats = cls.enumerate_formats()
        return _("None") if not formats else ", ".join(formats)

    @classmethod
    def clear(cls) -> None:
        cls._serializers.clear()
        cls._priorities.clear()
        cls._standards.clear()
        cls._standard_priorities.clear()
        cls._discovered = False

    @classmethod
    def disable_autodiscovery(cls) -> None:
        cls.clear()
        cls._discovered = True

    @classmethod
    def discover(cls) -> None:
        package_path = Path(__file__).parent / "Formats"
        for _finder, module_name, _ispkg in pkgutil.iter_modules([str(package_path)]):
            module = importlib.import_module(f"PySubmerge.Formats.{module_name}")
            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, LineSerializer) and obj is not LineSerializer and not inspect.isabstract(obj):
                    cls.register_serializer(obj)
        cls._discovered = True

    @classmethod
    def _ensure_discovered(cls) -> None:
        if not cls._discovered:
            cls.discover()
