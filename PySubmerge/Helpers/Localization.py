import gettext
import logging
import os

_domain = 'pysubmerge'
_locales_dir = os.getenv('PYSUBMERGE_LOCALES', os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'locales'))

_translation : gettext.NullTranslations = gettext.translation(_domain, localedir=_locales_dir, fallback=True)

def set_language(language : str|None) -> None:
    """
    Switch the active message catalogue. Unknown languages fall back to untranslated messages.
    """
    global _translation
    languages = [language] if language else None
    _translation = gettext.translation(_domain, localedir=_locales_dir, languages=languages, fallback=True)
    if language and not isinstance(_translation, gettext.GNUTranslations):
        logging.debug(f"No message catalogue for '{language}', using default messages")

def _(message : str) -> str:
    return _translation.gettext(message)

def tr(context : str, message : str) -> str:
    """Translate a message with a disambiguating context"""
    return _translation.pgettext(context, message)
