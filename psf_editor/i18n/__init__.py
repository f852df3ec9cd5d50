"""
Internationalization (i18n) module for the PSF Font Editor.

Usage:
    from ..i18n import tr, set_language

    title = tr("window.glyph_title", index=37)  # "psfe - glyph #37"
    set_language("pt_BR")
"""

from .translations import TRANSLATIONS, LANGUAGES

DEFAULT_LANGUAGE = "en"

_current_language = DEFAULT_LANGUAGE


def set_language(lang_code: str) -> bool:
    """
    Set the current language.

    Returns:
        True if language was set successfully, False if not available
    """
    global _current_language
    if lang_code in TRANSLATIONS:
        _current_language = lang_code
        return True
    return False


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def get_available_languages() -> dict:
    """Dict of {code: display_name} for each language."""
    return LANGUAGES.copy()


def _lookup(lang_code: str, keys):
    value = TRANSLATIONS[lang_code]
    for k in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(k)
    return value


def tr(key: str, **kwargs) -> str:
    """
    Get translated string for a dotted key.

    Falls back to English, then to the key itself. Format arguments that
    do not match the string leave it unformatted.
    """
    keys = key.split(".")
    value = _lookup(_current_language, keys)
    if value is None and _current_language != DEFAULT_LANGUAGE:
        value = _lookup(DEFAULT_LANGUAGE, keys)

    if value is None:
        return key

    if kwargs:
        try:
            return value.format(**kwargs)
        except (KeyError, ValueError):
            return value

    return value
