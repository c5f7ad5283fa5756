"""Internationalization support for the tutor UI.

Usage:
    from mahjong_tutor.ui.i18n import t, set_language

    set_language("ko")             # Switch to Korean
    t("msg.goodbye")               # -> "안녕히 가세요!"
    t("msg.tsumo_win", player="You")  # -> "You won by Tsumo!" in English
"""

SUPPORTED_LANGUAGES = ("en", "ko")


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "en"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language; unknown codes fall back to English."""
        cls._lang = lang if lang in SUPPORTED_LANGUAGES else "en"
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "ko":
            from mahjong_tutor.ui.locales.ko import TRANSLATIONS
        else:
            from mahjong_tutor.ui.locales.en import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()


def difficulty_name(difficulty) -> str:
    """Localized name of a Difficulty."""
    return t(f"difficulty.{difficulty.value}")
