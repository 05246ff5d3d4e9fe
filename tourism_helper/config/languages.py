"""Speech locale and voice tables."""

from typing import Dict, Optional

# Country code -> speech locale
LOCALES: Dict[str, str] = {
    "TR": "tr-TR",
    "GE": "ka-GE",
    "RU": "ru-RU",
    "AE": "ar-SA",
}

DEFAULT_LOCALE = "en-US"

# Speech locale -> Edge TTS neural voice
VOICES: Dict[str, str] = {
    "tr-TR": "tr-TR-EmelNeural",
    "ka-GE": "ka-GE-EkaNeural",
    "ru-RU": "ru-RU-SvetlanaNeural",
    "ar-SA": "ar-SA-ZariyahNeural",
    "en-US": "en-US-AriaNeural",
}


def resolve_locale(country_code: Optional[str]) -> str:
    """
    Map a country code to the locale used for pronunciation.

    Args:
        country_code: Short country identifier such as "TR"

    Returns:
        Speech locale, ``DEFAULT_LOCALE`` for unmapped or empty codes
    """
    if not country_code:
        return DEFAULT_LOCALE
    return LOCALES.get(country_code, DEFAULT_LOCALE)


def resolve_voice(locale: str) -> str:
    """Get the Edge TTS voice for a locale, falling back to the default locale's voice."""
    return VOICES.get(locale, VOICES[DEFAULT_LOCALE])
