"""Language codes accepted by the Translator service."""

from microsoft_translator.errors import InvalidLanguageError

# https://learn.microsoft.com/en-us/azure/ai-services/translator/language-support
SUPPORTED_LANGUAGES: frozenset[str] = frozenset({
    "af", "sq", "am", "ar", "hy", "as", "az", "bn", "ba", "eu",
    "bho", "bs", "bg", "yue", "ca", "lzh", "zh-Hans", "zh-Hant", "sn", "hr",
    "cs", "da", "prs", "dv", "doi", "nl", "en", "et", "fo", "fj",
    "fil", "fi", "fr", "fr-ca", "gl", "ka", "de", "el", "gu", "ht",
    "ha", "he", "hi", "mww", "hu", "is", "ig", "id", "ikt", "iu",
    "iu-Latn", "ga", "it", "ja", "kn", "ks", "kk", "km", "rw", "tlh-Latn",
    "tlh-Piqd", "gom", "ko", "ku", "kmr", "ky", "lo", "lv", "lt", "ln",
    "dsb", "lug", "mk", "mai", "mg", "ms", "ml", "mt", "mi", "mr",
    "mn-Cyrl", "mn-Mong", "my", "ne", "nb", "nya", "or", "ps", "fa", "pl",
    "pt", "pa", "otq", "ro", "run", "ru", "sm", "sr-Cyrl", "sr-Latn", "st",
    "nso", "tn", "sd", "si", "sk", "sl", "so", "es", "sw", "sv",
    "ty", "ta", "tt", "te", "th", "bo", "ti", "to", "tr", "tk",
    "uk", "hsb", "ur", "ug", "uz", "vi", "cy", "xh", "yo", "yua",
    "zu",
})


def is_supported(code: str) -> bool:
    """Return True if ``code`` is a supported language code (case-sensitive)."""
    return code in SUPPORTED_LANGUAGES


def validate_language(code: str, field: str = "to") -> str:
    """Return ``code`` unchanged, or raise InvalidLanguageError.

    Args:
        code: Language code to check.
        field: Name of the request field, used in the error.
    """
    if not isinstance(code, str) or not is_supported(code):
        raise InvalidLanguageError(code, field)
    return code
