from microsoft_translator.client import BASE_URL, Translator
from microsoft_translator.errors import (
    InvalidLanguageError,
    TranslationServiceError,
    TranslatorError,
    TransportError,
)
from microsoft_translator.languages import SUPPORTED_LANGUAGES, is_supported
from microsoft_translator.models import (
    DetectedLanguage,
    TextType,
    Translation,
    TranslationFailure,
    TranslationRequest,
    TranslationResult,
    TranslationResultItem,
)
from microsoft_translator.transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "BASE_URL",
    "SUPPORTED_LANGUAGES",
    "DetectedLanguage",
    "HttpxTransport",
    "InvalidLanguageError",
    "TextType",
    "Translation",
    "TranslationFailure",
    "TranslationRequest",
    "TranslationResult",
    "TranslationResultItem",
    "TranslationServiceError",
    "Translator",
    "TranslatorError",
    "Transport",
    "TransportError",
    "TransportResponse",
    "is_supported",
]
