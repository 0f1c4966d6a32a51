"""Tests for the supported language set."""

import pytest

from microsoft_translator.errors import InvalidLanguageError
from microsoft_translator.languages import SUPPORTED_LANGUAGES, is_supported, validate_language


class TestSupportedLanguages:
    """Test membership and validation of language codes."""

    @pytest.mark.parametrize("code", ["en", "ja", "zh-Hans", "zh-Hant", "fr-ca", "sr-Latn"])
    def test_known_codes(self, code):
        assert is_supported(code) is True

    @pytest.mark.parametrize("code", ["", "xx", "english", "EN", "zh"])
    def test_unknown_codes(self, code):
        assert is_supported(code) is False

    def test_set_is_immutable(self):
        assert isinstance(SUPPORTED_LANGUAGES, frozenset)

    def test_validate_returns_code(self):
        assert validate_language("ja") == "ja"

    def test_validate_raises(self):
        """Invalid codes raise InvalidLanguageError, which is also a ValueError."""
        with pytest.raises(InvalidLanguageError) as exc_info:
            validate_language("klingon", "from")
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.field == "from"

    def test_validate_rejects_none(self):
        with pytest.raises(InvalidLanguageError):
            validate_language(None)
