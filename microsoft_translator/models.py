"""Request and response types for the translate endpoint."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TextType(str, Enum):
    """Kind of text being translated (``textType`` query parameter)."""

    PLAIN = "plain"
    HTML = "html"


@dataclass(frozen=True)
class TranslationRequest:
    """Parameters of one translate call.

    Args:
        texts: One string or an ordered sequence of strings. Each string is
            one translation unit; results come back in the same order.
        to: Target language code.
        from_lang: Source language code. When omitted the service detects it.
        text_type: Plain text or HTML. Defaults to plain.
    """

    texts: tuple[str, ...]
    to: str
    from_lang: str | None = None
    text_type: TextType = TextType.PLAIN

    def __init__(
        self,
        texts: str | Sequence[str],
        to: str,
        from_lang: str | None = None,
        text_type: TextType | str = TextType.PLAIN,
    ) -> None:
        if isinstance(texts, str):
            units = (texts,)
        else:
            units = tuple(texts)
        for unit in units:
            if not isinstance(unit, str):
                raise TypeError(f"Translation units must be str, got {type(unit).__name__}")

        object.__setattr__(self, "texts", units)
        object.__setattr__(self, "to", to)
        object.__setattr__(self, "from_lang", from_lang or None)
        # Raises ValueError for anything other than "plain" / "html"
        object.__setattr__(self, "text_type", TextType(text_type))

    def query_params(self) -> dict[str, str]:
        """Query parameters for this request, in wire order."""
        params = {"to": self.to}
        if self.from_lang:
            params["from"] = self.from_lang
        params["textType"] = self.text_type.value
        return params

    def body(self) -> list[dict[str, str]]:
        """JSON body: one ``{"text": ...}`` object per unit, in input order."""
        return [{"text": unit} for unit in self.texts]


@dataclass(frozen=True)
class Translation:
    text: str
    to: str


@dataclass(frozen=True)
class DetectedLanguage:
    """Source language inferred by the service, with its confidence."""

    language: str
    score: float


@dataclass
class TranslationResultItem:
    """Translations of a single input unit."""

    translations: list[Translation] = field(default_factory=list)
    detected_language: DetectedLanguage | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationResultItem":
        translations = [
            Translation(text=t["text"], to=t["to"]) for t in data["translations"]
        ]
        detected = data.get("detectedLanguage")
        detected_language = None
        if detected is not None:
            detected_language = DetectedLanguage(
                language=detected["language"],
                score=float(detected["score"]),
            )
        return cls(translations=translations, detected_language=detected_language)


# Positionally aligned with TranslationRequest.texts
TranslationResult = list[TranslationResultItem]


@dataclass(frozen=True)
class TranslationFailure:
    """Parsed ``{"error": {"code", "message"}}`` payload."""

    code: int
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationFailure":
        error = data["error"]
        return cls(code=int(error["code"]), message=str(error["message"]))


def parse_result(payload: Any) -> TranslationResult:
    """Parse a success payload, preserving the service's item order.

    Raises:
        TypeError, KeyError, ValueError: if the payload has an unexpected shape.
    """
    if not isinstance(payload, list):
        raise TypeError(f"Expected a JSON array, got {type(payload).__name__}")
    return [TranslationResultItem.from_dict(item) for item in payload]
