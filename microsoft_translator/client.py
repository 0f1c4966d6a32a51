"""Translator client for the Azure Translator ``translate`` endpoint."""

import json
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from microsoft_translator.errors import TranslationServiceError, TransportError
from microsoft_translator.languages import validate_language
from microsoft_translator.models import (
    TextType,
    TranslationFailure,
    TranslationRequest,
    TranslationResult,
    parse_result,
)
from microsoft_translator.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

BASE_URL = "https://api.cognitive.microsofttranslator.com/translate?api-version=3.0"
CONTENT_TYPE = "application/json; charset=UTF-8"


class Translator:
    """Translates text through the Azure Translator service.

    The client keeps no per-call state, so one instance can serve any
    number of concurrent ``translate`` calls.

    Args:
        api_key: Subscription key (``Ocp-Apim-Subscription-Key``).
        region: Resource region (``Ocp-Apim-Subscription-Region``). Pass
            None only for single-region global resources; regional and
            multi-service resources reject requests without it.
        transport: HTTP transport. Defaults to an HttpxTransport owned and
            closed by this client.
        base_url: Endpoint URL including ``api-version``.
        timeout: Timeout in seconds for the default transport.
    """

    def __init__(
        self,
        api_key: str,
        region: str | None,
        *,
        transport: Transport | None = None,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")

        self._api_key: str = api_key
        self._region: str | None = region or None
        self._base_url: httpx.URL = httpx.URL(base_url)
        self._owns_transport: bool = transport is None
        self._transport: Transport = transport or HttpxTransport(timeout=timeout)

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> "Translator":
        """Build a client from AZURE_TRANSLATOR_* environment settings."""
        from microsoft_translator import config

        if not config.AZURE_TRANSLATOR_KEY:
            raise ValueError("AZURE_TRANSLATOR_KEY is required")

        return cls(
            config.AZURE_TRANSLATOR_KEY,
            config.AZURE_TRANSLATOR_REGION,
            transport=transport,
            base_url=config.AZURE_TRANSLATOR_ENDPOINT,
            timeout=config.AZURE_TRANSLATOR_TIMEOUT,
        )

    @property
    def region(self) -> str | None:
        return self._region

    def build_url(self, request: TranslationRequest) -> str:
        """Return the endpoint URL with the request's query parameters."""
        return str(self._base_url.copy_merge_params(request.query_params()))

    def build_headers(self) -> dict[str, str]:
        headers = {"Ocp-Apim-Subscription-Key": self._api_key}
        if self._region:
            headers["Ocp-Apim-Subscription-Region"] = self._region
        headers["Content-Type"] = CONTENT_TYPE
        return headers

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate every unit of ``request`` into ``request.to``.

        Args:
            request: Texts and language options.

        Returns:
            One result item per input unit, in input order.

        Raises:
            InvalidLanguageError: ``to`` or ``from_lang`` is not supported.
                Raised before anything is sent.
            TranslationServiceError: the service returned an error payload.
            TransportError: the request failed or the response was unreadable.
        """
        validate_language(request.to, "to")
        if request.from_lang is not None:
            validate_language(request.from_lang, "from")

        url = self.build_url(request)
        body = json.dumps(request.body(), ensure_ascii=False).encode("utf-8")

        logger.debug(
            "Translating %d unit(s): from=%s to=%s textType=%s",
            len(request.texts),
            request.from_lang or "auto",
            request.to,
            request.text_type.value,
        )
        response = await self._transport.send(url, "POST", self.build_headers(), body)
        return self._handle_payload(response.status, response.json_body)

    async def translate_text(
        self,
        texts: str | Sequence[str],
        to: str,
        from_lang: str | None = None,
        text_type: TextType | str = TextType.PLAIN,
    ) -> TranslationResult:
        """Shortcut for ``translate(TranslationRequest(...))``."""
        request = TranslationRequest(texts, to, from_lang=from_lang, text_type=text_type)
        return await self.translate(request)

    @staticmethod
    def _handle_payload(status: int, payload: Any) -> TranslationResult:
        if isinstance(payload, dict) and "error" in payload:
            try:
                failure = TranslationFailure.from_dict(payload)
            except (KeyError, TypeError, ValueError) as exc:
                raise TransportError(
                    f"Malformed error payload (HTTP {status})", cause=exc
                ) from exc
            logger.error(
                "Translator service error: HTTP %s, code=%s: %s",
                status,
                failure.code,
                failure.message,
            )
            raise TranslationServiceError(failure.code, failure.message, status=status)

        if not 200 <= status < 300:
            logger.error("Translator returned HTTP %s without an error payload", status)
            raise TransportError(f"Unexpected HTTP status {status}")

        try:
            return parse_result(payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Unexpected translate response shape (HTTP %s)", status)
            raise TransportError("Unexpected response shape", cause=exc) from exc

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> "Translator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
