"""
LibreTranslate translation provider.

Talks to a LibreTranslate server over HTTP using httpx.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from translate_docs_ocr.models import TranslationResult
from translate_docs_ocr.translation.base import TranslationProvider

logger = logging.getLogger(__name__)


class LibreTranslateClient(TranslationProvider):
    """
    Client for the LibreTranslate ``/translate`` endpoint.

    One request per call, with no retry or backoff. Non-2xx responses,
    error payloads and transport errors all become failed results.
    """

    def __init__(
        self,
        base_url: str,
        source_language: str = "ru",
        target_language: str = "en",
        api_key: str = "",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize LibreTranslate client.

        Args:
            base_url: Service base URL, e.g. http://localhost:5000.
            source_language: Source language code.
            target_language: Target language code.
            api_key: Optional API key sent with each request.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport override.
        """
        self._base_url = base_url.rstrip("/")
        self._source = source_language
        self._target = target_language
        self._api_key = api_key

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "libretranslate"

    @property
    def source_language(self) -> str:
        return self._source

    @property
    def target_language(self) -> str:
        return self._target

    async def __aenter__(self) -> LibreTranslateClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _payload(self, text: str) -> dict[str, str]:
        payload = {
            "q": text,
            "source": self._source,
            "target": self._target,
            "format": "text",
        }
        if self._api_key:
            payload["api_key"] = self._api_key
        return payload

    async def translate(self, text: str) -> TranslationResult:
        try:
            response = await self._client.post("/translate", json=self._payload(text))
        except httpx.HTTPError as e:
            logger.debug("Transport error from %s: %s", self._base_url, e)
            return TranslationResult.failure(f"transport error: {e}")

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_error:
            detail = data.get("error") if isinstance(data, dict) else None
            return TranslationResult.failure(
                f"HTTP {response.status_code}: {detail or response.reason_phrase}"
            )

        if not isinstance(data, dict):
            return TranslationResult.failure("malformed response: expected a JSON object")

        if "error" in data:
            return TranslationResult.failure(str(data["error"]))

        translated = data.get("translatedText")
        if not isinstance(translated, str):
            return TranslationResult.failure("malformed response: missing translatedText")

        return TranslationResult.success(translated)
