"""Gemini generateContent client.

One call per ``generate``; retry policy lives in ``reffortune.ai.reading``.
Transport failures (``httpx.TransportError``) propagate to the caller.
"""

from typing import Any

import httpx
from loguru import logger

from reffortune.ai.errors import APIError
from reffortune.config.settings import settings

MAX_ERROR_DETAIL_CHARS = 500


def build_request_body(prompt: str, temperature: float) -> dict[str, Any]:
    return {
        "generationConfig": {
            "temperature": temperature,
            "responseMimeType": "application/json",
        },
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }


def extract_completion_text(payload: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` or "" when absent or malformed."""
    if not isinstance(payload, dict):
        return ""
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    parts = (content.get("parts") if isinstance(content, dict) else None) or []
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return ""
    text = parts[0].get("text")
    return text if isinstance(text, str) else ""


class GeminiClient:
    """Async client for a single Gemini model."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        temperature: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize client.

        Args:
            api_key: Gemini API key (defaults to settings)
            model: Model name (defaults to settings)
            base_url: API base URL (defaults to settings)
            temperature: Sampling temperature (defaults to settings)
            http_client: Shared HTTP client. When omitted the client owns one
                and closes it in ``aclose``.
        """
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.temperature = settings.gemini_temperature if temperature is None else temperature
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=settings.gemini_timeout_seconds)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the completion text.

        Raises:
            APIError: Missing API key, non-2xx status, non-JSON body or empty completion
            httpx.TransportError: Network failure
        """
        if not self.configured:
            raise APIError("MISSING_API_KEY", ["GEMINI_API_KEY is not set"])

        logger.debug("gemini_request", model=self.model, prompt_chars=len(prompt))
        response = await self._http.post(
            self.endpoint,
            params={"key": self.api_key},
            json=build_request_body(prompt, self.temperature),
        )

        if response.is_error:
            logger.warning("gemini_error_status", model=self.model, status_code=response.status_code)
            raise APIError(
                "UPSTREAM_STATUS",
                [response.text[:MAX_ERROR_DETAIL_CHARS]],
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("gemini_malformed_payload", model=self.model, status_code=response.status_code)
            raise APIError(
                "MALFORMED_PAYLOAD",
                [response.text[:MAX_ERROR_DETAIL_CHARS]],
                status_code=response.status_code,
            ) from e

        text = extract_completion_text(payload)
        if not text:
            raise APIError("EMPTY_COMPLETION", ["Gemini returned no candidate text"], status_code=response.status_code)

        logger.debug("gemini_response", model=self.model, completion_chars=len(text))
        return text

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
