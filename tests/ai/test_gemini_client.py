"""Tests for the Gemini HTTP client.

HTTP is stubbed with httpx.MockTransport; no network access.
"""

import json

import httpx
import pytest

from reffortune.ai.client import GeminiClient, build_request_body, extract_completion_text
from reffortune.ai.errors import APIError

BASE_URL = "https://gemini.test/v1beta"


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_client(handler, *, api_key: str = "test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        model="gemini-test",
        base_url=BASE_URL,
        temperature=0.2,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestPayloadHelpers:
    """Tests for request and response payload helpers."""

    def test_build_request_body(self):
        body = build_request_body("สวัสดี", 0.7)

        assert body["contents"] == [{"role": "user", "parts": [{"text": "สวัสดี"}]}]
        assert body["generationConfig"] == {"temperature": 0.7, "responseMimeType": "application/json"}

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {}}]},
            {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
            [],
            {"candidates": ["oops"]},
            {"candidates": [{"content": "oops"}]},
            {"candidates": [{"content": {"parts": ["oops"]}}]},
        ],
    )
    def test_extract_completion_text_missing(self, payload):
        assert extract_completion_text(payload) == ""

    def test_extract_completion_text(self):
        assert extract_completion_text(gemini_payload("คำตอบ")) == "คำตอบ"


class TestGeminiClient:
    """Tests for GeminiClient.generate."""

    @pytest.mark.asyncio
    async def test_generate_success(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=gemini_payload("คำตอบ"))

        client = make_client(handler)

        assert await client.generate("คำถาม") == "คำตอบ"
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/gemini-test:generateContent"
        assert request.url.params["key"] == "test-key"
        body = json.loads(request.content)
        assert body["contents"][0]["parts"][0]["text"] == "คำถาม"
        assert body["generationConfig"]["temperature"] == 0.2

    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self):
        client = make_client(lambda request: httpx.Response(503, text="overloaded"))

        with pytest.raises(APIError) as exc_info:
            await client.generate("คำถาม")

        assert exc_info.value.code == "UPSTREAM_STATUS"
        assert exc_info.value.status_code == 503
        assert exc_info.value.details == ["overloaded"]

    @pytest.mark.asyncio
    async def test_empty_completion_raises_api_error(self):
        client = make_client(lambda request: httpx.Response(200, json={"candidates": []}))

        with pytest.raises(APIError) as exc_info:
            await client.generate("คำถาม")

        assert exc_info.value.code == "EMPTY_COMPLETION"

    @pytest.mark.asyncio
    async def test_non_json_body_raises_api_error(self):
        """Test that a 2xx body that is not JSON becomes a MALFORMED_PAYLOAD APIError."""
        client = make_client(lambda request: httpx.Response(200, text="<html>upstream proxy</html>"))

        with pytest.raises(APIError) as exc_info:
            await client.generate("คำถาม")

        assert exc_info.value.code == "MALFORMED_PAYLOAD"
        assert exc_info.value.status_code == 200
        assert exc_info.value.details == ["<html>upstream proxy</html>"]

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_request(self):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json=gemini_payload("x"))

        client = make_client(handler, api_key="")

        with pytest.raises(APIError) as exc_info:
            await client.generate("คำถาม")

        assert exc_info.value.code == "MISSING_API_KEY"
        assert client.configured is False
        assert calls == []

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(httpx.ConnectError):
            await client.generate("คำถาม")

    @pytest.mark.asyncio
    async def test_shared_http_client_is_not_closed(self):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

        async with GeminiClient(api_key="k", http_client=http_client):
            pass

        assert http_client.is_closed is False
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_http_client_is_closed(self):
        client = GeminiClient(api_key="k")

        await client.aclose()

        assert client._http.is_closed is True
