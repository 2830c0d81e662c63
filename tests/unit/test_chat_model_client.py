"""
Unit tests for GroqChatClient using httpx.MockTransport (no network).
"""
import json

import httpx
import pytest

from healense.core.exceptions import UpstreamError
from healense.infrastructure.external.chat_model_client import GroqChatClient


def _event(content: str) -> str:
    return "data: " + json.dumps({"choices": [{"delta": {"content": content}}]}) + "\n\n"


def _client(handler, api_key: str = "test-key") -> GroqChatClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GroqChatClient(
        http_client=http_client,
        api_key=api_key,
        base_url="https://groq.test/openai/v1",
        model="test-model",
        temperature=0.2,
        max_tokens=64,
    )


async def _deltas(client: GroqChatClient, messages=None):
    return [delta async for delta in client.stream_chat(messages or [{"role": "user", "content": "hi"}])]


class TestGroqChatClient:
    """Tests for GroqChatClient.stream_chat"""

    @pytest.mark.asyncio
    async def test_streams_deltas_until_done(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            body = (
                _event("Hel")
                + ": keep-alive comment\n\n"
                + "data: " + json.dumps({"choices": [{"delta": {"role": "assistant"}}]}) + "\n\n"
                + _event("lo")
                + "data: [DONE]\n\n"
            )
            return httpx.Response(200, text=body, headers={"Content-Type": "text/event-stream"})

        deltas = await _deltas(_client(handler))

        assert deltas == ["Hel", "lo"]
        assert seen["url"] == "https://groq.test/openai/v1/chat/completions"
        assert seen["auth"] == "Bearer test-key"
        assert seen["body"]["stream"] is True
        assert seen["body"]["model"] == "test-model"
        assert seen["body"]["messages"] == [{"role": "user", "content": "hi"}]

    @pytest.mark.asyncio
    async def test_missing_done_sentinel_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=_event("cut"))

        client = _client(handler)
        received = []
        with pytest.raises(UpstreamError, match="sentinel"):
            async for delta in client.stream_chat([]):
                received.append(delta)
        assert received == ["cut"]

    @pytest.mark.asyncio
    async def test_http_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, text="rate limited")

        with pytest.raises(UpstreamError, match="429"):
            await _deltas(_client(handler))

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamError):
            await _deltas(_client(handler))

    @pytest.mark.asyncio
    async def test_error_event_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            body = "data: " + json.dumps({"error": {"message": "overloaded"}}) + "\n\n"
            return httpx.Response(200, text=body)

        with pytest.raises(UpstreamError, match="overloaded"):
            await _deltas(_client(handler))

    @pytest.mark.asyncio
    async def test_malformed_event_skipped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="data: {not json\n\n" + _event("ok") + "data: [DONE]\n\n")

        assert await _deltas(_client(handler)) == ["ok"]

    @pytest.mark.asyncio
    async def test_missing_api_key_raises_on_use(self, mock_settings):
        mock_settings.groq_api_key = ""

        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        with pytest.raises(UpstreamError, match="GROQ_API_KEY"):
            await _deltas(_client(handler, api_key=""))
