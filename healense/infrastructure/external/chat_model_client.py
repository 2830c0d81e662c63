"""Streaming chat-completion clients for the language model."""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx

from ...core.config import get_settings
from ...core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

# Terminal sentinel of OpenAI-compatible streams
STREAM_DONE = "[DONE]"


class ChatModelClient(ABC):
    """
    Contract for a streaming language model.

    stream_chat yields text deltas and finishes normally only after the
    model's end-of-stream sentinel; any other ending raises UpstreamError.
    """

    @abstractmethod
    def stream_chat(self, messages: List[Dict[str, Any]]) -> AsyncIterator[str]:
        """Stream the assistant reply to `messages` as text deltas"""
        pass


class GroqChatClient(ChatModelClient):
    """
    Client for Groq's OpenAI-compatible chat completions API in streaming mode.

    Handles:
    - Posting the assembled prompt (text and image_url content parts)
    - Reading server-sent `data:` lines until `data: [DONE]`
    - Mapping HTTP and transport failures to UpstreamError
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.http_client = http_client
        self.api_key = api_key if api_key is not None else settings.groq_api_key
        self.chat_url = (base_url or settings.groq_base_url).rstrip("/") + "/chat/completions"
        self.model = model or settings.llm_model
        self.temperature = temperature if temperature is not None else settings.llm_temperature
        self.max_tokens = max_tokens or settings.llm_max_tokens

        if not self.api_key:
            logger.warning("GROQ_API_KEY not found in environment variables")

    async def stream_chat(self, messages: List[Dict[str, Any]]) -> AsyncIterator[str]:
        if not self.api_key:
            raise UpstreamError("GROQ_API_KEY not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "text/event-stream",
        }
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stream": True,
        }

        logger.debug(f"Calling Groq chat API with model: {self.model}")

        try:
            async with self.http_client.stream("POST", self.chat_url, headers=headers, json=payload) as response:
                if response.status_code >= 400:
                    body = (await response.aread()).decode("utf-8", errors="replace")
                    logger.error(f"HTTP error from Groq chat API: {response.status_code} - {body[:500]}")
                    raise UpstreamError(f"Groq API error: {response.status_code}")

                async for line in response.aiter_lines():
                    if not line.startswith("data:"):
                        continue
                    data = line[len("data:"):].strip()
                    if data == STREAM_DONE:
                        return
                    delta = self._parse_delta(data)
                    if delta:
                        yield delta
        except httpx.TimeoutException:
            raise UpstreamError("Timeout while streaming from Groq chat API")
        except httpx.HTTPError as e:
            raise UpstreamError(f"Transport error from Groq chat API: {e}")

        raise UpstreamError("Groq stream closed without end-of-stream sentinel")

    @staticmethod
    def _parse_delta(data: str) -> Optional[str]:
        """Extract choices[0].delta.content from one stream event."""
        try:
            event = json.loads(data)
        except json.JSONDecodeError:
            logger.warning(f"Skipping malformed stream event: {data[:200]}")
            return None

        if isinstance(event.get("error"), dict):
            raise UpstreamError(f"Groq stream error: {event['error'].get('message', 'unknown')}")

        choices = event.get("choices") or [{}]
        delta = choices[0].get("delta") or {}
        content = delta.get("content")
        return content if isinstance(content, str) else None
