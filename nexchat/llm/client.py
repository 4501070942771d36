"""Gemini REST client used as the engine's model collaborator.

Non-streaming: every call returns one complete text. Transport and endpoint
failures surface as RequestFailed so callers only handle one error type.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from nexchat.engine.errors import RequestFailed
from nexchat.llm.config import GeminiConfig, get_gemini_config
from nexchat.models import Message, Role

logger = logging.getLogger(__name__)


def build_contents(messages: Sequence[Message]) -> list[dict[str, Any]]:
    """Convert session messages to Gemini ``contents`` entries.

    Assistant messages map to role "model", user messages to role "user".
    Media messages are sent as their text content.
    """
    return [
        {
            "role": "model" if msg.role is Role.ASSISTANT else "user",
            "parts": [{"text": msg.content}],
        }
        for msg in messages
    ]


def extract_text(payload: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` or "" when absent."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def _error_detail(response: httpx.Response) -> str:
    try:
        message = response.json().get("error", {}).get("message")
    except (ValueError, AttributeError):
        message = None
    return f"HTTP {response.status_code}: {message or response.reason_phrase or 'request failed'}"


class GeminiClient:
    """Async client for the Gemini generateContent endpoint.

    Wraps httpx with:
    - Fixed generation parameters and safety settings from GeminiConfig
    - Role mapping from session messages to Gemini contents
    - Uniform RequestFailed errors for transport and HTTP failures
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional Gemini configuration.
                    Loads from environment if not provided.
            http_client: Optional httpx client, mainly for tests.
        """
        self._config = config or get_gemini_config()
        self._http = http_client or httpx.AsyncClient(timeout=self._config.timeout)

    async def generate(self, messages: Sequence[Message]) -> str:
        """Get the model reply for a full conversation history.

        Args:
            messages: Ordered session messages, latest user message last.

        Returns:
            Complete reply text, "" if the response carries none.

        Raises:
            RequestFailed: On transport error or non-success status.
        """
        return await self._post(build_contents(messages))

    async def generate_from_prompt(self, prompt: str) -> str:
        """Get the model reply for a single standalone prompt."""
        return await self._post([{"role": "user", "parts": [{"text": prompt}]}])

    async def _post(self, contents: list[dict[str, Any]]) -> str:
        body = {
            "contents": contents,
            "generationConfig": self._config.generation_config(),
            "safetySettings": self._config.safety_settings(),
        }

        try:
            response = await self._http.post(
                self._config.endpoint,
                params={"key": self._config.api_key},
                json=body,
            )
        except httpx.RequestError as e:
            logger.error(f"Gemini request failed: {e}")
            raise RequestFailed(f"Connection failed: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            logger.error(f"Gemini returned an error: {detail}")
            raise RequestFailed(detail)

        try:
            payload = response.json()
        except ValueError as e:
            raise RequestFailed("Invalid JSON in model response") from e

        text = extract_text(payload)
        if not text:
            logger.warning("Gemini response contained no text")
        return text

    async def aclose(self) -> None:
        await self._http.aclose()


# Module-level singleton instance
_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Get or create the global Gemini client.

    Returns:
        The GeminiClient instance.
    """
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client
