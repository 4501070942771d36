"""Client for the remote YouTube transcript service."""

import logging
import os
from urllib.parse import urlparse

import httpx

from nexchat.content.errors import InvalidContentRequest
from nexchat.content.languages import DEFAULT_LANGUAGE_CODE, is_language_code
from nexchat.engine.errors import RequestFailed

logger = logging.getLogger(__name__)

TRANSCRIPT_SERVICE_URL = os.getenv(
    "TRANSCRIPT_SERVICE_URL", "https://python-script-3.onrender.com/get-transcript/"
)


def validate_video_request(url: str, language: str) -> None:
    """Check a transcript request before it leaves the process.

    Raises:
        InvalidContentRequest: If the URL is missing or malformed, or the
            language is not a 2-letter code.
    """
    if not url or not url.strip():
        raise InvalidContentRequest("No URL provided")
    parsed = urlparse(url.strip())
    if not parsed.scheme or not parsed.netloc:
        raise InvalidContentRequest("Invalid URL format")
    if not is_language_code(language):
        raise InvalidContentRequest("Invalid language code. Must be a 2-letter ISO code")


def join_segments(segments: list[dict]) -> str:
    """Concatenate transcript segments into plain text."""
    return " ".join(
        segment["text"] for segment in segments if isinstance(segment, dict) and segment.get("text")
    )


class TranscriptClient:
    """Fetches transcripts as ordered ``{text}`` segments and flattens them."""

    def __init__(
        self,
        service_url: str = TRANSCRIPT_SERVICE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._service_url = service_url
        self._http = http_client or httpx.AsyncClient(timeout=120.0)

    async def fetch_segments(self, url: str, language: str = DEFAULT_LANGUAGE_CODE) -> list[dict]:
        """Fetch the raw transcript segments of a video.

        Raises:
            InvalidContentRequest: If the request fails validation.
            RequestFailed: On transport error or non-success status.
        """
        validate_video_request(url, language)

        try:
            response = await self._http.post(
                self._service_url,
                json={"url": url.strip(), "language": language},
            )
        except httpx.RequestError as e:
            logger.error(f"Transcript service unreachable: {e}")
            raise RequestFailed(f"Connection failed: {e}") from e

        if response.is_error:
            try:
                reason = response.json().get("error")
            except (ValueError, AttributeError):
                reason = None
            raise RequestFailed(
                f"Failed to fetch transcript: {reason or f'HTTP error {response.status_code}'}"
            )

        try:
            segments = response.json().get("transcript", [])
        except (ValueError, AttributeError) as e:
            raise RequestFailed("Invalid JSON from transcript service") from e

        if not isinstance(segments, list):
            raise RequestFailed("Transcript service returned no segments")
        return segments

    async def fetch_text(self, url: str, language: str = DEFAULT_LANGUAGE_CODE) -> str:
        """Fetch a video transcript as one plain-text string."""
        segments = await self.fetch_segments(url, language)
        text = join_segments(segments)
        logger.info(f"Fetched transcript with {len(segments)} segments ({len(text)} chars)")
        return text

    async def aclose(self) -> None:
        await self._http.aclose()


# Module-level singleton instance
_transcript_client: TranscriptClient | None = None


def get_transcript_client() -> TranscriptClient:
    """Get or create the global transcript client."""
    global _transcript_client
    if _transcript_client is None:
        _transcript_client = TranscriptClient()
    return _transcript_client
