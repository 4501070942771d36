"""FastAPI dependencies for the shared engine and collaborators.

The HTTP API serves a single demo user, so one engine holds all sessions.
Tests replace these through ``app.dependency_overrides``.
"""

from nexchat.content.service import ContentService
from nexchat.content.transcript import get_transcript_client
from nexchat.engine import ConversationEngine
from nexchat.llm.client import get_gemini_client

_engine: ConversationEngine | None = None


def get_engine() -> ConversationEngine:
    """Get or create the engine backed by the Gemini client."""
    global _engine
    if _engine is None:
        _engine = ConversationEngine(model=get_gemini_client())
    return _engine


def get_content_service() -> ContentService:
    return ContentService(get_gemini_client())


__all__ = ["get_content_service", "get_engine", "get_transcript_client"]
