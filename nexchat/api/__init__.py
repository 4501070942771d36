"""FastAPI endpoints for NexChat.

HTTP and streaming routes over the conversation engine and content services.
Supports Server-Sent Events for the typewriter reveal.

Endpoints:
    - GET /health: Service health status
    - /sessions: Create, list, switch and delete sessions
    - POST /chat, /chat/stream, /chat/stop: Submit messages, stream reveals
    - /content: Transcript, translation, analysis, Q&A and PDF extraction
"""

from nexchat.api.app import app, create_app

__all__ = ["app", "create_app"]
