"""Conversation core shared by the chat and content-chat front-ends.

Responsibilities:
    - In-memory conversation sessions (create, switch, delete)
    - A single in-flight model request per engine
    - Typewriter reveal of replies with cooperative cancellation
    - Fallback reply when the model call fails

Has no knowledge of HTTP or the UI. The model is injected as a collaborator.
"""

from nexchat.engine.engine import FALLBACK_REPLY, ChatModel, ConversationEngine
from nexchat.engine.errors import (
    Busy,
    EmptyInput,
    EngineError,
    NotFound,
    RequestFailed,
)
from nexchat.engine.reveal import Revealer, RevealState, RevealStatus

__all__ = [
    "FALLBACK_REPLY",
    "Busy",
    "ChatModel",
    "ConversationEngine",
    "EmptyInput",
    "EngineError",
    "NotFound",
    "RequestFailed",
    "RevealState",
    "RevealStatus",
    "Revealer",
]
