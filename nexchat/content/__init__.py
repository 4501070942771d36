"""Content sources and prompts for the chat-with-content tool.

Responsibilities:
    - Transcript fetch from the remote YouTube transcript service
    - Translation and document analysis prompts
    - Grounded question answering for the conversation engine

Content only ever reaches the engine as plain strings.
"""

from nexchat.content.errors import InvalidContentRequest
from nexchat.content.languages import LANGUAGES
from nexchat.content.service import ContentService, GroundedResponder
from nexchat.content.transcript import TranscriptClient

__all__ = [
    "LANGUAGES",
    "ContentService",
    "GroundedResponder",
    "InvalidContentRequest",
    "TranscriptClient",
]
