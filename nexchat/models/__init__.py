"""Pydantic models for conversation state.

Provides type safety and validation for what the engine stores.

Models:
    - Role: Speaker of a message (user or assistant)
    - MessageKind: Text, image or audio message
    - Message: Immutable entry in a conversation
    - ConversationSession: One conversation thread with its messages
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SESSION_TITLE = "New Chat"


class Role(str, Enum):
    """Speaker of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class MessageKind(str, Enum):
    """Media kind of a message."""

    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"


class Message(BaseModel):
    """A single message in a conversation.

    Frozen once created so history cannot be edited after it is appended.

    Attributes:
        role: Who produced the message.
        content: The message text (file name for media messages).
        kind: Media kind, text by default.
        media_reference: Opaque URI of the attached media, if any.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    kind: MessageKind = MessageKind.TEXT
    media_reference: str | None = None


class ConversationSession(BaseModel):
    """One conversation thread with its ordered message history.

    Attributes:
        id: Opaque unique token.
        title: Display title.
        created_at: Creation timestamp.
        messages: Messages in append order.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str = DEFAULT_SESSION_TITLE
    created_at: datetime = Field(default_factory=datetime.now)
    messages: list[Message] = Field(default_factory=list)
