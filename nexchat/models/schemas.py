from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from nexchat.content.languages import DEFAULT_LANGUAGE_CODE, DEFAULT_TARGET_LANGUAGE
from nexchat.models import ConversationSession, Message


class StreamStatus(str, Enum):
    """Status values for streaming updates."""

    RECEIVED = "received"
    REVEALING = "revealing"
    COMPLETE = "complete"
    DISCARDED = "discarded"
    ERROR = "error"


class ChatRequest(BaseModel):
    """Request payload for the chat endpoints.

    Attributes:
        message: User's question or prompt.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Outcome of a single-shot chat submission.

    Attributes:
        session_id: Session the message was submitted to.
        message: The stored assistant message, None if it was discarded.
    """

    session_id: str
    message: Message | None


class StreamChunk(BaseModel):
    """A chunk of streamed response data.

    Attributes:
        content: Newly revealed text since the previous chunk.
        done: Whether this is the final chunk.
        status: Current processing status.
        error: Error message if something went wrong.
    """

    content: str
    done: bool
    status: StreamStatus | None = None
    error: str | None = None


class SessionInfo(BaseModel):
    """Summary of a chat session for listings."""

    id: str
    title: str
    created_at: datetime
    message_count: int = Field(ge=0)
    active: bool

    @classmethod
    def from_session(cls, session: ConversationSession, active_id: str) -> "SessionInfo":
        return cls(
            id=session.id,
            title=session.title,
            created_at=session.created_at,
            message_count=len(session.messages),
            active=session.id == active_id,
        )


class SessionDetail(SessionInfo):
    """A session with its full message history."""

    messages: list[Message]


class TranscriptRequest(BaseModel):
    url: str = Field(..., min_length=1)
    language: str = DEFAULT_LANGUAGE_CODE


class TranscriptResponse(BaseModel):
    transcript: str
    segments: int = Field(ge=0)


class TranslateRequest(BaseModel):
    text: str = Field(..., min_length=1)
    target_language: str = DEFAULT_TARGET_LANGUAGE


class TranslateResponse(BaseModel):
    translation: str


class AskRequest(BaseModel):
    question: str = Field(..., min_length=1)
    transcript: str = Field(..., min_length=1)


class AskResponse(BaseModel):
    answer: str


class AnalyzeRequest(BaseModel):
    text: str = Field(..., min_length=1)


class AnalyzeResponse(BaseModel):
    analysis: str


class PDFExtractResponse(BaseModel):
    """Response after PDF text extraction.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        text: Extracted plain text.
    """

    filename: str
    pages: int
    text: str
