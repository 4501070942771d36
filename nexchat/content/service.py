"""Question answering, translation and analysis over loaded content.

The content chat reuses the conversation engine: GroundedResponder plays the
model collaborator and answers each new question against the grounding text.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from nexchat.content.errors import InvalidContentRequest
from nexchat.content.prompts import (
    NO_ANALYSIS,
    NO_ANSWER,
    NO_TRANSLATION,
    build_analyze_prompt,
    build_ask_prompt,
    build_translate_prompt,
)
from nexchat.engine.errors import RequestFailed
from nexchat.models import Message, Role

logger = logging.getLogger(__name__)


class PromptModel(Protocol):
    async def generate_from_prompt(self, prompt: str) -> str: ...


class ContentService:
    """Single-shot prompts against the model, with canned fallbacks for empty replies."""

    def __init__(self, model: PromptModel) -> None:
        self._model = model

    async def ask(self, question: str, transcript: str) -> str:
        """Answer a question using the transcript as context.

        Raises:
            InvalidContentRequest: If either input is empty.
            RequestFailed: If the model call fails.
        """
        if not question.strip() or not transcript.strip():
            raise InvalidContentRequest("Missing question or transcript")
        answer = await self._model.generate_from_prompt(
            build_ask_prompt(question.strip(), transcript)
        )
        return answer or NO_ANSWER

    async def translate(self, text: str, target_language: str) -> str:
        """Translate text into a language given by name (e.g. "Hindi")."""
        if not text.strip():
            raise InvalidContentRequest("No text provided")
        if not target_language.strip():
            raise InvalidContentRequest("No target language provided")
        translation = await self._model.generate_from_prompt(
            build_translate_prompt(text, target_language.strip())
        )
        logger.info(f"Translated {len(text)} chars to {target_language}")
        return translation or NO_TRANSLATION

    async def analyze(self, text: str) -> str:
        """Summarize a document with key points and insights."""
        if not text.strip():
            raise InvalidContentRequest("No text provided")
        analysis = await self._model.generate_from_prompt(build_analyze_prompt(text))
        return analysis or NO_ANALYSIS


class GroundedResponder:
    """Model collaborator that answers the latest question from loaded content.

    Attributes:
        grounding: Plain text the answers are based on (transcript, PDF text
            or pasted document). Empty until content is loaded.
    """

    def __init__(self, model: PromptModel, grounding: str = "") -> None:
        self._service = ContentService(model)
        self.grounding = grounding

    @property
    def has_content(self) -> bool:
        return bool(self.grounding.strip())

    async def generate(self, messages: Sequence[Message]) -> str:
        """Answer the most recent user message against the grounding text.

        Raises:
            RequestFailed: If no content is loaded, there is no question, or
                the model call fails.
        """
        if not self.has_content:
            raise RequestFailed("No content loaded")

        question = next(
            (msg.content for msg in reversed(messages) if msg.role is Role.USER), ""
        )
        try:
            return await self._service.ask(question, self.grounding)
        except InvalidContentRequest as e:
            raise RequestFailed(str(e)) from e
