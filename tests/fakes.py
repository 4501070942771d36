"""Test doubles for the model collaborator."""

import asyncio
from collections.abc import Sequence

from nexchat.models import Message


class FakeModel:
    """Scripted model that records every call.

    Attributes:
        replies: Replies returned in order; the last one repeats.
        error: Raised instead of replying when set.
        gate: When set, calls wait for it before answering.
    """

    def __init__(self, replies: Sequence[str] = ("Hi there",), error: Exception | None = None):
        self.replies = list(replies)
        self.error = error
        self.gate: asyncio.Event | None = None
        self.calls: list[list[Message]] = []
        self.prompts: list[str] = []

    async def _answer(self) -> str:
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]

    async def generate(self, messages: Sequence[Message]) -> str:
        self.calls.append(list(messages))
        return await self._answer()

    async def generate_from_prompt(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return await self._answer()
