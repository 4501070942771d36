"""Conversation engine: sessions, request orchestration and reveal.

Architecture notes:

1. **In-memory sessions** - Sessions live in a dict keyed by opaque id, in
   creation order. Nothing is persisted; a page reload starts over.

2. **One request at a time** - ``submit`` sets an in-flight flag before its
   first await, so a second call on the same event loop is rejected with
   ``Busy`` instead of interleaving history.

3. **Stale response guard** - Every request remembers the session that was
   active when it was submitted. If the user switched away or deleted that
   session before the reply is ready, the reply is dropped rather than written
   into whatever session is active now.

4. **Reveal before append** - The assistant message is appended only after the
   typewriter reveal completes or is stopped, and always with the full text.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from nexchat.engine.errors import Busy, EmptyInput, NotFound, RequestFailed
from nexchat.engine.reveal import DEFAULT_REVEAL_INTERVAL, Revealer
from nexchat.models import ConversationSession, Message, MessageKind, Role

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I apologize, but I encountered an error. Please try again."


def _snapshot(session: ConversationSession) -> ConversationSession:
    # Callers get copies; only the engine appends to the stored sessions
    return session.model_copy(update={"messages": list(session.messages)})


class ChatModel(Protocol):
    """Anything that turns a conversation history into one reply."""

    async def generate(self, messages: Sequence[Message]) -> str:
        """Return the complete reply text, or raise RequestFailed."""
        ...


class ConversationEngine:
    """Owns the sessions of one user and mediates their model requests.

    The engine starts with one empty active session. All mutation happens
    through its methods from a single event loop.
    """

    def __init__(
        self,
        model: ChatModel,
        reveal_interval: float = DEFAULT_REVEAL_INTERVAL,
    ) -> None:
        """Initialize the engine.

        Args:
            model: Collaborator producing assistant replies.
            reveal_interval: Pause between reveal ticks, in seconds.
        """
        self._model = model
        self._revealer = Revealer(interval=reveal_interval)
        self._sessions: dict[str, ConversationSession] = {}
        self._active_id = ""
        self._in_flight = False
        self._reveal_session_id: str | None = None
        self.partial_view: str | None = None
        self.create_session()

    # === Views ===

    @property
    def active_session_id(self) -> str:
        return self._active_id

    @property
    def active_session(self) -> ConversationSession:
        return _snapshot(self._sessions[self._active_id])

    @property
    def messages(self) -> list[Message]:
        """Messages of the active session, oldest first."""
        return list(self._sessions[self._active_id].messages)

    @property
    def is_busy(self) -> bool:
        return self._in_flight or self._revealer.is_revealing

    def sessions(self) -> list[ConversationSession]:
        """All sessions, most recently created first."""
        return [_snapshot(session) for session in reversed(self._sessions.values())]

    def get_session(self, session_id: str) -> ConversationSession:
        """Return a session by id.

        Raises:
            NotFound: If no session has this id.
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise NotFound(session_id)
        return _snapshot(session)

    # === Session lifecycle ===

    def create_session(self) -> str:
        """Create an empty session, make it active and return its id."""
        session = ConversationSession()
        self._sessions[session.id] = session
        self._activate(session.id)
        logger.info(f"Created session {session.id}")
        return session.id

    def delete_session(self, session_id: str) -> None:
        """Delete a session.

        When the active session is deleted the most recently created remaining
        session becomes active, or a fresh one is created if none remain.

        Raises:
            NotFound: If no session has this id.
        """
        if session_id not in self._sessions:
            raise NotFound(session_id)

        if session_id == self._reveal_session_id:
            self._revealer.stop()
        del self._sessions[session_id]
        logger.info(f"Deleted session {session_id}")

        if session_id != self._active_id:
            return
        if self._sessions:
            self._activate(next(reversed(self._sessions)))
        else:
            self.create_session()

    def switch_session(self, session_id: str) -> None:
        """Make an existing session active.

        Raises:
            NotFound: If no session has this id.
        """
        if session_id not in self._sessions:
            raise NotFound(session_id)
        self._activate(session_id)

    def _activate(self, session_id: str) -> None:
        if self._reveal_session_id is not None and self._reveal_session_id != session_id:
            # The reply being revealed belongs to a session the user left
            self._revealer.stop()
        self._active_id = session_id

    def _is_current(self, session_id: str) -> bool:
        return session_id == self._active_id and session_id in self._sessions

    def _append(self, session_id: str, message: Message) -> Message:
        self._sessions[session_id].messages.append(message)
        return message

    # === Messaging ===

    def attach_media(
        self,
        name: str,
        kind: MessageKind,
        media_reference: str | None = None,
    ) -> Message:
        """Append a user media message to the active session.

        The model is not called; the attachment only becomes part of history.

        Raises:
            EmptyInput: If the name is empty.
            Busy: If a submit is in flight.
        """
        if not name.strip():
            raise EmptyInput()
        if self.is_busy:
            raise Busy()
        message = Message(
            role=Role.USER,
            content=name.strip(),
            kind=kind,
            media_reference=media_reference,
        )
        return self._append(self._active_id, message)

    def stop(self) -> None:
        """Stop the running reveal early. Safe to call any number of times."""
        self._revealer.stop()

    async def submit(
        self,
        user_text: str,
        on_partial: Callable[[str], None] | None = None,
    ) -> Message | None:
        """Send a user message and reveal the assistant reply.

        Args:
            user_text: The user's message.
            on_partial: Receives each reveal snapshot of the reply.

        Returns:
            The appended assistant message, or None if the originating session
            was left or deleted before the reply could be stored.

        Raises:
            EmptyInput: If the text is empty after trimming.
            Busy: If a request or reveal is already in flight.
            RequestFailed: If the model call failed. The fallback reply has
                already been appended when this is raised.
        """
        text = user_text.strip()
        if not text:
            raise EmptyInput()
        if self.is_busy:
            raise Busy()

        session_id = self._active_id
        self._in_flight = True
        try:
            self._append(session_id, Message(role=Role.USER, content=text))
            history = list(self._sessions[session_id].messages)

            try:
                reply = await self._model.generate(history)
            except RequestFailed as e:
                logger.warning(f"Model request failed for session {session_id}: {e.detail}")
                if self._is_current(session_id):
                    self._append(
                        session_id, Message(role=Role.ASSISTANT, content=FALLBACK_REPLY)
                    )
                raise

            if not self._is_current(session_id):
                logger.warning(f"Discarding reply for inactive session {session_id}")
                return None

            def publish(snapshot: str) -> None:
                self.partial_view = snapshot
                if on_partial is not None:
                    on_partial(snapshot)

            self._reveal_session_id = session_id
            try:
                final_text = await self._revealer.run(reply, publish)
            finally:
                self._reveal_session_id = None
                self.partial_view = None

            if not self._is_current(session_id):
                logger.warning(f"Discarding revealed reply for inactive session {session_id}")
                return None

            return self._append(
                session_id, Message(role=Role.ASSISTANT, content=final_text)
            )
        finally:
            self._in_flight = False
