"""Session management endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from nexchat.api.deps import get_engine
from nexchat.engine import ConversationEngine, NotFound
from nexchat.models.schemas import SessionDetail, SessionInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _detail(engine: ConversationEngine, session_id: str) -> SessionDetail:
    try:
        session = engine.get_session(session_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    info = SessionInfo.from_session(session, engine.active_session_id)
    return SessionDetail(**info.model_dump(), messages=list(session.messages))


@router.get("", response_model=list[SessionInfo])
async def list_sessions(engine: ConversationEngine = Depends(get_engine)) -> list[SessionInfo]:
    """List sessions, most recently created first."""
    return [SessionInfo.from_session(s, engine.active_session_id) for s in engine.sessions()]


@router.post("", response_model=SessionInfo, status_code=status.HTTP_201_CREATED)
async def create_session(engine: ConversationEngine = Depends(get_engine)) -> SessionInfo:
    """Create an empty session and make it active."""
    session_id = engine.create_session()
    return SessionInfo.from_session(engine.get_session(session_id), session_id)


@router.get("/{session_id}", response_model=SessionDetail)
async def get_session(
    session_id: str, engine: ConversationEngine = Depends(get_engine)
) -> SessionDetail:
    """Return a session with its messages."""
    return _detail(engine, session_id)


@router.post("/{session_id}/activate", response_model=SessionDetail)
async def activate_session(
    session_id: str, engine: ConversationEngine = Depends(get_engine)
) -> SessionDetail:
    """Switch the active session."""
    try:
        engine.switch_session(session_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return _detail(engine, session_id)


@router.delete("/{session_id}", response_model=SessionInfo)
async def delete_session(
    session_id: str, engine: ConversationEngine = Depends(get_engine)
) -> SessionInfo:
    """Delete a session.

    Returns:
        The session that is active after the deletion.
    """
    try:
        engine.delete_session(session_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return SessionInfo.from_session(engine.active_session, engine.active_session_id)
