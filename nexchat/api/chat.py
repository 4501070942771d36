"""Chat endpoints with SSE streaming of the typewriter reveal.

The model reply arrives in one piece; the stream carries the reveal of that
reply, one delta per tick, followed by a final ``done`` chunk.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from nexchat.api.deps import get_engine
from nexchat.engine import (
    Busy,
    ConversationEngine,
    EmptyInput,
    EngineError,
    RequestFailed,
)
from nexchat.models.schemas import ChatRequest, ChatResponse, StreamChunk, StreamStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def _http_error(error: EngineError) -> HTTPException:
    if isinstance(error, EmptyInput):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif isinstance(error, Busy):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, RequestFailed):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))


def _sse(chunk: StreamChunk) -> str:
    return f"data: {chunk.model_dump_json()}\n\n"


def _log_detached(task: asyncio.Task) -> None:
    if not task.cancelled() and (error := task.exception()) is not None:
        logger.warning(f"Reply for a disconnected stream failed: {error}")


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest, engine: ConversationEngine = Depends(get_engine)
) -> ChatResponse:
    """Submit a message and wait for the revealed reply.

    Raises:
        409: Another reply is in progress.
        502: The model request failed (the fallback reply was stored).
    """
    session_id = engine.active_session_id
    try:
        message = await engine.submit(request.message)
    except EngineError as e:
        raise _http_error(e) from e
    return ChatResponse(session_id=session_id, message=message)


async def _reveal_events(
    engine: ConversationEngine, message: str
) -> AsyncGenerator[str]:
    snapshots: asyncio.Queue[str | None] = asyncio.Queue()
    yield _sse(StreamChunk(content="", done=False, status=StreamStatus.RECEIVED))

    task = asyncio.create_task(engine.submit(message, on_partial=snapshots.put_nowait))
    task.add_done_callback(lambda _: snapshots.put_nowait(None))

    revealed = ""
    try:
        while (snapshot := await snapshots.get()) is not None:
            delta = snapshot[len(revealed) :]
            revealed = snapshot
            if delta:
                yield _sse(StreamChunk(content=delta, done=False, status=StreamStatus.REVEALING))
    except BaseException:
        # Client went away; the reply is still stored, collect its outcome
        task.add_done_callback(_log_detached)
        raise

    try:
        stored = task.result()
    except EngineError as e:
        logger.warning(f"Streaming chat failed: {e}")
        yield _sse(StreamChunk(content="", done=True, status=StreamStatus.ERROR, error=str(e)))
        return

    final_status = StreamStatus.COMPLETE if stored is not None else StreamStatus.DISCARDED
    yield _sse(StreamChunk(content="", done=True, status=final_status))


@router.post("/stream")
async def chat_stream(
    request: ChatRequest, engine: ConversationEngine = Depends(get_engine)
) -> StreamingResponse:
    """Submit a message and stream the reveal of the reply as SSE."""
    if engine.is_busy:
        raise _http_error(Busy())
    return StreamingResponse(
        _reveal_events(engine, request.message),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )


@router.post("/stop", status_code=status.HTTP_204_NO_CONTENT)
async def stop_reveal(engine: ConversationEngine = Depends(get_engine)) -> None:
    """Stop the running reveal; the full reply is still stored."""
    engine.stop()
