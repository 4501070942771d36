"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nexchat import __version__
from nexchat.api.chat import router as chat_router
from nexchat.api.content import router as content_router
from nexchat.api.sessions import router as sessions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting NexChat API...")
    yield
    logger.info("Shutting down NexChat API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="NexChat API",
        description=(
            "Chat with Gemini across in-memory sessions, with a typewriter reveal "
            "streamed over Server-Sent Events, plus transcript, translation, "
            "analysis and PDF endpoints for chatting with content."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(sessions_router)
    application.include_router(chat_router)
    application.include_router(content_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "nexchat"}

    return application


app = create_app()
