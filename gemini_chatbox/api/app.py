"""FastAPI application factory and configuration.

Hosts the NiceGUI chat page and a health endpoint. The chat itself has
no HTTP API of its own.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gemini_chatbox import __version__

logger = logging.getLogger(__name__)

SERVICE_NAME = "gemini-chatbox"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Gemini Chatbox...")
    yield
    logger.info("Shutting down Gemini Chatbox...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini Chatbox",
        description="Single-page chat with Google's Gemini models.",
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": SERVICE_NAME}

    return application


app = create_app()
