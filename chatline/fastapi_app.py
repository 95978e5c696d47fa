"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from chatline.config.logging_config import setup_logging
from chatline.config.settings import Config
from chatline.presentation.api import (
    comments_router,
    conversations_router,
    groups_router,
    messages_router,
    search_router,
    session_router,
    users_router,
)
from chatline.presentation.errors import register_exception_handlers
from chatline.setup.ioc import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Take the correlation ID from the request header, or mint one."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        # Read by the RequestContext provider and the error handlers
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: container already built and attached by setup_dishka.
    Shutdown: close the DI container (disconnects Prisma when in use).
    """
    logger.info(
        "Chatline started (persistence=%s, uploads=%s)",
        Config.PERSISTENCE_BACKEND,
        Config.UPLOAD_DIR,
    )
    yield
    await app.state.dishka_container.close()
    logger.info("Chatline shut down, DI container closed")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from Config when omitted.
            Tests pass their own to get an isolated in-memory store.
    """
    app = FastAPI(
        title="Chatline API",
        description="Messaging backend: conversations, groups, messages and comments",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Chatline server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(session_router)  # POST /session
    app.include_router(users_router)  # /users/...
    app.include_router(search_router)  # GET /search/users
    app.include_router(conversations_router)  # /conversations/...
    app.include_router(comments_router)  # /conversations/.../comments
    app.include_router(messages_router)  # GET /messages/{m_id}/comments
    app.include_router(groups_router)  # /groups/...

    # Stored media is served back under the same prefix it is addressed by
    app.mount(
        Config.UPLOADS_URL_PREFIX.rstrip("/"),
        StaticFiles(directory=Config.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    return app


# Create the app instance
app = create_fastapi_app()
