"""FastAPI application setup."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from ..config import resolve_origins
from .routes import control, events, viewer


# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    if application is None:
        application = get_app()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Network Logger API",
        description="Live log of outbound HTTP traffic",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Browser clients on other origins need CORS_ORIGINS, e.g. "http://localhost:5173"
    origins = resolve_origins(os.getenv("CORS_ORIGINS"))
    if origins:
        fastapi_app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    fastapi_app.include_router(events.create_events_router(application))
    fastapi_app.include_router(viewer.create_viewer_router(application))
    fastapi_app.include_router(control.create_control_router(application))

    return fastapi_app
