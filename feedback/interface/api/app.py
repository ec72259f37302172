"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from feedback.config import Settings
from feedback.interface.api.live import start_thread_feed
from feedback.interface.api.routes import (
    admin,
    health,
    images,
    news,
    reactions,
    replies,
    threads,
)
from feedback.interface.error import register_error_handlers
from feedback.util.di.container import create_container, setup_di
from feedback.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # The live board listens for thread changes while the app runs
        feed = await start_thread_feed(container)
        app.state.thread_feed = feed
        yield
        feed.stop()
        await container.close()

    app_instance = FastAPI(
        title="Feedback Hub API",
        description="Backend API for an anonymous community feedback board",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,  # Vote identity cookie
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Admin-Token"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(reactions.router)
    app_instance.include_router(images.router)
    app_instance.include_router(news.router)
    app_instance.include_router(admin.router)

    # Uploaded images written by the local blob store
    app_instance.mount(
        settings.storage.url_path,
        StaticFiles(directory=settings.storage.directory, check_dir=False),
        name="media",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
