# ============================================================================
# FILE: openmusic/main.py
# ============================================================================
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from openmusic.api.router import api_router
from openmusic.config import Settings, settings as default_settings
from openmusic.context import AppContext
from openmusic.core.exceptions import register_exception_handlers
from openmusic.core.logging import setup_logging
import logging

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: configuration, defaults to the environment-driven settings
        context: pre-built process context (tests inject fakes here)
    """
    settings = settings or (context.settings if context else default_settings)
    context = context or AppContext(settings)

    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME}")
        context.startup()
        yield
        logger.info(f"Shutting down {settings.APP_NAME}")
        context.shutdown()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Music catalog with albums, songs, collaborative playlists and exports",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.context = context

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Uploaded album covers
    app.mount(
        "/albums/covers",
        StaticFiles(directory=context.storage.folder, check_dir=False),
        name="covers",
    )

    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

# Create FastAPI app instance
app = create_app()
