from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.sessions import SessionMiddleware
import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from lawdesk.core.config import Settings, settings as default_settings
from lawdesk.api.api import api_router
from lawdesk.core.database import initialize_storage, close_storage
from lawdesk.core.errors import register_exception_handlers
from lawdesk.core.sessions import SessionStore, sweep_periodically
from lawdesk.storage import MemoryStorage, Storage
from lawdesk.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the application around an explicitly constructed storage backend
    and session store.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("Starting application...")
        if settings.uses_default_session_secret:
            logger.warning("SESSION_SECRET is not set; using the insecure development fallback")

        initialize_storage(app, settings)
        sweeper = asyncio.create_task(
            sweep_periodically(app.state.sessions, settings.SESSION_SWEEP_INTERVAL_SECONDS)
        )

        yield

        # Shutdown
        logger.info("Shutting down application...")
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper
        close_storage(app)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else MemoryStorage()
    app.state.sessions = SessionStore(max_age_seconds=settings.SESSION_MAX_AGE_SECONDS)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        https_only=settings.SESSION_HTTPS_ONLY,
        same_site="lax",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add compression middleware if enabled
    if settings.ENABLE_RESPONSE_COMPRESSION:
        app.add_middleware(GZipMiddleware, minimum_size=1000)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        """
        Root endpoint that returns basic API information.
        """
        return {
            "message": "Welcome to the Lawdesk API",
            "version": settings.VERSION,
            "documentation": "/docs"
        }

    return app


setup_logging(default_settings.LOG_LEVEL, default_settings.LOG_DIR)
app = create_app()
