"""Account Service API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the success=false envelope
    - CORS open to any origin (configured from settings), including on 500 responses
    - Trailing slashes ignored: "/users/" answers like "/users", never a redirect
    - Database pool built on startup and drained on shutdown via the lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup, and the shutdown half runs only
      after uvicorn has stopped accepting connections and finished in-flight requests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.middleware import StripTrailingSlashMiddleware, UnhandledErrorMiddleware
from app.api.routes import auth, health, users
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        ssl=settings.database_ssl,
    )
    logger.info("Account service started")
    yield
    logger.info("Account service shutting down")
    await close_db()


app = FastAPI(
    title="Account Service API",
    version=health.SERVICE_VERSION,
    lifespan=lifespan,
    redirect_slashes=False,
)

settings = get_settings()
# Added innermost first: the catch-all sits inside CORS, slash stripping outermost
app.add_middleware(UnhandledErrorMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(StripTrailingSlashMiddleware)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)

register_error_handlers(app)
