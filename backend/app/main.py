"""Historic Gems API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings with credentials allowed (the token travels as a cookie)
    - Database engine created once on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.error_handlers import register_error_handlers
from app.api.routes import artifacts, auth, health, likes
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
    )
    logger.info(
        f"Historic Gems API started ({settings.environment.value})",
    )
    yield
    await close_db()
    logger.info("Historic Gems API shutting down")


app = FastAPI(
    title="Historic Gems API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(artifacts.router)
app.include_router(likes.router)

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Welcome to the Historic Gems Server site!"


def run() -> None:
    """Console entry point: serve on settings.host:settings.port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
