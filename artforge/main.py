"""Art Forge API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ArtForgeError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artforge.api.error_handlers import register_error_handlers
from artforge.api.routes import health, preview, styles, traits
from artforge.config import get_settings
from artforge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Art Forge API started")
    yield
    logger.info("Art Forge API shutting down")


settings = get_settings()
app = FastAPI(
    title="Art Forge API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(styles.router)
app.include_router(preview.router)
app.include_router(traits.router)

register_error_handlers(app)
