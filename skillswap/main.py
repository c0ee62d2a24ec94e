"""SkillSwap API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SkillSwapError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store backend initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Memory backend keeps one InMemoryStore on app.state; SQL backend opens
      one AsyncSession per request from db_manager.session()
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillswap.api.error_handlers import register_error_handlers
from skillswap.api.routes import (
    feedback, health, learning_sessions, matches, skill_requests, users,
)
from skillswap.config import get_settings
from skillswap.infrastructure.database import init_db
from skillswap.infrastructure.memory_store import InMemoryStore
from skillswap.infrastructure.observability import setup_logging
from skillswap.services.demo_data import seed_demo_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = None
    if settings.store_backend == "memory":
        app.state.store = InMemoryStore()
        if settings.seed_demo_data:
            await seed_demo_data(app.state.store)
    else:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await manager.create_all()
    logger.info(f"SkillSwap API started ({settings.store_backend} store)")
    yield
    logger.info("SkillSwap API shutting down")
    if manager is not None:
        await manager.dispose()


app = FastAPI(
    title="SkillSwap API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(skill_requests.router)
app.include_router(learning_sessions.router)
app.include_router(feedback.router)
app.include_router(matches.router)

register_error_handlers(app)
