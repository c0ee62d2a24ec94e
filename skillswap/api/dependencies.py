"""Route Dependencies — build the store and services for one HTTP request.

Invariants:
    - One store instance per request; services share it
    - Memory backend: the store lives on app.state (built in the lifespan)
    - SQL backend: SqlStore wraps one AsyncSession from db_manager (auto-rollback on error)
    - Policy flags (terminal status, duplicate feedback, jitter) come from Settings
"""

from typing import AsyncGenerator

from fastapi import Depends, Request

from skillswap.config import Settings, get_settings
from skillswap.core.matching import no_jitter, random_jitter
from skillswap.core.repository_protocols import SkillSwapStore
import skillswap.infrastructure.database as db_module
from skillswap.infrastructure.sql_store import SqlStore
from skillswap.services.feedback_recorder import FeedbackRecorder
from skillswap.services.matching_engine import MatchingEngine
from skillswap.services.request_lifecycle import RequestLifecycle
from skillswap.services.session_lifecycle import SessionLifecycle
from skillswap.services.user_directory import UserDirectory


async def get_store(
    request: Request, settings: Settings = Depends(get_settings),
) -> AsyncGenerator[SkillSwapStore, None]:
    if settings.store_backend == "memory":
        yield request.app.state.store
        return
    manager = db_module.db_manager
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as db:
        yield SqlStore(db)


def get_user_directory(store: SkillSwapStore = Depends(get_store)) -> UserDirectory:
    return UserDirectory(store)


def get_request_lifecycle(
    store: SkillSwapStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> RequestLifecycle:
    return RequestLifecycle(store, enforce_terminal=settings.enforce_terminal_status)


def get_session_lifecycle(
    store: SkillSwapStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> SessionLifecycle:
    return SessionLifecycle(store, enforce_terminal=settings.enforce_terminal_status)


def get_feedback_recorder(
    store: SkillSwapStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> FeedbackRecorder:
    return FeedbackRecorder(store, allow_duplicates=settings.allow_duplicate_feedback)


def get_matching_engine(
    store: SkillSwapStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MatchingEngine:
    return MatchingEngine(store, jitter=random_jitter if settings.match_jitter else no_jitter)
