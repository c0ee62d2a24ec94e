"""Service test fixtures — a fresh InMemoryStore per test plus small builders.

Invariants:
    - Every test gets its own store; ids restart at 1
    - make_user bypasses password hashing (UserDirectory tests cover that path)
"""

from datetime import datetime, timedelta, timezone

import pytest

from skillswap.core.domain_types import SessionStatus
from skillswap.infrastructure.memory_store import InMemoryStore

START = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def make_user(store):
    async def _make(username: str, **fields):
        return await store.create_user(
            username=username,
            email=f"{username}@example.com",
            password_hash="unused",
            **fields,
        )
    return _make


@pytest.fixture
def make_session(store):
    """Insert a session directly, bypassing SessionLifecycle checks."""
    async def _make(teacher_id, learner_id, status=SessionStatus.SCHEDULED, offset_hours=0):
        start = START + timedelta(hours=offset_hours)
        return await store.create_session(
            teacher_id=teacher_id,
            learner_id=learner_id,
            scheduled_start=start,
            scheduled_end=start + timedelta(hours=1),
            status=status,
        )
    return _make
