"""Boundary Protocols — the Entity Store contract between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every store returns entities from core/entities.py, never ORM rows
    - get_* returns None for unknown ids; services decide whether that is an error
    - Stores do not validate business rules; services call core/ checks first

Design Decisions:
    - Protocol over ABC: structural subtyping, InMemoryStore and SqlStore share no base
    - Async methods: SqlStore does IO; InMemoryStore is async only to satisfy the contract
"""

from datetime import datetime
from typing import Protocol

from skillswap.core.domain_types import (
    UserId, SkillId, InterestId, RequestId, SessionId,
    SkillLevel, InterestLevel, RequestStatus, SessionStatus,
)
from skillswap.core.entities import (
    User, Skill, Interest, Profile, SkillRequest, LearningSession, Feedback,
)


class UserRepository(Protocol):
    async def create_user(
        self, *, username: str, email: str, password_hash: str, **fields: object,
    ) -> User: ...
    async def get_user(self, user_id: UserId) -> User | None: ...
    async def get_user_by_username(self, username: str) -> User | None: ...
    async def get_user_by_email(self, email: str) -> User | None: ...
    async def list_users(self) -> list[User]: ...
    async def upsert_profile(self, user_id: UserId, **fields: object) -> Profile: ...
    async def get_profile(self, user_id: UserId) -> Profile | None: ...


class SkillRepository(Protocol):
    async def add_skill(
        self, user_id: UserId, name: str, level: SkillLevel,
    ) -> Skill: ...
    async def get_skill(self, skill_id: SkillId) -> Skill | None: ...
    async def list_skills(self, user_id: UserId) -> list[Skill]: ...
    async def list_all_skills(self) -> list[Skill]: ...
    async def add_interest(
        self, user_id: UserId, name: str, level: InterestLevel,
    ) -> Interest: ...
    async def get_interest(self, interest_id: InterestId) -> Interest | None: ...
    async def list_interests(self, user_id: UserId) -> list[Interest]: ...
    async def list_all_interests(self) -> list[Interest]: ...


class RequestRepository(Protocol):
    async def create_request(
        self,
        *,
        from_user_id: UserId,
        to_user_id: UserId,
        status: RequestStatus,
        teach_skill_id: SkillId | None = None,
        learn_skill_id: InterestId | None = None,
        proposed_schedule: datetime | None = None,
        message: str | None = None,
    ) -> SkillRequest: ...
    async def get_request(self, request_id: RequestId) -> SkillRequest | None: ...
    async def list_requests_for_user(self, user_id: UserId) -> list[SkillRequest]: ...
    async def set_request_status(
        self, request_id: RequestId, status: RequestStatus,
    ) -> SkillRequest: ...


class SessionRepository(Protocol):
    async def create_session(
        self,
        *,
        teacher_id: UserId,
        learner_id: UserId,
        scheduled_start: datetime,
        scheduled_end: datetime,
        status: SessionStatus,
        request_id: RequestId | None = None,
        meeting_link: str | None = None,
        notes: str | None = None,
    ) -> LearningSession: ...
    async def get_session(self, session_id: SessionId) -> LearningSession | None: ...
    async def list_sessions_for_user(self, user_id: UserId) -> list[LearningSession]: ...
    async def set_session_status(
        self, session_id: SessionId, status: SessionStatus,
    ) -> LearningSession: ...


class FeedbackRepository(Protocol):
    async def create_feedback(
        self,
        *,
        session_id: SessionId,
        from_user_id: UserId,
        to_user_id: UserId,
        rating: int,
        comment: str | None = None,
    ) -> Feedback: ...
    async def find_feedback(
        self, session_id: SessionId, from_user_id: UserId,
    ) -> list[Feedback]: ...
    async def list_feedback_received_by(self, user_id: UserId) -> list[Feedback]: ...


class SkillSwapStore(
    UserRepository, SkillRepository, RequestRepository,
    SessionRepository, FeedbackRepository, Protocol,
):
    """Full capability set injected into every service."""
