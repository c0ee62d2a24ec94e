"""SQL Store — SQLAlchemy-backed SkillSwapStore for production.

Invariants:
    - One AsyncSession per store instance (one store per HTTP request)
    - Every write commits before returning; a failed commit rolls back and raises DatabaseError
    - ORM rows never leave this module: each method returns core entities
    - Datetimes enter and leave as timezone-aware UTC (SQLite drops tzinfo,
      so anything else would be stored as the wrong instant)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.core.domain_types import (
    UserId, SkillId, InterestId, ProfileId, RequestId, SessionId, FeedbackId,
    SkillLevel, InterestLevel, RequestStatus, SessionStatus,
)
from skillswap.core.entities import (
    User, Skill, Interest, Profile, SkillRequest, LearningSession, Feedback,
)
from skillswap.core.enforce_invariants import to_utc
from skillswap.core.errors import DatabaseError, ResourceNotFoundError
from skillswap.models.user import UserModel
from skillswap.models.user_skill import UserSkillModel
from skillswap.models.learning_interest import LearningInterestModel
from skillswap.models.user_profile import UserProfileModel
from skillswap.models.skill_request import SkillRequestModel
from skillswap.models.learning_session import LearningSessionModel
from skillswap.models.session_feedback import SessionFeedbackModel

logger = logging.getLogger(__name__)


def _aware(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return to_utc(value)


# ─── Row → Entity ────────────────────────────────────────────────

def _to_user(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        username=row.username,
        email=row.email,
        password_hash=row.password,
        created_at=_aware(row.created_at),
        first_name=row.first_name,
        last_name=row.last_name,
        profile_picture=row.profile_picture,
        location=row.location,
        timezone=row.timezone,
        bio=row.bio,
    )


def _to_skill(row: UserSkillModel) -> Skill:
    return Skill(
        id=SkillId(row.id), user_id=UserId(row.user_id), name=row.name,
        level=SkillLevel(row.level), created_at=_aware(row.created_at),
    )


def _to_interest(row: LearningInterestModel) -> Interest:
    return Interest(
        id=InterestId(row.id), user_id=UserId(row.user_id), name=row.name,
        level=InterestLevel(row.level), created_at=_aware(row.created_at),
    )


def _to_profile(row: UserProfileModel) -> Profile:
    return Profile(
        id=ProfileId(row.id),
        user_id=UserId(row.user_id),
        created_at=_aware(row.created_at),
        learning_modes=list(row.learning_modes or []),
        availability=[list(r) for r in row.availability],
        learning_goals=row.learning_goals,
        learning_intensity=row.learning_intensity,
        teaching_styles=list(row.teaching_styles or []),
        motivation=row.motivation,
    )


def _to_request(row: SkillRequestModel) -> SkillRequest:
    return SkillRequest(
        id=RequestId(row.id),
        from_user_id=UserId(row.from_user_id),
        to_user_id=UserId(row.to_user_id),
        status=RequestStatus(row.status),
        created_at=_aware(row.created_at),
        teach_skill_id=row.teach_skill_id,
        learn_skill_id=row.learn_skill_id,
        proposed_schedule=_aware(row.proposed_schedule),
        message=row.message,
    )


def _to_session(row: LearningSessionModel) -> LearningSession:
    return LearningSession(
        id=SessionId(row.id),
        teacher_id=UserId(row.teacher_id),
        learner_id=UserId(row.learner_id),
        scheduled_start=_aware(row.scheduled_start),
        scheduled_end=_aware(row.scheduled_end),
        status=SessionStatus(row.status),
        created_at=_aware(row.created_at),
        request_id=row.request_id,
        meeting_link=row.meeting_link,
        notes=row.notes,
    )


def _to_feedback(row: SessionFeedbackModel) -> Feedback:
    return Feedback(
        id=FeedbackId(row.id),
        session_id=SessionId(row.session_id),
        from_user_id=UserId(row.from_user_id),
        to_user_id=UserId(row.to_user_id),
        rating=row.rating,
        created_at=_aware(row.created_at),
        comment=row.comment,
    )


class SqlStore:
    """Relational implementation of the SkillSwapStore protocol."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _save(self, row, operation: str):
        self.db.add(row)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to {operation}: {e}")
            raise DatabaseError(str(e.__class__.__name__), operation)
        await self.db.refresh(row)
        return row

    # ─── Users & Profiles ────────────────────────────────────────

    async def create_user(
        self, *, username: str, email: str, password_hash: str, **fields: object,
    ) -> User:
        row = UserModel(
            username=username, email=email, password=password_hash, **fields,
        )
        return _to_user(await self._save(row, "create user"))

    async def get_user(self, user_id: UserId) -> User | None:
        row = await self.db.get(UserModel, user_id)
        return _to_user(row) if row else None

    async def get_user_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(UserModel).where(UserModel.username == username),
        )
        row = result.scalar_one_or_none()
        return _to_user(row) if row else None

    async def get_user_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(UserModel).where(func.lower(UserModel.email) == email.lower()),
        )
        row = result.scalars().first()
        return _to_user(row) if row else None

    async def list_users(self) -> list[User]:
        result = await self.db.execute(select(UserModel).order_by(UserModel.id))
        return [_to_user(r) for r in result.scalars().all()]

    async def upsert_profile(self, user_id: UserId, **fields: object) -> Profile:
        result = await self.db.execute(
            select(UserProfileModel).where(UserProfileModel.user_id == user_id),
        )
        row = result.scalar_one_or_none()
        if row is None:
            row = UserProfileModel(user_id=user_id, **fields)
        else:
            for key, value in fields.items():
                setattr(row, key, value)
        return _to_profile(await self._save(row, "save profile"))

    async def get_profile(self, user_id: UserId) -> Profile | None:
        result = await self.db.execute(
            select(UserProfileModel).where(UserProfileModel.user_id == user_id),
        )
        row = result.scalar_one_or_none()
        return _to_profile(row) if row else None

    # ─── Skills & Interests ──────────────────────────────────────

    async def add_skill(self, user_id: UserId, name: str, level: SkillLevel) -> Skill:
        row = UserSkillModel(user_id=user_id, name=name, level=SkillLevel(level).value)
        return _to_skill(await self._save(row, "add skill"))

    async def get_skill(self, skill_id: SkillId) -> Skill | None:
        row = await self.db.get(UserSkillModel, skill_id)
        return _to_skill(row) if row else None

    async def list_skills(self, user_id: UserId) -> list[Skill]:
        result = await self.db.execute(
            select(UserSkillModel)
            .where(UserSkillModel.user_id == user_id)
            .order_by(UserSkillModel.id),
        )
        return [_to_skill(r) for r in result.scalars().all()]

    async def list_all_skills(self) -> list[Skill]:
        result = await self.db.execute(select(UserSkillModel).order_by(UserSkillModel.id))
        return [_to_skill(r) for r in result.scalars().all()]

    async def add_interest(
        self, user_id: UserId, name: str, level: InterestLevel,
    ) -> Interest:
        row = LearningInterestModel(
            user_id=user_id, name=name, level=InterestLevel(level).value,
        )
        return _to_interest(await self._save(row, "add learning interest"))

    async def get_interest(self, interest_id: InterestId) -> Interest | None:
        row = await self.db.get(LearningInterestModel, interest_id)
        return _to_interest(row) if row else None

    async def list_interests(self, user_id: UserId) -> list[Interest]:
        result = await self.db.execute(
            select(LearningInterestModel)
            .where(LearningInterestModel.user_id == user_id)
            .order_by(LearningInterestModel.id),
        )
        return [_to_interest(r) for r in result.scalars().all()]

    async def list_all_interests(self) -> list[Interest]:
        result = await self.db.execute(
            select(LearningInterestModel).order_by(LearningInterestModel.id),
        )
        return [_to_interest(r) for r in result.scalars().all()]

    # ─── Requests ────────────────────────────────────────────────

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
    ) -> SkillRequest:
        row = SkillRequestModel(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            status=RequestStatus(status).value,
            teach_skill_id=teach_skill_id,
            learn_skill_id=learn_skill_id,
            proposed_schedule=to_utc(proposed_schedule),
            message=message,
        )
        return _to_request(await self._save(row, "create skill request"))

    async def get_request(self, request_id: RequestId) -> SkillRequest | None:
        row = await self.db.get(SkillRequestModel, request_id)
        return _to_request(row) if row else None

    async def list_requests_for_user(self, user_id: UserId) -> list[SkillRequest]:
        result = await self.db.execute(
            select(SkillRequestModel)
            .where(or_(
                SkillRequestModel.from_user_id == user_id,
                SkillRequestModel.to_user_id == user_id,
            ))
            .order_by(SkillRequestModel.id.desc()),
        )
        return [_to_request(r) for r in result.scalars().all()]

    async def set_request_status(
        self, request_id: RequestId, status: RequestStatus,
    ) -> SkillRequest:
        row = await self.db.get(SkillRequestModel, request_id)
        if row is None:
            raise ResourceNotFoundError("SkillRequest", request_id)
        row.status = RequestStatus(status).value
        return _to_request(await self._save(row, "update skill request status"))

    # ─── Sessions ────────────────────────────────────────────────

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
    ) -> LearningSession:
        row = LearningSessionModel(
            teacher_id=teacher_id,
            learner_id=learner_id,
            scheduled_start=to_utc(scheduled_start),
            scheduled_end=to_utc(scheduled_end),
            status=SessionStatus(status).value,
            request_id=request_id,
            meeting_link=meeting_link,
            notes=notes,
        )
        return _to_session(await self._save(row, "create learning session"))

    async def get_session(self, session_id: SessionId) -> LearningSession | None:
        row = await self.db.get(LearningSessionModel, session_id)
        return _to_session(row) if row else None

    async def list_sessions_for_user(self, user_id: UserId) -> list[LearningSession]:
        result = await self.db.execute(
            select(LearningSessionModel)
            .where(or_(
                LearningSessionModel.teacher_id == user_id,
                LearningSessionModel.learner_id == user_id,
            ))
            .order_by(LearningSessionModel.scheduled_start, LearningSessionModel.id),
        )
        return [_to_session(r) for r in result.scalars().all()]

    async def set_session_status(
        self, session_id: SessionId, status: SessionStatus,
    ) -> LearningSession:
        row = await self.db.get(LearningSessionModel, session_id)
        if row is None:
            raise ResourceNotFoundError("LearningSession", session_id)
        row.status = SessionStatus(status).value
        return _to_session(await self._save(row, "update learning session status"))

    # ─── Feedback ────────────────────────────────────────────────

    async def create_feedback(
        self,
        *,
        session_id: SessionId,
        from_user_id: UserId,
        to_user_id: UserId,
        rating: int,
        comment: str | None = None,
    ) -> Feedback:
        row = SessionFeedbackModel(
            session_id=session_id,
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            rating=rating,
            comment=comment,
        )
        return _to_feedback(await self._save(row, "create session feedback"))

    async def find_feedback(
        self, session_id: SessionId, from_user_id: UserId,
    ) -> list[Feedback]:
        result = await self.db.execute(
            select(SessionFeedbackModel)
            .where(SessionFeedbackModel.session_id == session_id)
            .where(SessionFeedbackModel.from_user_id == from_user_id)
            .order_by(SessionFeedbackModel.id),
        )
        return [_to_feedback(r) for r in result.scalars().all()]

    async def list_feedback_received_by(self, user_id: UserId) -> list[Feedback]:
        result = await self.db.execute(
            select(SessionFeedbackModel)
            .where(SessionFeedbackModel.to_user_id == user_id)
            .order_by(SessionFeedbackModel.id.desc()),
        )
        return [_to_feedback(r) for r in result.scalars().all()]
