"""In-Memory Store — dict-backed SkillSwapStore for tests, demos and local runs.

Invariants:
    - One dict per table, one monotonically increasing id counter per table (ids start at 1)
    - Returned entities are copies: mutating them never changes stored state
    - Ordering matches SqlStore: requests/feedback newest first, sessions by start time

Design Decisions:
    - Constructed per process (or per test), never a module-level singleton;
      the FastAPI app keeps the instance on app.state
"""

import copy
import itertools
from dataclasses import replace
from datetime import datetime, timezone

from skillswap.core.domain_types import (
    UserId, SkillId, InterestId, ProfileId, RequestId, SessionId, FeedbackId,
    SkillLevel, InterestLevel, RequestStatus, SessionStatus,
)
from skillswap.core.entities import (
    User, Skill, Interest, Profile, SkillRequest, LearningSession, Feedback,
)
from skillswap.core.errors import ResourceNotFoundError


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore:
    """Map-based implementation of the SkillSwapStore protocol."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._skills: dict[SkillId, Skill] = {}
        self._interests: dict[InterestId, Interest] = {}
        self._profiles: dict[UserId, Profile] = {}
        self._requests: dict[RequestId, SkillRequest] = {}
        self._sessions: dict[SessionId, LearningSession] = {}
        self._feedback: dict[FeedbackId, Feedback] = {}
        self._ids = {
            name: itertools.count(1)
            for name in (
                "user", "skill", "interest", "profile",
                "request", "session", "feedback",
            )
        }

    def _next_id(self, table: str) -> int:
        return next(self._ids[table])

    # ─── Users & Profiles ────────────────────────────────────────

    async def create_user(
        self, *, username: str, email: str, password_hash: str, **fields: object,
    ) -> User:
        user = User(
            id=UserId(self._next_id("user")),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=_now(),
            **fields,
        )
        self._users[user.id] = user
        return replace(user)

    async def get_user(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return replace(user)
        return None

    async def get_user_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email.casefold() == email.casefold():
                return replace(user)
        return None

    async def list_users(self) -> list[User]:
        return [replace(u) for u in self._users.values()]

    async def upsert_profile(self, user_id: UserId, **fields: object) -> Profile:
        existing = self._profiles.get(user_id)
        if existing:
            profile = replace(existing, **fields)
        else:
            profile = Profile(
                id=ProfileId(self._next_id("profile")),
                user_id=user_id,
                created_at=_now(),
                **fields,
            )
        self._profiles[user_id] = copy.deepcopy(profile)
        return copy.deepcopy(profile)

    async def get_profile(self, user_id: UserId) -> Profile | None:
        profile = self._profiles.get(user_id)
        return copy.deepcopy(profile) if profile else None

    # ─── Skills & Interests ──────────────────────────────────────

    async def add_skill(self, user_id: UserId, name: str, level: SkillLevel) -> Skill:
        skill = Skill(
            id=SkillId(self._next_id("skill")),
            user_id=user_id, name=name, level=level, created_at=_now(),
        )
        self._skills[skill.id] = skill
        return replace(skill)

    async def get_skill(self, skill_id: SkillId) -> Skill | None:
        skill = self._skills.get(skill_id)
        return replace(skill) if skill else None

    async def list_skills(self, user_id: UserId) -> list[Skill]:
        return [replace(s) for s in self._skills.values() if s.user_id == user_id]

    async def list_all_skills(self) -> list[Skill]:
        return [replace(s) for s in self._skills.values()]

    async def add_interest(
        self, user_id: UserId, name: str, level: InterestLevel,
    ) -> Interest:
        interest = Interest(
            id=InterestId(self._next_id("interest")),
            user_id=user_id, name=name, level=level, created_at=_now(),
        )
        self._interests[interest.id] = interest
        return replace(interest)

    async def get_interest(self, interest_id: InterestId) -> Interest | None:
        interest = self._interests.get(interest_id)
        return replace(interest) if interest else None

    async def list_interests(self, user_id: UserId) -> list[Interest]:
        return [replace(i) for i in self._interests.values() if i.user_id == user_id]

    async def list_all_interests(self) -> list[Interest]:
        return [replace(i) for i in self._interests.values()]

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
        request = SkillRequest(
            id=RequestId(self._next_id("request")),
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            status=status,
            created_at=_now(),
            teach_skill_id=teach_skill_id,
            learn_skill_id=learn_skill_id,
            proposed_schedule=proposed_schedule,
            message=message,
        )
        self._requests[request.id] = request
        return replace(request)

    async def get_request(self, request_id: RequestId) -> SkillRequest | None:
        request = self._requests.get(request_id)
        return replace(request) if request else None

    async def list_requests_for_user(self, user_id: UserId) -> list[SkillRequest]:
        found = [
            replace(r) for r in self._requests.values()
            if user_id in (r.from_user_id, r.to_user_id)
        ]
        return sorted(found, key=lambda r: r.id, reverse=True)

    async def set_request_status(
        self, request_id: RequestId, status: RequestStatus,
    ) -> SkillRequest:
        request = self._requests.get(request_id)
        if not request:
            raise ResourceNotFoundError("SkillRequest", request_id)
        request.status = status
        return replace(request)

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
        session = LearningSession(
            id=SessionId(self._next_id("session")),
            teacher_id=teacher_id,
            learner_id=learner_id,
            scheduled_start=scheduled_start,
            scheduled_end=scheduled_end,
            status=status,
            created_at=_now(),
            request_id=request_id,
            meeting_link=meeting_link,
            notes=notes,
        )
        self._sessions[session.id] = session
        return replace(session)

    async def get_session(self, session_id: SessionId) -> LearningSession | None:
        session = self._sessions.get(session_id)
        return replace(session) if session else None

    async def list_sessions_for_user(self, user_id: UserId) -> list[LearningSession]:
        found = [
            replace(s) for s in self._sessions.values()
            if user_id in (s.teacher_id, s.learner_id)
        ]
        return sorted(found, key=lambda s: (s.scheduled_start, s.id))

    async def set_session_status(
        self, session_id: SessionId, status: SessionStatus,
    ) -> LearningSession:
        session = self._sessions.get(session_id)
        if not session:
            raise ResourceNotFoundError("LearningSession", session_id)
        session.status = status
        return replace(session)

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
        feedback = Feedback(
            id=FeedbackId(self._next_id("feedback")),
            session_id=session_id,
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            rating=rating,
            created_at=_now(),
            comment=comment,
        )
        self._feedback[feedback.id] = feedback
        return replace(feedback)

    async def find_feedback(
        self, session_id: SessionId, from_user_id: UserId,
    ) -> list[Feedback]:
        return [
            replace(f) for f in self._feedback.values()
            if f.session_id == session_id and f.from_user_id == from_user_id
        ]

    async def list_feedback_received_by(self, user_id: UserId) -> list[Feedback]:
        found = [replace(f) for f in self._feedback.values() if f.to_user_id == user_id]
        return sorted(found, key=lambda f: f.id, reverse=True)
