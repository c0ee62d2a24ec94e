"""Domain Entities — plain dataclasses returned by every store and service.

Invariants:
    - Entities carry no persistence state (no ORM session, no lazy loading)
    - Status fields hold the Enum, never the raw string
    - Both store backends build exactly these types

Design Decisions:
    - Dataclasses over ORM rows at the service boundary: InMemoryStore and SqlStore
      return the same shapes, so services are backend-agnostic
"""

from dataclasses import dataclass, field
from datetime import datetime

from skillswap.core.domain_types import (
    UserId, SkillId, InterestId, ProfileId, RequestId, SessionId, FeedbackId,
    SkillLevel, InterestLevel, RequestStatus, SessionStatus,
    empty_availability,
)


@dataclass
class User:
    id: UserId
    username: str
    email: str
    password_hash: str
    created_at: datetime
    first_name: str | None = None
    last_name: str | None = None
    profile_picture: str | None = None
    location: str | None = None
    timezone: str | None = None
    bio: str | None = None

    @property
    def display_name(self) -> str:
        """First + last name, falling back to the username."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.username


@dataclass
class Skill:
    """A capability the owner can teach."""
    id: SkillId
    user_id: UserId
    name: str
    level: SkillLevel
    created_at: datetime


@dataclass
class Interest:
    """A capability the owner wants to learn."""
    id: InterestId
    user_id: UserId
    name: str
    level: InterestLevel
    created_at: datetime


@dataclass
class Profile:
    id: ProfileId
    user_id: UserId
    created_at: datetime
    learning_modes: list[str] = field(default_factory=list)
    availability: list[list[bool]] = field(default_factory=empty_availability)
    learning_goals: str | None = None
    learning_intensity: str | None = None
    teaching_styles: list[str] = field(default_factory=list)
    motivation: str | None = None


@dataclass
class SkillRequest:
    """Directed proposal from_user -> to_user to exchange instruction."""
    id: RequestId
    from_user_id: UserId
    to_user_id: UserId
    status: RequestStatus
    created_at: datetime
    teach_skill_id: SkillId | None = None
    learn_skill_id: InterestId | None = None
    proposed_schedule: datetime | None = None
    message: str | None = None


@dataclass
class LearningSession:
    id: SessionId
    teacher_id: UserId
    learner_id: UserId
    scheduled_start: datetime
    scheduled_end: datetime
    status: SessionStatus
    created_at: datetime
    request_id: RequestId | None = None
    meeting_link: str | None = None
    notes: str | None = None

    def participants(self) -> set[UserId]:
        return {self.teacher_id, self.learner_id}


@dataclass
class Feedback:
    id: FeedbackId
    session_id: SessionId
    from_user_id: UserId
    to_user_id: UserId
    rating: int
    created_at: datetime
    comment: str | None = None


@dataclass
class MatchSuggestion:
    """One ranked candidate partner.

    compatibility_score is the deterministic part (multiples of 25);
    match_score = min(compatibility_score + jitter, 100).
    """
    candidate: User
    match_score: int
    compatibility_score: int
    jitter: int
    teaching_skills: list[Skill] = field(default_factory=list)
    learning_interests: list[Interest] = field(default_factory=list)


@dataclass
class RatingSummary:
    count: int
    average: float | None
