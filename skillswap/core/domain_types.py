"""Domain Types — identity wrappers, status enums and profile vocabularies.

Invariants:
    - Entity ids are positive ints (serial primary keys) wrapped in NewTypes
    - All valid states encoded as Enums — no raw string matching in core logic
    - Availability grid is AVAILABILITY_TIMESLOTS rows x AVAILABILITY_DAYS columns

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
SkillId = NewType("SkillId", int)
InterestId = NewType("InterestId", int)
ProfileId = NewType("ProfileId", int)
RequestId = NewType("RequestId", int)
SessionId = NewType("SessionId", int)
FeedbackId = NewType("FeedbackId", int)


# ─── Levels ──────────────────────────────────────────────────────

class SkillLevel(str, Enum):
    """Proficiency of a taught skill."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class InterestLevel(str, Enum):
    """Target level of a learning interest (no Expert tier)."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


# ─── Lifecycle Statuses ──────────────────────────────────────────

class RequestStatus(str, Enum):
    """Skill request states — maps to skill_requests.status."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class SessionStatus(str, Enum):
    """Learning session states — maps to learning_sessions.status."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ─── Profile Vocabularies ────────────────────────────────────────

class LearningMode(str, Enum):
    VIDEO_CALLS = "video-calls"
    CHAT_BASED = "chat-based"
    PRE_RECORDED = "pre-recorded"


class LearningIntensity(str, Enum):
    CASUAL = "casual"          # 1-2 hours per week
    REGULAR = "regular"
    INTENSIVE = "intensive"


class TeachingStyle(str, Enum):
    STRUCTURED = "structured"
    PROJECT_BASED = "project-based"
    MENTORSHIP = "mentorship"


AVAILABILITY_TIMESLOTS: tuple[str, ...] = ("Morning", "Afternoon", "Evening")
AVAILABILITY_DAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def empty_availability() -> list[list[bool]]:
    """A 3x7 grid with every slot unavailable."""
    return [[False] * len(AVAILABILITY_DAYS) for _ in AVAILABILITY_TIMESLOTS]
