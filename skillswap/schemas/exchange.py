"""Exchange Schemas — skill requests, learning sessions, feedback and match suggestions.

Invariants:
    - Ids are positive integers
    - Datetimes must carry a timezone (AwareDatetime)
    - Status update bodies are plain strings; the lifecycle services decide validity
"""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from skillswap.core.domain_types import RequestStatus, SessionStatus
from skillswap.schemas.skill import InterestResponse, SkillResponse
from skillswap.schemas.user import UserResponse


# --- Skill requests -----------------------------------------------------------

class SkillRequestCreate(BaseModel):
    from_user_id: int = Field(gt=0)
    to_user_id: int = Field(gt=0)
    teach_skill_id: int | None = Field(None, gt=0)
    learn_skill_id: int | None = Field(None, gt=0)
    proposed_schedule: AwareDatetime | None = None
    message: str | None = Field(None, max_length=2000)


class StatusUpdate(BaseModel):
    status: str = Field(min_length=1, max_length=20)


class SkillRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    from_user_id: int
    to_user_id: int
    teach_skill_id: int | None = None
    learn_skill_id: int | None = None
    status: RequestStatus
    proposed_schedule: datetime | None = None
    message: str | None = None
    created_at: datetime


class SkillRequestEnvelope(BaseModel):
    request: SkillRequestResponse


class SkillRequestListEnvelope(BaseModel):
    requests: list[SkillRequestResponse]


# --- Learning sessions --------------------------------------------------------

class LearningSessionCreate(BaseModel):
    request_id: int | None = Field(None, gt=0)
    teacher_id: int = Field(gt=0)
    learner_id: int = Field(gt=0)
    scheduled_start: AwareDatetime
    scheduled_end: AwareDatetime
    meeting_link: str | None = Field(None, max_length=500)
    notes: str | None = Field(None, max_length=5000)


class LearningSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    request_id: int | None = None
    teacher_id: int
    learner_id: int
    scheduled_start: datetime
    scheduled_end: datetime
    status: SessionStatus
    meeting_link: str | None = None
    notes: str | None = None
    created_at: datetime


class LearningSessionEnvelope(BaseModel):
    session: LearningSessionResponse


class LearningSessionListEnvelope(BaseModel):
    sessions: list[LearningSessionResponse]


# --- Feedback -----------------------------------------------------------------

class FeedbackCreate(BaseModel):
    session_id: int = Field(gt=0)
    from_user_id: int = Field(gt=0)
    to_user_id: int = Field(gt=0)
    rating: int = Field(ge=1, le=5, strict=True)
    comment: str | None = Field(None, max_length=2000)


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: int
    from_user_id: int
    to_user_id: int
    rating: int
    comment: str | None = None
    created_at: datetime


class FeedbackEnvelope(BaseModel):
    feedback: FeedbackResponse


class FeedbackListEnvelope(BaseModel):
    feedback: list[FeedbackResponse]


# --- Matches ------------------------------------------------------------------

class MatchResponse(BaseModel):
    """match_score is the ranking key; compatibility_score its deterministic part."""
    model_config = ConfigDict(from_attributes=True)

    candidate: UserResponse
    match_score: int
    compatibility_score: int
    teaching_skills: list[SkillResponse]
    learning_interests: list[InterestResponse]


class MatchListEnvelope(BaseModel):
    matches: list[MatchResponse]
