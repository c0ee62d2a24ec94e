"""Learning Session Routes — schedule, list, complete and cancel sessions."""

from fastapi import APIRouter, Depends, Path, status

from skillswap.api.dependencies import get_session_lifecycle
from skillswap.schemas.exchange import (
    LearningSessionCreate, LearningSessionEnvelope, LearningSessionListEnvelope,
    LearningSessionResponse, StatusUpdate,
)
from skillswap.services.session_lifecycle import SessionLifecycle

router = APIRouter(prefix="/api/v1", tags=["learning-sessions"])


@router.post(
    "/learning-sessions", response_model=LearningSessionEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def schedule_session(
    body: LearningSessionCreate,
    lifecycle: SessionLifecycle = Depends(get_session_lifecycle),
):
    session = await lifecycle.schedule_session(
        body.teacher_id,
        body.learner_id,
        body.scheduled_start,
        body.scheduled_end,
        request_id=body.request_id,
        meeting_link=body.meeting_link,
        notes=body.notes,
    )
    return LearningSessionEnvelope(session=LearningSessionResponse.model_validate(session))


@router.get(
    "/users/{user_id}/learning-sessions", response_model=LearningSessionListEnvelope,
)
async def list_sessions(
    user_id: int = Path(gt=0),
    lifecycle: SessionLifecycle = Depends(get_session_lifecycle),
):
    """Sessions where the user teaches or learns, by start time."""
    sessions = await lifecycle.list_sessions_for_user(user_id)
    return LearningSessionListEnvelope(
        sessions=[LearningSessionResponse.model_validate(s) for s in sessions],
    )


@router.put(
    "/learning-sessions/{session_id}/status", response_model=LearningSessionEnvelope,
)
async def update_session_status(
    body: StatusUpdate,
    session_id: int = Path(gt=0),
    lifecycle: SessionLifecycle = Depends(get_session_lifecycle),
):
    session = await lifecycle.update_session_status(session_id, body.status)
    return LearningSessionEnvelope(session=LearningSessionResponse.model_validate(session))
