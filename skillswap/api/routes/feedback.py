"""Feedback Routes — record a rating for a completed session and list what a user received."""

from fastapi import APIRouter, Depends, Path, status

from skillswap.api.dependencies import get_feedback_recorder
from skillswap.schemas.exchange import (
    FeedbackCreate, FeedbackEnvelope, FeedbackListEnvelope, FeedbackResponse,
)
from skillswap.services.feedback_recorder import FeedbackRecorder

router = APIRouter(prefix="/api/v1", tags=["feedback"])


@router.post(
    "/session-feedback", response_model=FeedbackEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def record_feedback(
    body: FeedbackCreate,
    recorder: FeedbackRecorder = Depends(get_feedback_recorder),
):
    feedback = await recorder.record_feedback(
        body.session_id, body.from_user_id, body.to_user_id,
        body.rating, comment=body.comment,
    )
    return FeedbackEnvelope(feedback=FeedbackResponse.model_validate(feedback))


@router.get("/users/{user_id}/received-feedback", response_model=FeedbackListEnvelope)
async def list_received_feedback(
    user_id: int = Path(gt=0),
    recorder: FeedbackRecorder = Depends(get_feedback_recorder),
):
    received = await recorder.list_feedback_received_by(user_id)
    return FeedbackListEnvelope(
        feedback=[FeedbackResponse.model_validate(f) for f in received],
    )
