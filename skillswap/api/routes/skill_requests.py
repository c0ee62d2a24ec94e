"""Skill Request Routes — create, list and move skill requests through their lifecycle."""

from fastapi import APIRouter, Depends, Path, status

from skillswap.api.dependencies import get_request_lifecycle
from skillswap.schemas.exchange import (
    SkillRequestCreate, SkillRequestEnvelope, SkillRequestListEnvelope,
    SkillRequestResponse, StatusUpdate,
)
from skillswap.services.request_lifecycle import RequestLifecycle

router = APIRouter(prefix="/api/v1", tags=["skill-requests"])


@router.post(
    "/skill-requests", response_model=SkillRequestEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_request(
    body: SkillRequestCreate,
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle),
):
    request = await lifecycle.create_request(
        body.from_user_id,
        body.to_user_id,
        teach_skill_id=body.teach_skill_id,
        learn_skill_id=body.learn_skill_id,
        message=body.message,
        proposed_schedule=body.proposed_schedule,
    )
    return SkillRequestEnvelope(request=SkillRequestResponse.model_validate(request))


@router.get("/users/{user_id}/skill-requests", response_model=SkillRequestListEnvelope)
async def list_requests(
    user_id: int = Path(gt=0),
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle),
):
    """Requests the user sent or received, newest first."""
    requests = await lifecycle.list_requests_for_user(user_id)
    return SkillRequestListEnvelope(
        requests=[SkillRequestResponse.model_validate(r) for r in requests],
    )


@router.put("/skill-requests/{request_id}/status", response_model=SkillRequestEnvelope)
async def update_request_status(
    body: StatusUpdate,
    request_id: int = Path(gt=0),
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle),
):
    request = await lifecycle.update_request_status(request_id, body.status)
    return SkillRequestEnvelope(request=SkillRequestResponse.model_validate(request))
