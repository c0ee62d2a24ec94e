"""User Routes — registration, login, user detail, profiles, skills and learning interests.

Invariants:
    - Responses never contain password material (UserResponse has no such field)
    - Path user ids must exist; services raise ResourceNotFoundError otherwise
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from skillswap.api.dependencies import get_feedback_recorder, get_user_directory
from skillswap.schemas.skill import (
    InterestCreate, InterestEnvelope, InterestListEnvelope, InterestResponse,
    SkillCreate, SkillEnvelope, SkillListEnvelope, SkillResponse,
)
from skillswap.schemas.user import (
    ProfileEnvelope, ProfileResponse, ProfileUpdate, RatingSummaryResponse,
    UserDetailEnvelope, UserEnvelope, UserLogin, UserRegister, UserResponse,
)
from skillswap.services.feedback_recorder import FeedbackRecorder
from skillswap.services.user_directory import UserDirectory

router = APIRouter(prefix="/api/v1/users", tags=["users"])

UserIdPath = Annotated[int, Path(gt=0)]


# ─── Accounts ────────────────────────────────────────────────────

@router.post(
    "/register", response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: UserRegister,
    directory: UserDirectory = Depends(get_user_directory),
):
    fields = body.model_dump(exclude={"username", "email", "password"})
    user = await directory.register_user(
        body.username, body.email, body.password, **fields,
    )
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post("/login", response_model=UserEnvelope)
async def login(
    body: UserLogin,
    directory: UserDirectory = Depends(get_user_directory),
):
    user = await directory.authenticate_user(body.username, body.password)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.get("/{user_id}", response_model=UserDetailEnvelope)
async def get_user(
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
    recorder: FeedbackRecorder = Depends(get_feedback_recorder),
):
    """User with profile (null until saved) and received-rating summary."""
    user = await directory.get_user(user_id)
    profile = await directory.find_profile(user_id)
    summary = await recorder.summarize_feedback(user_id)
    return UserDetailEnvelope(
        user=UserResponse.model_validate(user),
        profile=ProfileResponse.model_validate(profile) if profile else None,
        rating=RatingSummaryResponse.model_validate(summary),
    )


# ─── Profiles ────────────────────────────────────────────────────

@router.put("/{user_id}/profile", response_model=ProfileEnvelope)
async def update_profile(
    body: ProfileUpdate,
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
):
    profile = await directory.update_profile(user_id, **body.to_fields())
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))


@router.get("/{user_id}/profile", response_model=ProfileEnvelope)
async def get_profile(
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
):
    profile = await directory.get_profile(user_id)
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))


# ─── Skills & Interests ──────────────────────────────────────────

@router.post(
    "/{user_id}/skills", response_model=SkillEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def add_skill(
    body: SkillCreate,
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
):
    skill = await directory.add_skill(user_id, body.name, body.level)
    return SkillEnvelope(skill=SkillResponse.model_validate(skill))


@router.get("/{user_id}/skills", response_model=SkillListEnvelope)
async def list_skills(
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
):
    skills = await directory.list_skills(user_id)
    return SkillListEnvelope(skills=[SkillResponse.model_validate(s) for s in skills])


@router.post(
    "/{user_id}/learning-interests", response_model=InterestEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def add_interest(
    body: InterestCreate,
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
):
    interest = await directory.add_interest(user_id, body.name, body.level)
    return InterestEnvelope(interest=InterestResponse.model_validate(interest))


@router.get("/{user_id}/learning-interests", response_model=InterestListEnvelope)
async def list_interests(
    user_id: UserIdPath,
    directory: UserDirectory = Depends(get_user_directory),
):
    interests = await directory.list_interests(user_id)
    return InterestListEnvelope(
        interests=[InterestResponse.model_validate(i) for i in interests],
    )
