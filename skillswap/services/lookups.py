"""Lookups — fetch-or-raise helpers shared by every service."""

from skillswap.core.domain_types import (
    UserId, SkillId, InterestId, RequestId, SessionId,
)
from skillswap.core.entities import (
    User, Skill, Interest, SkillRequest, LearningSession,
)
from skillswap.core.errors import ErrorContext, ResourceNotFoundError
from skillswap.core.repository_protocols import SkillSwapStore


async def require_user(store: SkillSwapStore, user_id: UserId) -> User:
    user = await store.get_user(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))
    return user


async def require_skill(store: SkillSwapStore, skill_id: SkillId) -> Skill:
    skill = await store.get_skill(skill_id)
    if skill is None:
        raise ResourceNotFoundError("Skill", skill_id)
    return skill


async def require_interest(store: SkillSwapStore, interest_id: InterestId) -> Interest:
    interest = await store.get_interest(interest_id)
    if interest is None:
        raise ResourceNotFoundError("LearningInterest", interest_id)
    return interest


async def require_request(store: SkillSwapStore, request_id: RequestId) -> SkillRequest:
    request = await store.get_request(request_id)
    if request is None:
        raise ResourceNotFoundError(
            "SkillRequest", request_id, ErrorContext(request_id=request_id),
        )
    return request


async def require_session(store: SkillSwapStore, session_id: SessionId) -> LearningSession:
    session = await store.get_session(session_id)
    if session is None:
        raise ResourceNotFoundError(
            "LearningSession", session_id, ErrorContext(session_id=session_id),
        )
    return session
