"""Request Lifecycle — creation and status transitions of skill exchange requests.

Invariants:
    - New requests always start as pending
    - from_user_id == to_user_id fails with InvalidArgumentError before any lookup
    - A referenced teach skill or learn interest must belong to one of the two participants
    - Status changes go through check_transition (REQUEST_TRANSITIONS)

Design Decisions:
    - enforce_terminal=True (default) rejects overwriting accepted/rejected/cancelled;
      False keeps the legacy overwrite behaviour for deployments that relied on it
"""

import logging
from datetime import datetime

from skillswap.core.domain_types import (
    UserId, SkillId, InterestId, RequestId, RequestStatus,
)
from skillswap.core.entities import SkillRequest
from skillswap.core.enforce_invariants import (
    check_distinct_users, check_owned_by_participant, to_utc,
)
from skillswap.core.enforce_transitions import (
    REQUEST_TRANSITIONS, REQUEST_UPDATE_TARGETS, check_transition, parse_target_status,
)
from skillswap.core.errors import ErrorContext, InvalidStatusError
from skillswap.core.repository_protocols import SkillSwapStore
from skillswap.services.lookups import (
    require_interest, require_request, require_skill, require_user,
)

logger = logging.getLogger(__name__)


class RequestLifecycle:

    def __init__(self, store: SkillSwapStore, enforce_terminal: bool = True):
        self.store = store
        self.enforce_terminal = enforce_terminal

    async def create_request(
        self,
        from_user_id: UserId,
        to_user_id: UserId,
        teach_skill_id: SkillId | None = None,
        learn_skill_id: InterestId | None = None,
        message: str | None = None,
        proposed_schedule: datetime | None = None,
    ) -> SkillRequest:
        """Create a pending request from one user to another."""
        check_distinct_users(
            from_user_id, to_user_id, "to_user_id",
            "A skill request cannot be addressed to its sender",
        )
        await require_user(self.store, from_user_id)
        await require_user(self.store, to_user_id)

        participants = {from_user_id, to_user_id}
        if teach_skill_id is not None:
            skill = await require_skill(self.store, teach_skill_id)
            check_owned_by_participant(skill.user_id, participants, "teach_skill_id")
        if learn_skill_id is not None:
            interest = await require_interest(self.store, learn_skill_id)
            check_owned_by_participant(interest.user_id, participants, "learn_skill_id")

        request = await self.store.create_request(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            status=RequestStatus.PENDING,
            teach_skill_id=teach_skill_id,
            learn_skill_id=learn_skill_id,
            proposed_schedule=to_utc(proposed_schedule),
            message=message,
        )
        logger.info(
            "Skill request created",
            extra={"request_id": request.id, "user_id": from_user_id},
        )
        return request

    async def update_request_status(
        self, request_id: RequestId, new_status: str | RequestStatus,
    ) -> SkillRequest:
        """Move a request to accepted, rejected or cancelled."""
        context = ErrorContext(request_id=request_id)
        target = parse_target_status(
            RequestStatus, REQUEST_UPDATE_TARGETS, new_status, context,
        )
        request = await require_request(self.store, request_id)
        try:
            check_transition(
                REQUEST_TRANSITIONS, request.status, target,
                enforce_terminal=self.enforce_terminal, context=context,
            )
        except InvalidStatusError:
            logger.warning(
                "Rejected skill request transition",
                extra={
                    "request_id": request_id,
                    "from_status": request.status.value,
                    "to_status": target.value,
                },
            )
            raise

        updated = await self.store.set_request_status(request_id, target)
        logger.info(
            "Skill request status changed",
            extra={
                "request_id": request_id,
                "from_status": request.status.value,
                "to_status": target.value,
            },
        )
        return updated

    async def list_requests_for_user(self, user_id: UserId) -> list[SkillRequest]:
        """Requests the user sent or received, newest first."""
        return await self.store.list_requests_for_user(user_id)
