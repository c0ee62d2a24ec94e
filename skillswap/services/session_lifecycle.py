"""Session Lifecycle — scheduling and completion of learning sessions.

Invariants:
    - New sessions always start as scheduled
    - teacher_id == learner_id or end <= start fail with InvalidArgumentError before any lookup
    - A session linked to a request requires that request to be accepted and the
      teacher/learner pair to be exactly the request's two participants
    - scheduled -> completed | cancelled; no reopen operation exists
"""

import logging
from datetime import datetime

from skillswap.core.domain_types import (
    UserId, RequestId, SessionId, RequestStatus, SessionStatus,
)
from skillswap.core.entities import LearningSession
from skillswap.core.enforce_invariants import check_distinct_users, check_time_window, to_utc
from skillswap.core.enforce_transitions import (
    SESSION_TRANSITIONS, SESSION_UPDATE_TARGETS, check_transition, parse_target_status,
)
from skillswap.core.errors import ErrorContext, InvalidArgumentError, InvalidStatusError
from skillswap.core.repository_protocols import SkillSwapStore
from skillswap.services.lookups import require_request, require_session, require_user

logger = logging.getLogger(__name__)


class SessionLifecycle:

    def __init__(self, store: SkillSwapStore, enforce_terminal: bool = True):
        self.store = store
        self.enforce_terminal = enforce_terminal

    async def schedule_session(
        self,
        teacher_id: UserId,
        learner_id: UserId,
        start: datetime,
        end: datetime,
        request_id: RequestId | None = None,
        meeting_link: str | None = None,
        notes: str | None = None,
    ) -> LearningSession:
        check_distinct_users(
            teacher_id, learner_id, "learner_id",
            "A session needs two different participants",
        )
        check_time_window(start, end)
        await require_user(self.store, teacher_id)
        await require_user(self.store, learner_id)
        if request_id is not None:
            await self._check_source_request(request_id, teacher_id, learner_id)

        session = await self.store.create_session(
            teacher_id=teacher_id,
            learner_id=learner_id,
            scheduled_start=to_utc(start),
            scheduled_end=to_utc(end),
            status=SessionStatus.SCHEDULED,
            request_id=request_id,
            meeting_link=meeting_link,
            notes=notes,
        )
        logger.info(
            "Learning session scheduled",
            extra={"session_id": session.id, "request_id": request_id},
        )
        return session

    async def _check_source_request(
        self, request_id: RequestId, teacher_id: UserId, learner_id: UserId,
    ) -> None:
        request = await require_request(self.store, request_id)
        context = ErrorContext(request_id=request_id)
        if request.status != RequestStatus.ACCEPTED:
            raise InvalidStatusError(
                f"Sessions can only be scheduled from an accepted request "
                f"(request {request_id} is {request.status.value})",
                request.status.value, SessionStatus.SCHEDULED.value, context,
            )
        if {teacher_id, learner_id} != {request.from_user_id, request.to_user_id}:
            raise InvalidArgumentError(
                f"Teacher and learner must be the participants of request {request_id}",
                "request_id", context,
            )

    async def update_session_status(
        self, session_id: SessionId, new_status: str | SessionStatus,
    ) -> LearningSession:
        """Complete or cancel a scheduled session."""
        context = ErrorContext(session_id=session_id)
        target = parse_target_status(
            SessionStatus, SESSION_UPDATE_TARGETS, new_status, context,
        )
        session = await require_session(self.store, session_id)
        check_transition(
            SESSION_TRANSITIONS, session.status, target,
            enforce_terminal=self.enforce_terminal, context=context,
        )
        updated = await self.store.set_session_status(session_id, target)
        logger.info(
            "Learning session status changed",
            extra={
                "session_id": session_id,
                "from_status": session.status.value,
                "to_status": target.value,
            },
        )
        return updated

    async def list_sessions_for_user(self, user_id: UserId) -> list[LearningSession]:
        return await self.store.list_sessions_for_user(user_id)
