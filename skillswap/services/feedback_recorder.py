"""Feedback Recorder — append-only ratings between the participants of a completed session.

Invariants:
    - rating in [1, 5] and from_user_id != to_user_id, checked before any lookup
    - Rater and ratee are the session's teacher and learner (either direction)
    - Only completed sessions accept feedback
    - One feedback per (session, rater) unless allow_duplicates is set
"""

import logging

from skillswap.core.domain_types import UserId, SessionId, SessionStatus
from skillswap.core.entities import Feedback, RatingSummary
from skillswap.core.enforce_invariants import check_distinct_users, check_rating
from skillswap.core.errors import (
    DuplicateFeedbackError, ErrorContext, InvalidArgumentError, InvalidStatusError,
)
from skillswap.core.repository_protocols import SkillSwapStore
from skillswap.services.lookups import require_session

logger = logging.getLogger(__name__)


class FeedbackRecorder:

    def __init__(self, store: SkillSwapStore, allow_duplicates: bool = False):
        self.store = store
        self.allow_duplicates = allow_duplicates

    async def record_feedback(
        self,
        session_id: SessionId,
        from_user_id: UserId,
        to_user_id: UserId,
        rating: int,
        comment: str | None = None,
    ) -> Feedback:
        check_rating(rating)
        check_distinct_users(
            from_user_id, to_user_id, "to_user_id",
            "Participants cannot rate themselves",
        )

        session = await require_session(self.store, session_id)
        context = ErrorContext(session_id=session_id, user_id=from_user_id)
        if {from_user_id, to_user_id} != session.participants():
            raise InvalidArgumentError(
                f"Feedback must be between the teacher and learner of session {session_id}",
                "from_user_id", context,
            )
        if session.status != SessionStatus.COMPLETED:
            raise InvalidStatusError(
                f"Feedback requires a completed session (session {session_id} "
                f"is {session.status.value})",
                session.status.value, SessionStatus.COMPLETED.value, context,
            )
        if not self.allow_duplicates and await self.store.find_feedback(session_id, from_user_id):
            logger.warning(
                "Duplicate feedback rejected",
                extra={"session_id": session_id, "user_id": from_user_id},
            )
            raise DuplicateFeedbackError(session_id, from_user_id)

        feedback = await self.store.create_feedback(
            session_id=session_id,
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            rating=rating,
            comment=comment,
        )
        logger.info(
            "Session feedback recorded",
            extra={"feedback_id": feedback.id, "session_id": session_id},
        )
        return feedback

    async def list_feedback_received_by(self, user_id: UserId) -> list[Feedback]:
        return await self.store.list_feedback_received_by(user_id)

    async def summarize_feedback(self, user_id: UserId) -> RatingSummary:
        """Count and mean rating of everything the user received."""
        received = await self.store.list_feedback_received_by(user_id)
        if not received:
            return RatingSummary(count=0, average=None)
        total = sum(f.rating for f in received)
        return RatingSummary(count=len(received), average=round(total / len(received), 2))
