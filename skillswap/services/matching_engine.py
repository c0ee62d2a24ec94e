"""Matching Engine — ranked partner suggestions from complementary skills and interests.

Invariants:
    - Pure read: no store writes
    - The requester never appears in their own suggestions
    - Unknown requester raises ResourceNotFoundError (never an empty list)
    - One jitter draw per candidate, in candidate enumeration order

Design Decisions:
    - Reads all skills and interests once and groups them in memory, instead of
      one query pair per candidate
"""

import logging
from collections import defaultdict

from skillswap.core.domain_types import UserId
from skillswap.core.entities import Interest, MatchSuggestion, Skill
from skillswap.core.matching import (
    Jitter, build_suggestion, compute_compatibility, random_jitter, rank_candidates,
)
from skillswap.core.repository_protocols import SkillSwapStore
from skillswap.services.lookups import require_user

logger = logging.getLogger(__name__)


class MatchingEngine:
    """suggest_matches over an injected store and jitter source."""

    def __init__(self, store: SkillSwapStore, jitter: Jitter = random_jitter):
        self.store = store
        self.jitter = jitter

    async def suggest_matches(
        self, user_id: UserId, limit: int | None = None,
    ) -> list[MatchSuggestion]:
        await require_user(self.store, user_id)

        skills_by_user: dict[UserId, list[Skill]] = defaultdict(list)
        for skill in await self.store.list_all_skills():
            skills_by_user[skill.user_id].append(skill)
        interests_by_user: dict[UserId, list[Interest]] = defaultdict(list)
        for interest in await self.store.list_all_interests():
            interests_by_user[interest.user_id].append(interest)

        my_skills = skills_by_user[user_id]
        my_interests = interests_by_user[user_id]

        suggestions = []
        for candidate in await self.store.list_users():
            if candidate.id == user_id:
                continue
            their_skills = skills_by_user[candidate.id]
            their_interests = interests_by_user[candidate.id]
            compatibility = compute_compatibility(
                my_skills, my_interests, their_skills, their_interests,
            )
            suggestions.append(build_suggestion(
                candidate, compatibility, self.jitter(),
                their_skills, their_interests,
            ))

        ranked = rank_candidates(suggestions)
        logger.info(
            f"Computed {len(ranked)} match suggestions",
            extra={"user_id": user_id, "candidate_count": len(ranked)},
        )
        return ranked[:limit] if limit is not None else ranked
