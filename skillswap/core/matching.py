"""Match Scoring — pure computation of complementary teach/learn overlap.

Invariants:
    - compatibility_score is symmetric in intent: 25 points per requester interest the
      candidate teaches, 25 per requester skill the candidate wants to learn
    - Name comparison is case-insensitive and ignores surrounding whitespace
    - match_score never exceeds MAX_MATCH_SCORE
    - The only non-determinism is the injected Jitter callable

Design Decisions:
    - Jitter is a named seam (Callable[[], int]): random_jitter keeps demo variety,
      no_jitter gives a deterministic ranking for tests and for deployments that
      disable it via settings
    - rank_candidates uses a stable sort keyed on (match_score, compatibility_score)
      so equal scores keep the store's enumeration order
"""

import random
from typing import Callable, Iterable

from skillswap.core.entities import Interest, MatchSuggestion, Skill, User


MATCH_POINTS: int = 25
JITTER_CEILING: int = 50
MAX_MATCH_SCORE: int = 100

Jitter = Callable[[], int]


def random_jitter() -> int:
    """Uniform integer in [0, JITTER_CEILING)."""
    return random.randrange(JITTER_CEILING)


def no_jitter() -> int:
    return 0


def normalize_skill_name(name: str) -> str:
    return name.strip().casefold()


def _names(items: Iterable[Skill | Interest]) -> set[str]:
    return {normalize_skill_name(item.name) for item in items}


def compute_compatibility(
    requester_skills: list[Skill],
    requester_interests: list[Interest],
    candidate_skills: list[Skill],
    candidate_interests: list[Interest],
) -> int:
    """Deterministic component of the match score. Pure, no IO.

    Each requester entry counts once even if the candidate lists the same
    name twice; duplicated requester entries count once per entry.
    """
    candidate_teaches = _names(candidate_skills)
    candidate_learns = _names(candidate_interests)

    learnable = sum(
        1 for interest in requester_interests
        if normalize_skill_name(interest.name) in candidate_teaches
    )
    teachable = sum(
        1 for skill in requester_skills
        if normalize_skill_name(skill.name) in candidate_learns
    )
    return MATCH_POINTS * (learnable + teachable)


def apply_jitter(compatibility: int, jitter_value: int) -> int:
    """Add jitter and clamp to MAX_MATCH_SCORE."""
    return min(compatibility + jitter_value, MAX_MATCH_SCORE)


def build_suggestion(
    candidate: User,
    compatibility: int,
    jitter_value: int,
    candidate_skills: list[Skill],
    candidate_interests: list[Interest],
) -> MatchSuggestion:
    return MatchSuggestion(
        candidate=candidate,
        match_score=apply_jitter(compatibility, jitter_value),
        compatibility_score=compatibility,
        jitter=jitter_value,
        teaching_skills=list(candidate_skills),
        learning_interests=list(candidate_interests),
    )


def rank_candidates(suggestions: list[MatchSuggestion]) -> list[MatchSuggestion]:
    """Descending by match_score, then compatibility_score. Stable."""
    return sorted(
        suggestions,
        key=lambda s: (s.match_score, s.compatibility_score),
        reverse=True,
    )
