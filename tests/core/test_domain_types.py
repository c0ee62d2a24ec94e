"""Domain type tests — enum values match the persisted vocabularies."""

from skillswap.core.domain_types import (
    AVAILABILITY_DAYS,
    AVAILABILITY_TIMESLOTS,
    InterestLevel,
    LearningIntensity,
    LearningMode,
    RequestStatus,
    SessionStatus,
    SkillLevel,
    TeachingStyle,
    empty_availability,
)


def test_request_status_values():
    assert [s.value for s in RequestStatus] == ["pending", "accepted", "rejected", "cancelled"]


def test_session_status_values():
    assert [s.value for s in SessionStatus] == ["scheduled", "completed", "cancelled"]


def test_interest_levels_have_no_expert_tier():
    assert "Expert" in {level.value for level in SkillLevel}
    assert "Expert" not in {level.value for level in InterestLevel}


def test_profile_vocabularies():
    assert LearningMode("video-calls") is LearningMode.VIDEO_CALLS
    assert LearningIntensity("casual") is LearningIntensity.CASUAL
    assert TeachingStyle("project-based") is TeachingStyle.PROJECT_BASED


def test_empty_availability_shape_and_independence():
    grid = empty_availability()
    assert len(grid) == len(AVAILABILITY_TIMESLOTS) == 3
    assert all(len(row) == len(AVAILABILITY_DAYS) == 7 for row in grid)
    grid[0][0] = True
    assert grid[1][0] is False
    assert empty_availability()[0][0] is False


def test_str_enums_compare_to_values():
    assert RequestStatus.PENDING == "pending"
