"""Invariant Checks — argument-level rules shared by the lifecycle services.

Invariants:
    - All functions are PURE: no IO, raise InvalidArgumentError on violation
    - Checks run before any store lookup, so a self-referencing call fails with
      InvalidArgumentError even when the referenced ids do not exist
    - Aware datetimes leave to_utc in UTC, so every store sees the same instant
"""

from datetime import datetime, timezone

from skillswap.core.domain_types import AVAILABILITY_DAYS, AVAILABILITY_TIMESLOTS
from skillswap.core.errors import ErrorContext, InvalidArgumentError


MIN_RATING: int = 1
MAX_RATING: int = 5


def check_distinct_users(
    first: int, second: int, field: str, message: str,
) -> None:
    if first == second:
        raise InvalidArgumentError(message, field, ErrorContext(user_id=first))


def check_time_window(start: datetime, end: datetime) -> None:
    """Session window must be non-empty: start < end."""
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise InvalidArgumentError(
            "scheduled_start and scheduled_end must both be timezone-aware or both naive",
            "scheduled_end",
        )
    if end <= start:
        raise InvalidArgumentError(
            f"scheduled_end ({end.isoformat()}) must be after "
            f"scheduled_start ({start.isoformat()})",
            "scheduled_end",
        )


def to_utc(value: datetime | None) -> datetime | None:
    """Shift an aware datetime to UTC; None and naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def check_rating(rating: int) -> None:
    # bool is an int subclass; True would otherwise pass as rating 1
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidArgumentError("rating must be an integer", "rating")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidArgumentError(
            f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}",
            "rating",
        )


def check_availability_grid(grid: list[list[bool]]) -> None:
    """Availability must be exactly timeslots x days of booleans."""
    rows, cols = len(AVAILABILITY_TIMESLOTS), len(AVAILABILITY_DAYS)
    if len(grid) != rows or any(len(row) != cols for row in grid):
        raise InvalidArgumentError(
            f"availability must be a {rows}x{cols} grid", "availability",
        )
    if not all(isinstance(cell, bool) for row in grid for cell in row):
        raise InvalidArgumentError(
            "availability cells must be booleans", "availability",
        )


def check_owned_by_participant(
    owner_id: int, participants: set[int], field: str,
) -> None:
    if owner_id not in participants:
        raise InvalidArgumentError(
            f"{field} belongs to user {owner_id}, who is not part of this exchange",
            field, ErrorContext(user_id=owner_id),
        )
