"""SqlStore tests — the relational store honours the same contract as InMemoryStore."""

from datetime import datetime, timedelta, timezone

import pytest

from skillswap.core.domain_types import (
    InterestLevel, RequestStatus, SessionStatus, SkillLevel, empty_availability,
)
from skillswap.core.errors import DatabaseError, ResourceNotFoundError
from skillswap.core.matching import no_jitter
from skillswap.services.feedback_recorder import FeedbackRecorder
from skillswap.services.matching_engine import MatchingEngine
from skillswap.services.request_lifecycle import RequestLifecycle
from skillswap.services.session_lifecycle import SessionLifecycle

START = datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc)


async def _user(store, username):
    return await store.create_user(
        username=username, email=f"{username}@example.com", password_hash="hash",
    )


# --- Users & Profiles ----------------------------------------------------------

async def test_create_and_fetch_user(sql_store):
    created = await sql_store.create_user(
        username="alice", email="alice@example.com", password_hash="hash",
        first_name="Alice",
    )

    fetched = await sql_store.get_user(created.id)

    assert fetched.username == "alice"
    assert fetched.password_hash == "hash"
    assert fetched.display_name == created.display_name
    assert fetched.created_at.tzinfo is not None


async def test_lookup_by_username_and_email(sql_store):
    user = await _user(sql_store, "alice")

    assert (await sql_store.get_user_by_username("alice")).id == user.id
    assert (await sql_store.get_user_by_email("ALICE@example.com")).id == user.id
    assert await sql_store.get_user_by_username("bob") is None
    assert await sql_store.get_user(999) is None


async def test_duplicate_username_raises_database_error(sql_store):
    await _user(sql_store, "alice")
    with pytest.raises(DatabaseError):
        await sql_store.create_user(
            username="alice", email="other@example.com", password_hash="hash",
        )


async def test_profile_upsert_keeps_single_row(sql_store):
    user = await _user(sql_store, "alice")

    first = await sql_store.upsert_profile(user.id, learning_goals="French")
    grid = empty_availability()
    grid[2][6] = True
    second = await sql_store.upsert_profile(
        user.id, availability=grid, learning_modes=["video-calls"],
    )

    assert second.id == first.id
    assert second.learning_goals == "French"
    assert second.availability[2][6] is True
    assert (await sql_store.get_profile(user.id)).learning_modes == ["video-calls"]


async def test_new_profile_has_default_grid(sql_store):
    user = await _user(sql_store, "alice")
    profile = await sql_store.upsert_profile(user.id)
    assert profile.availability == empty_availability()
    assert profile.teaching_styles == []


# --- Skills & Interests --------------------------------------------------------

async def test_skills_and_interests_round_trip_levels(sql_store):
    user = await _user(sql_store, "alice")
    skill = await sql_store.add_skill(user.id, "Guitar", SkillLevel.EXPERT)
    interest = await sql_store.add_interest(user.id, "Spanish", InterestLevel.BEGINNER)

    assert (await sql_store.get_skill(skill.id)).level is SkillLevel.EXPERT
    assert (await sql_store.get_interest(interest.id)).level is InterestLevel.BEGINNER
    assert [s.id for s in await sql_store.list_all_skills()] == [skill.id]
    assert [i.id for i in await sql_store.list_interests(user.id)] == [interest.id]


# --- Requests, Sessions, Feedback ----------------------------------------------

async def test_request_status_update_persists(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    request = await sql_store.create_request(
        from_user_id=alice.id, to_user_id=bob.id, status=RequestStatus.PENDING,
    )

    await sql_store.set_request_status(request.id, RequestStatus.ACCEPTED)

    assert (await sql_store.get_request(request.id)).status is RequestStatus.ACCEPTED


async def test_set_status_on_missing_rows_not_found(sql_store):
    with pytest.raises(ResourceNotFoundError):
        await sql_store.set_request_status(999, RequestStatus.ACCEPTED)
    with pytest.raises(ResourceNotFoundError):
        await sql_store.set_session_status(999, SessionStatus.COMPLETED)


async def test_requests_listed_newest_first(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    first = await sql_store.create_request(
        from_user_id=alice.id, to_user_id=bob.id, status=RequestStatus.PENDING,
    )
    second = await sql_store.create_request(
        from_user_id=bob.id, to_user_id=alice.id, status=RequestStatus.PENDING,
    )

    listed = await sql_store.list_requests_for_user(alice.id)

    assert [r.id for r in listed] == [second.id, first.id]


async def test_sessions_listed_by_start(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    later = await sql_store.create_session(
        teacher_id=alice.id, learner_id=bob.id,
        scheduled_start=START + timedelta(days=1),
        scheduled_end=START + timedelta(days=1, hours=1),
        status=SessionStatus.SCHEDULED,
    )
    earlier = await sql_store.create_session(
        teacher_id=bob.id, learner_id=alice.id,
        scheduled_start=START, scheduled_end=START + timedelta(hours=1),
        status=SessionStatus.SCHEDULED,
    )

    listed = await sql_store.list_sessions_for_user(alice.id)

    assert [s.id for s in listed] == [earlier.id, later.id]
    assert listed[0].scheduled_start == START


async def test_offset_window_is_stored_as_utc_instant(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    plus_two = timezone(timedelta(hours=2))

    session = await SessionLifecycle(sql_store).schedule_session(
        alice.id, bob.id,
        datetime(2026, 6, 1, 10, 0, tzinfo=plus_two),
        datetime(2026, 6, 1, 11, 0, tzinfo=plus_two),
    )
    fetched = await sql_store.get_session(session.id)

    assert fetched.scheduled_start == datetime(2026, 6, 1, 8, 0, tzinfo=timezone.utc)
    assert fetched.scheduled_end == datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc)
    assert fetched.scheduled_start.utcoffset() == timedelta(0)


async def test_offset_schedule_written_directly_keeps_instant(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    minus_five = timezone(timedelta(hours=-5))

    request = await sql_store.create_request(
        from_user_id=alice.id, to_user_id=bob.id, status=RequestStatus.PENDING,
        proposed_schedule=datetime(2026, 6, 1, 4, 0, tzinfo=minus_five),
    )
    fetched = await sql_store.get_request(request.id)

    assert fetched.proposed_schedule == datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc)
    assert fetched.proposed_schedule.tzinfo == timezone.utc


async def test_feedback_lookup(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    session = await sql_store.create_session(
        teacher_id=alice.id, learner_id=bob.id,
        scheduled_start=START, scheduled_end=START + timedelta(hours=1),
        status=SessionStatus.COMPLETED,
    )
    feedback = await sql_store.create_feedback(
        session_id=session.id, from_user_id=bob.id, to_user_id=alice.id,
        rating=4, comment="Clear explanations",
    )

    assert [f.id for f in await sql_store.find_feedback(session.id, bob.id)] == [feedback.id]
    assert await sql_store.find_feedback(session.id, alice.id) == []
    assert [f.rating for f in await sql_store.list_feedback_received_by(alice.id)] == [4]


async def test_rating_check_constraint(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    session = await sql_store.create_session(
        teacher_id=alice.id, learner_id=bob.id,
        scheduled_start=START, scheduled_end=START + timedelta(hours=1),
        status=SessionStatus.COMPLETED,
    )
    with pytest.raises(DatabaseError):
        await sql_store.create_feedback(
            session_id=session.id, from_user_id=bob.id, to_user_id=alice.id, rating=9,
        )


# --- Services over SqlStore ----------------------------------------------------

async def test_full_exchange_over_sql(sql_store):
    alice = await _user(sql_store, "alice")
    bob = await _user(sql_store, "bob")
    await sql_store.add_skill(alice.id, "Guitar", SkillLevel.ADVANCED)
    await sql_store.add_interest(alice.id, "Spanish", InterestLevel.BEGINNER)
    await sql_store.add_skill(bob.id, "Spanish", SkillLevel.EXPERT)
    await sql_store.add_interest(bob.id, "Guitar", InterestLevel.BEGINNER)

    matches = await MatchingEngine(sql_store, jitter=no_jitter).suggest_matches(alice.id)
    assert matches[0].candidate.id == bob.id
    assert matches[0].match_score == 50

    requests = RequestLifecycle(sql_store)
    request = await requests.create_request(alice.id, bob.id)
    await requests.update_request_status(request.id, "accepted")

    sessions = SessionLifecycle(sql_store)
    session = await sessions.schedule_session(
        bob.id, alice.id, START, START + timedelta(hours=1), request_id=request.id,
    )
    await sessions.update_session_status(session.id, "completed")

    recorder = FeedbackRecorder(sql_store)
    await recorder.record_feedback(session.id, alice.id, bob.id, 5)
    summary = await recorder.summarize_feedback(bob.id)
    assert (summary.count, summary.average) == (1, 5.0)
