"""Exchange route tests — skill requests, learning sessions and feedback over HTTP."""

from datetime import datetime

import pytest

from skillswap.core.domain_types import SessionStatus

START = "2026-05-04T17:00:00+00:00"
END = "2026-05-04T18:00:00+00:00"


@pytest.fixture
async def pair(make_user):
    return await make_user("alice"), await make_user("bob")


async def _request(client, from_id, to_id, **extra):
    return await client.post("/api/v1/skill-requests", json={
        "from_user_id": from_id, "to_user_id": to_id, **extra,
    })


async def _session(client, teacher_id, learner_id, **extra):
    return await client.post("/api/v1/learning-sessions", json={
        "teacher_id": teacher_id, "learner_id": learner_id,
        "scheduled_start": START, "scheduled_end": END, **extra,
    })


# --- Skill requests ------------------------------------------------------------

async def test_create_request(client, pair):
    alice, bob = pair

    res = await _request(client, alice.id, bob.id, message="Guitar for Spanish?")

    assert res.status_code == 201
    request = res.json()["request"]
    assert request["status"] == "pending"
    assert request["message"] == "Guitar for Spanish?"


async def test_self_request_is_400(client, pair):
    alice, _ = pair
    res = await _request(client, alice.id, alice.id)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ARGUMENT"


async def test_request_to_unknown_user_is_404(client, pair):
    alice, _ = pair
    res = await _request(client, alice.id, 999)
    assert res.status_code == 404


async def test_request_status_flow(client, pair):
    alice, bob = pair
    request_id = (await _request(client, alice.id, bob.id)).json()["request"]["id"]

    accepted = await client.put(
        f"/api/v1/skill-requests/{request_id}/status", json={"status": "accepted"},
    )
    overwrite = await client.put(
        f"/api/v1/skill-requests/{request_id}/status", json={"status": "rejected"},
    )

    assert accepted.status_code == 200
    assert accepted.json()["request"]["status"] == "accepted"
    assert overwrite.status_code == 409
    assert overwrite.json()["error"]["code"] == "INVALID_STATUS"


async def test_request_overwrite_allowed_when_enforcement_disabled(client, pair, settings):
    settings.enforce_terminal_status = False
    alice, bob = pair
    request_id = (await _request(client, alice.id, bob.id)).json()["request"]["id"]
    await client.put(f"/api/v1/skill-requests/{request_id}/status", json={"status": "accepted"})

    res = await client.put(
        f"/api/v1/skill-requests/{request_id}/status", json={"status": "rejected"},
    )

    assert res.status_code == 200
    assert res.json()["request"]["status"] == "rejected"


async def test_unknown_request_status_is_400(client, pair):
    alice, bob = pair
    request_id = (await _request(client, alice.id, bob.id)).json()["request"]["id"]
    res = await client.put(
        f"/api/v1/skill-requests/{request_id}/status", json={"status": "archived"},
    )
    assert res.status_code == 400


async def test_list_requests_for_user(client, pair):
    alice, bob = pair
    await _request(client, alice.id, bob.id)
    await _request(client, bob.id, alice.id)

    res = await client.get(f"/api/v1/users/{alice.id}/skill-requests")

    assert res.status_code == 200
    assert [r["from_user_id"] for r in res.json()["requests"]] == [bob.id, alice.id]


# --- Learning sessions ---------------------------------------------------------

async def test_schedule_and_complete_session(client, pair):
    alice, bob = pair

    created = await _session(client, alice.id, bob.id, notes="Bring a guitar")
    session_id = created.json()["session"]["id"]
    completed = await client.put(
        f"/api/v1/learning-sessions/{session_id}/status", json={"status": "completed"},
    )

    assert created.status_code == 201
    assert created.json()["session"]["status"] == "scheduled"
    assert completed.json()["session"]["status"] == "completed"


async def test_session_with_self_is_400(client, pair):
    alice, _ = pair
    res = await _session(client, alice.id, alice.id)
    assert res.status_code == 400


async def test_session_inverted_window_is_400(client, pair):
    alice, bob = pair
    res = await _session(client, alice.id, bob.id, scheduled_start=END, scheduled_end=START)
    assert res.status_code == 400


async def test_session_requires_timezone(client, pair):
    alice, bob = pair
    res = await _session(
        client, alice.id, bob.id,
        scheduled_start="2026-05-04T17:00:00", scheduled_end="2026-05-04T18:00:00",
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_cancelled_session_cannot_complete(client, pair):
    alice, bob = pair
    session_id = (await _session(client, alice.id, bob.id)).json()["session"]["id"]
    await client.put(
        f"/api/v1/learning-sessions/{session_id}/status", json={"status": "cancelled"},
    )

    res = await client.put(
        f"/api/v1/learning-sessions/{session_id}/status", json={"status": "completed"},
    )

    assert res.status_code == 409


async def test_list_sessions_for_user(client, pair, make_user):
    alice, bob = pair
    carol = await make_user("carol")
    await _session(client, alice.id, bob.id)
    await _session(client, carol.id, bob.id)

    res = await client.get(f"/api/v1/users/{alice.id}/learning-sessions")

    assert [s["teacher_id"] for s in res.json()["sessions"]] == [alice.id]


# --- Feedback ------------------------------------------------------------------

@pytest.fixture
async def completed_session(store, pair):
    alice, bob = pair
    return await store.create_session(
        teacher_id=alice.id, learner_id=bob.id,
        scheduled_start=datetime.fromisoformat(START),
        scheduled_end=datetime.fromisoformat(END),
        status=SessionStatus.COMPLETED,
    )


async def test_record_feedback_and_summary(client, pair, completed_session):
    alice, bob = pair

    res = await client.post("/api/v1/session-feedback", json={
        "session_id": completed_session.id,
        "from_user_id": bob.id, "to_user_id": alice.id,
        "rating": 4, "comment": "Patient and clear",
    })
    received = await client.get(f"/api/v1/users/{alice.id}/received-feedback")
    detail = await client.get(f"/api/v1/users/{alice.id}")

    assert res.status_code == 201
    assert [f["rating"] for f in received.json()["feedback"]] == [4]
    assert detail.json()["rating"] == {"count": 1, "average": 4.0}


@pytest.mark.parametrize("rating", [0, 6])
async def test_out_of_range_rating_is_400(client, pair, completed_session, rating):
    alice, bob = pair
    res = await client.post("/api/v1/session-feedback", json={
        "session_id": completed_session.id,
        "from_user_id": bob.id, "to_user_id": alice.id, "rating": rating,
    })
    assert res.status_code == 400


async def test_self_feedback_is_400(client, pair, completed_session):
    alice, _ = pair
    res = await client.post("/api/v1/session-feedback", json={
        "session_id": completed_session.id,
        "from_user_id": alice.id, "to_user_id": alice.id, "rating": 3,
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ARGUMENT"


async def test_duplicate_feedback_is_409(client, pair, completed_session):
    alice, bob = pair
    body = {
        "session_id": completed_session.id,
        "from_user_id": bob.id, "to_user_id": alice.id, "rating": 5,
    }
    await client.post("/api/v1/session-feedback", json=body)

    res = await client.post("/api/v1/session-feedback", json=body)

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_FEEDBACK"


async def test_feedback_on_scheduled_session_is_409(client, pair):
    alice, bob = pair
    session_id = (await _session(client, alice.id, bob.id)).json()["session"]["id"]
    res = await client.post("/api/v1/session-feedback", json={
        "session_id": session_id,
        "from_user_id": bob.id, "to_user_id": alice.id, "rating": 5,
    })
    assert res.status_code == 409
