"""Status transition tests — request and session state machines."""

import pytest

from skillswap.core.domain_types import RequestStatus, SessionStatus
from skillswap.core.enforce_transitions import (
    REQUEST_TRANSITIONS,
    REQUEST_UPDATE_TARGETS,
    SESSION_TRANSITIONS,
    SESSION_UPDATE_TARGETS,
    check_transition,
    is_terminal,
    parse_target_status,
)
from skillswap.core.errors import InvalidStatusError


# --- parse_target_status -------------------------------------------------------

def test_parse_accepts_known_target():
    status = parse_target_status(RequestStatus, REQUEST_UPDATE_TARGETS, "accepted")
    assert status is RequestStatus.ACCEPTED


def test_parse_rejects_unknown_value_with_400():
    with pytest.raises(InvalidStatusError) as exc:
        parse_target_status(RequestStatus, REQUEST_UPDATE_TARGETS, "archived")
    assert exc.value.http_status == 400
    assert "accepted" in exc.value.message


def test_parse_rejects_initial_status_as_target():
    with pytest.raises(InvalidStatusError) as exc:
        parse_target_status(SessionStatus, SESSION_UPDATE_TARGETS, "scheduled")
    assert exc.value.http_status == 400


def test_update_targets_exclude_initial_statuses():
    assert RequestStatus.PENDING not in REQUEST_UPDATE_TARGETS
    assert SessionStatus.SCHEDULED not in SESSION_UPDATE_TARGETS


# --- check_transition ----------------------------------------------------------

@pytest.mark.parametrize("target", [
    RequestStatus.ACCEPTED, RequestStatus.REJECTED, RequestStatus.CANCELLED,
])
def test_pending_request_can_reach_every_terminal(target):
    check_transition(REQUEST_TRANSITIONS, RequestStatus.PENDING, target)


def test_terminal_request_rejected_when_enforced():
    with pytest.raises(InvalidStatusError) as exc:
        check_transition(
            REQUEST_TRANSITIONS, RequestStatus.ACCEPTED, RequestStatus.REJECTED,
        )
    assert exc.value.http_status == 409
    assert exc.value.current_status == "accepted"
    assert exc.value.requested_status == "rejected"


def test_terminal_request_overwritten_when_not_enforced():
    check_transition(
        REQUEST_TRANSITIONS, RequestStatus.ACCEPTED, RequestStatus.REJECTED,
        enforce_terminal=False,
    )


def test_session_completed_then_cancelled_rejected():
    with pytest.raises(InvalidStatusError):
        check_transition(
            SESSION_TRANSITIONS, SessionStatus.COMPLETED, SessionStatus.CANCELLED,
        )


def test_lenient_mode_still_refuses_initial_target():
    with pytest.raises(InvalidStatusError):
        check_transition(
            SESSION_TRANSITIONS, SessionStatus.COMPLETED, SessionStatus.SCHEDULED,
            enforce_terminal=False,
        )


# --- is_terminal ---------------------------------------------------------------

def test_terminal_statuses():
    assert not is_terminal(REQUEST_TRANSITIONS, RequestStatus.PENDING)
    assert is_terminal(REQUEST_TRANSITIONS, RequestStatus.CANCELLED)
    assert not is_terminal(SESSION_TRANSITIONS, SessionStatus.SCHEDULED)
    assert is_terminal(SESSION_TRANSITIONS, SessionStatus.COMPLETED)
