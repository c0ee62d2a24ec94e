"""Status Transition Enforcement — state machines for requests and sessions.

Invariants:
    - Requests: pending -> {accepted, rejected, cancelled}; all three terminal
    - Sessions: scheduled -> {completed, cancelled}; both terminal
    - Initial statuses (pending, scheduled) are never a valid transition target
    - All functions are PURE: raise on violation, return the parsed target on success

Design Decisions:
    - enforce_terminal flag: True rejects any move out of a terminal status;
      False keeps the legacy overwrite behaviour (any allowed target accepted)
    - Transition tables are the single source of truth for both the check and
      the API's list of allowed values
"""

from enum import Enum
from typing import TypeVar

from skillswap.core.domain_types import RequestStatus, SessionStatus
from skillswap.core.errors import ErrorContext, InvalidStatusError


REQUEST_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.PENDING: frozenset({
        RequestStatus.ACCEPTED, RequestStatus.REJECTED, RequestStatus.CANCELLED,
    }),
    RequestStatus.ACCEPTED: frozenset(),
    RequestStatus.REJECTED: frozenset(),
    RequestStatus.CANCELLED: frozenset(),
}

SESSION_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.SCHEDULED: frozenset({
        SessionStatus.COMPLETED, SessionStatus.CANCELLED,
    }),
    SessionStatus.COMPLETED: frozenset(),
    SessionStatus.CANCELLED: frozenset(),
}

StatusT = TypeVar("StatusT", bound=Enum)


def _targets(transitions: dict[StatusT, frozenset[StatusT]]) -> frozenset[StatusT]:
    """Every status reachable from some status."""
    return frozenset().union(*transitions.values())


REQUEST_UPDATE_TARGETS: frozenset[RequestStatus] = _targets(REQUEST_TRANSITIONS)
SESSION_UPDATE_TARGETS: frozenset[SessionStatus] = _targets(SESSION_TRANSITIONS)


def parse_target_status(
    enum_cls: type[StatusT],
    targets: frozenset[StatusT],
    requested: str,
    context: ErrorContext | None = None,
) -> StatusT:
    """Parse a requested status string; reject unknown values and non-targets."""
    allowed = ", ".join(sorted(s.value for s in targets))
    try:
        status = enum_cls(requested)
    except ValueError:
        raise InvalidStatusError(
            f"Unknown status '{requested}'. Allowed: {allowed}",
            None, str(requested), context, http_status=400,
        )
    if status not in targets:
        raise InvalidStatusError(
            f"Status '{status.value}' cannot be set explicitly. Allowed: {allowed}",
            None, status.value, context, http_status=400,
        )
    return status


def check_transition(
    transitions: dict[StatusT, frozenset[StatusT]],
    current: StatusT,
    target: StatusT,
    *,
    enforce_terminal: bool = True,
    context: ErrorContext | None = None,
) -> None:
    """Raise InvalidStatusError when current -> target is not permitted."""
    if target in transitions[current]:
        return
    if not enforce_terminal and target in _targets(transitions):
        return
    raise InvalidStatusError(
        f"Cannot move from '{current.value}' to '{target.value}'",
        current.value, target.value, context,
    )


def is_terminal(transitions: dict[StatusT, frozenset[StatusT]], status: StatusT) -> bool:
    return not transitions[status]
