"""Error Hierarchy — typed, categorized exceptions for every SkillSwap failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are scoped to one operation; infrastructure errors (5xx) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SkillSwapError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries ids for observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    request_id: int | None = None
    session_id: int | None = None
    field: str | None = None


class SkillSwapError(Exception):
    """Base exception for all SkillSwap errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "request_id": self.context.request_id,
                    "session_id": self.context.session_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(SkillSwapError):
    """Referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidArgumentError(SkillSwapError):
    """Self-reference, out-of-range rating, malformed time window, foreign ownership."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class MalformedRequestError(SkillSwapError):
    """Request body, path or query failed schema validation before reaching a service."""
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if details:
            ctx.field = details[0]["field"]
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class InvalidStatusError(SkillSwapError):
    """Requested status is unknown or not reachable from the current status."""
    def __init__(
        self,
        message: str,
        current_status: str | None,
        requested_status: str,
        context: ErrorContext | None = None,
        http_status: int = 409,
    ):
        super().__init__(
            message, "INVALID_STATUS", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, http_status,
        )
        self.current_status = current_status
        self.requested_status = requested_status


class DuplicateFeedbackError(SkillSwapError):
    """Rater already left feedback for this session."""
    def __init__(self, session_id: int, from_user_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.session_id = session_id
        ctx.user_id = from_user_id
        super().__init__(
            f"User {from_user_id} already left feedback for session {session_id}",
            "DUPLICATE_FEEDBACK", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


class ConflictError(SkillSwapError):
    """Unique field (username, email) already taken."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.field = field


class InvalidCredentialsError(SkillSwapError):
    """Username/password pair does not match a user."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SkillSwapError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
