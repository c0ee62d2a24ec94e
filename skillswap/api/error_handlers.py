"""Error Handlers — map every failure to the SkillSwap error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, timestamp, path, ...}}
    - Schema failures become MalformedRequestError (400 VALIDATION_ERROR), so
      they share the domain envelope and carry per-field details
    - 4xx is logged at WARNING, 5xx at ERROR
    - Unhandled exceptions never leak internal details
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillswap.core.errors import ErrorSeverity, MalformedRequestError, SkillSwapError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(SkillSwapError, handle_skillswap_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_skillswap_error(request: Request, exc: SkillSwapError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    body = exc.to_response()
    body["error"]["path"] = request.url.path
    return JSONResponse(status_code=exc.http_status, content=body)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [_field_detail(e) for e in exc.errors()]
    return await handle_skillswap_error(request, MalformedRequestError(details))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "path": request.url.path,
            },
        },
    )


def _field_detail(error: dict) -> dict:
    """Split pydantic's loc into where the value came from and the field path.

    ("body", "availability", 0) -> location "body", field "availability.0".
    A failure on the whole body has no field path; the location stands in.
    """
    location, *path = error["loc"]
    return {
        "location": str(location),
        "field": ".".join(str(part) for part in path) or str(location),
        "message": error["msg"],
        "type": error["type"],
    }
