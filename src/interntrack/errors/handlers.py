"""Render every error as ``{"error": {code, message, details, trace_id, timestamp}}``."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from interntrack.errors.exceptions import AuthorizationError, InternTrackError
from interntrack.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(
            code=code,
            message=message,
            details=details,
            trace_id=getattr(request.state, "trace_id", "unknown-trace"),
            timestamp=datetime.now(timezone.utc),
        ),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def _field_errors(exc: RequestValidationError) -> list[dict]:
    # Drop pydantic's "input" and "ctx" echoes; a rejected verification code must not be reflected back
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in jsonable_encoder(exc.errors())
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(InternTrackError)
    async def interntrack_error_handler(request: Request, exc: InternTrackError):
        if isinstance(exc, AuthorizationError):
            user = getattr(request.state, "user", {}) or {}
            logger.warning(
                "Access denied for %s (%s) on %s %s: %s",
                user.get("sub", "anonymous"),
                user.get("role"),
                request.method,
                request.url.path,
                exc.message,
            )
        return error_response(request, exc.status_code, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(request, 422, "VALIDATION_ERROR", "Request validation failed", _field_errors(exc))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        # Unique constraints back the once-per-student and once-per-day rules under concurrent writes
        logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        return error_response(request, 409, "CONFLICT", "The record conflicts with existing data")
