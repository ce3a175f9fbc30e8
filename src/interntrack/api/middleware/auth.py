"""JWT Bearer authentication middleware."""

import logging

from jose import JWTError, jwt
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from interntrack.config import settings
from interntrack.logging_config import bind_request_context

logger = logging.getLogger(__name__)

_ANONYMOUS = {"sub": "anonymous", "role": None}

# Paths that do not require authentication
_PUBLIC_PATHS = {
    "/api/v1/health",
    "/api/v1/invites/resend-verification",
    "/api/v1/invites/verify",
    "/docs",
    "/openapi.json",
    "/redoc",
}


def _is_public(path: str) -> bool:
    if path in _PUBLIC_PATHS or path.startswith("/docs") or path.startswith("/redoc"):
        return True
    # POST /api/v1/invites/{invite_id}/complete
    return path.startswith("/api/v1/invites/") and path.endswith("/complete")


def _decode_jwt(token: str) -> dict:
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as exc:
        logger.debug("JWT decode failed: %s", exc)
        raise ValueError(f"Invalid token: {exc}") from exc


class AuthMiddleware(BaseHTTPMiddleware):
    """Validate the Bearer token issued by the identity provider; attach claims to request.state."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if _is_public(request.url.path):
            request.state.user = dict(_ANONYMOUS)
            return await call_next(request)

        auth_header = request.headers.get("authorization", "")
        if auth_header.startswith("Bearer "):
            user = self._validate_jwt(auth_header[7:])
            request.state.user = user
            if "_auth_error" not in user:
                bind_request_context(
                    getattr(request.state, "trace_id", "unknown-trace"),
                    user_id=user["sub"],
                    role=user["role"],
                )
        else:
            # Routes enforce auth as needed
            request.state.user = dict(_ANONYMOUS)
        return await call_next(request)

    def _validate_jwt(self, token: str) -> dict:
        try:
            payload = _decode_jwt(token)
        except ValueError:
            return {**_ANONYMOUS, "_auth_error": "invalid_token"}

        return {
            "sub": payload.get("sub", ""),
            "role": payload.get("role"),
            "name": payload.get("name", ""),
            "email": payload.get("email", ""),
        }
