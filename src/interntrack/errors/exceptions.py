"""Custom exception classes for the InternTrack API."""


class InternTrackError(Exception):
    """Base exception for InternTrack."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(InternTrackError):
    """Request or domain validation failure."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(InternTrackError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class AuthenticationError(InternTrackError):
    """Authentication required or token invalid."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__("AUTHENTICATION_ERROR", message, status_code=401)


class AuthorizationError(InternTrackError):
    """Insufficient permissions."""

    def __init__(self, message: str = "Insufficient role"):
        super().__init__("AUTHORIZATION_ERROR", message, status_code=403)


class ConflictError(InternTrackError):
    """Resource state conflict."""

    def __init__(self, message: str):
        super().__init__("CONFLICT", message, status_code=409)


class EmailDeliveryError(InternTrackError):
    """Outbound email could not be handed to the provider."""

    def __init__(self, message: str, details=None):
        super().__init__("EMAIL_DELIVERY_ERROR", message, details, status_code=502)
