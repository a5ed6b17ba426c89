"""Error taxonomy for the posts API.

Handlers raise these; the app renders them as JSON with the CORS headers
attached, so a preflighted browser can still read the error body.
"""

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **extra: object) -> None:
        self.message = message or self.message
        self.extra = extra
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message, **self.extra}


class ConfigurationError(ApiError):
    """A required server setting is absent. Operator error, not client error."""

    message = "Server misconfigured"


class AuthError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class StoreError(ApiError):
    """DynamoDB failed. The underlying detail is logged, never returned."""
