"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; the handlers registered in ``authdemo.api.errors`` turn
them into JSON responses. Messages are safe to show to the caller.
"""

from typing import Any


class AuthError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 400
    error_type: str = "error"
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body for this error."""
        return {"detail": self.message, "error_type": self.error_type}


class ValidationError(AuthError):
    """Malformed input, with one message per offending field."""

    status_code = 422
    error_type = "validation_error"
    default_message = "Invalid input"

    def __init__(self, errors: list[dict[str, str]] | None = None, message: str | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = self.errors
        return body


class ConflictError(AuthError):
    """The email is already registered."""

    status_code = 409
    error_type = "conflict"
    default_message = "User already exists"


class InvalidCredentialsError(AuthError):
    """Login failed."""

    status_code = 401
    error_type = "invalid_credentials"
    default_message = "Incorrect email or password"


class EmailNotFoundError(InvalidCredentialsError):
    error_type = "email_not_found"
    default_message = "No account found with this email address"


class InvalidPasswordError(InvalidCredentialsError):
    error_type = "invalid_password"
    default_message = "Incorrect password"


class AuthRequiredError(AuthError):
    """No usable session. Never says why the token was rejected."""

    status_code = 401
    error_type = "unauthenticated"
    default_message = "Unauthorized"


class InternalError(AuthError):
    status_code = 500
    error_type = "internal_error"
    default_message = "Internal server error"
