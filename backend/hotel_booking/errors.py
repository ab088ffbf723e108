"""
Error kinds raised by the booking service.

Every failure a client can observe is one of these. Each carries the HTTP
status it maps to, so the API layer renders them without a lookup table:

    BookingServiceError (base)
    ├── ValidationError        400  missing / malformed input
    ├── ConflictError          400  duplicate email
    ├── AuthenticationError    401  wrong email or password
    │   └── TokenError         403  missing, malformed or expired token
    ├── NotFoundError          404  absent or not owned by the caller
    └── InternalError          500  store or signing fault
"""
from typing import Optional


class BookingServiceError(Exception):
    """
    Base exception for all booking service errors.

    Attributes:
        message: Human-readable error description (safe to show to clients)
        details: Extra context merged into the response body
    """
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to the JSON body returned to clients."""
        body = {"error": self.message}
        body.update(self.details)
        return body


class ValidationError(BookingServiceError):
    """Raised when required input is missing or malformed."""
    status_code = 400


class ConflictError(BookingServiceError):
    """Raised when a unique value (the email) is already taken."""
    status_code = 400


class AuthenticationError(BookingServiceError):
    """
    Raised when credentials do not match.

    The message never says which of email or password was wrong.
    """
    status_code = 401

    def __init__(self, message: str = "Email or password is incorrect", details: Optional[dict] = None):
        super().__init__(message, details)


class TokenError(AuthenticationError):
    """Raised when a protected request carries no token or a token that fails verification."""
    status_code = 403

    def __init__(self, message: str = "Failed to authenticate token", details: Optional[dict] = None):
        super().__init__(message, details)


class NotFoundError(BookingServiceError):
    """Raised when a row is absent, or exists but belongs to someone else."""
    status_code = 404


class InternalError(BookingServiceError):
    """Raised for unexpected store or signing failures."""
    status_code = 500
