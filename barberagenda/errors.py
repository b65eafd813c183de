"""Application error taxonomy.

Every error carries the HTTP status and the message shown to the end user.
`main.py` turns them into `{"detail": message}` responses.
"""

from typing import Optional


class BookingAppError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None, headers: Optional[dict] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(BookingAppError):
    """Missing or invalid field"""

    status_code = 400
    default_message = "Invalid booking data"


class NotFoundError(BookingAppError):
    status_code = 404
    default_message = "Booking not found"


class ConflictError(BookingAppError):
    """Time slot already taken at submit time"""

    status_code = 409
    default_message = "This time slot is already taken. Please choose another one."


class AuthError(BookingAppError):
    """Invalid, expired or missing admin credential"""

    status_code = 401
    default_message = "Not authorized. Invalid or expired token."


class UpstreamError(BookingAppError):
    """Persistence collaborator unreachable or failed; terminal for this attempt"""

    status_code = 503
    default_message = "Could not reach the booking store. Please try again."


class ConfigError(BookingAppError):
    """Configuration missing or not initialized"""

    status_code = 500
    default_message = "Configuration not initialized"
