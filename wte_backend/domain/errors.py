"""
Domain errors raised by the service layer.

Each maps to one HTTP status in main.py; services never build HTTP responses.
"""


class WasteTrackerError(Exception):
    """Base class for expected, caller-facing failures."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WasteTrackerError):
    """Malformed input or an illegal status transition."""
    status_code = 400


class AuthenticationError(WasteTrackerError):
    """Missing, invalid or expired token, or wrong credentials."""
    status_code = 401


class NotFoundError(WasteTrackerError):
    status_code = 404


class ConflictError(WasteTrackerError):
    """Duplicate registration, or a concurrent status change won the race."""
    status_code = 409
