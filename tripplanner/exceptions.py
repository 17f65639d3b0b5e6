"""
Application exceptions and standard user-facing messages.

    TripPlannerError
    └── RepositoryError      database access failed
        ├── NotFoundError    the addressed row does not exist
        └── ConflictError    a constraint rejected the write
"""


class TripPlannerError(Exception):
    """Base exception for application errors."""

    def __init__(self, message='An unexpected error occurred'):
        self.message = message
        super().__init__(message)


class RepositoryError(TripPlannerError):
    """Raised when a repository operation fails."""


class NotFoundError(RepositoryError):
    """Raised when an update or delete targets a missing row."""


class ConflictError(RepositoryError):
    """Raised when a write violates a uniqueness or foreign-key constraint."""


ERROR_MESSAGES = {
    # Authentication
    'INVALID_CREDENTIALS': 'Invalid email or password',
    'EMAIL_ALREADY_EXISTS': 'Email already registered',
    'INVALID_EMAIL': 'Please enter a valid email address',
    'PASSWORDS_DONT_MATCH': 'Passwords do not match',
    'SESSION_EXPIRED': 'Your session has expired. Please log in again.',

    # General
    'UNKNOWN_ERROR': 'An unexpected error occurred. Please try again.',
}
