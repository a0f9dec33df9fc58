"""
Domain exceptions.

Validation failures, unknown usernames and failed authentication are not
exceptions: services return ``None`` / ``False`` for those.  The classes
below cover what must not be swallowed.
"""


class GymAppError(Exception):
    """Base exception for all gym application errors."""

    pass


class BusinessRuleError(GymAppError):
    """Raised when a request breaks a business rule.

    Examples: a training scheduled in the past, or a trainer booked for a
    training type outside their specialization.
    """

    pass


class PersistenceError(GymAppError):
    """Raised when the store rejects a write.

    The session has already been rolled back when this is raised.
    """

    def __init__(self, message: str, original: Exception | None = None):
        """
        Args:
            message: Description of the failed operation.
            original: The underlying database error.
        """
        self.original = original
        super().__init__(message)
