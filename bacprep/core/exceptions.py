"""
Domain errors raised by the store and the tutor gateway.

Only the API layer turns these into HTTP responses.
"""


class BacPrepError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BacPrepError):
    """Malformed or conflicting input supplied by the client."""
    pass


class NotFoundError(BacPrepError):
    """A referenced entity does not exist (or is not visible to the caller)."""
    pass


class ExternalServiceError(BacPrepError):
    """The text-generation service failed or returned unusable output."""
    pass
