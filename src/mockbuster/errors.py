"""Exceptions shared by the repository, service and API layers."""


class MockbusterError(Exception):
    """Base class for all application errors."""


class ValidationError(MockbusterError):
    """Caller-supplied input was rejected before any database access."""


class FilmNotFoundError(MockbusterError):
    """The referenced film does not exist.

    Callers should catch this by type; wrapping layers keep the instance
    intact so the condition survives any added context.
    """

    def __init__(self, message: str = "film not found") -> None:
        super().__init__(message)


class DatabaseError(MockbusterError):
    """A query against the database failed."""
