"""Domain-level exceptions.

Every failure a caller may need to react to is a subclass of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """User input could not be turned into a valid value."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """A backend failed to read or write its data."""


class BackendUnavailableError(StorageError):
    """A backend could not be opened at all (e.g. the database is down)."""
