"""Domain-level exceptions.

All budget errors are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A model invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested part does not exist in the budget tree."""
