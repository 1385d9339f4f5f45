"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidTransitionError(ValidationError):
    """An order was asked to move to a status it cannot reach from its current one."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AccessDeniedError(DomainException):
    """The current session's role may not perform the requested operation."""
