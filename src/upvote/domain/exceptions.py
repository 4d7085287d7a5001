"""Domain-level exceptions.

All errors raised by the core are subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class FetchError(DomainException):
    """The order backend was unreachable or returned a malformed payload."""


class SessionError(DomainException):
    """The dashboard session was used outside its login/logout lifecycle."""
