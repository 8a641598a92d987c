"""Domain-level exceptions.

Caller input errors are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.

A rejected order is *not* an exception: stock validation failures are an
expected business outcome and travel back to the caller as a value
(see ``StockValidationFailed``).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input broke a rule of the data model."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
