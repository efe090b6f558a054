class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(ValidationError):
    """Raised when no entity matches the given identifier."""


class WrongOwnerError(ValidationError):
    """Raised when the acting user does not own the target request."""


class NotPendingError(ValidationError):
    """Raised when a transition is attempted on a request that already left PENDING."""


class InvalidRangeError(ValidationError):
    """Raised when a leave ends before it starts."""


class InsufficientBalanceError(ValidationError):
    """Raised when the requested days exceed the available balance."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ExportError(Exception):
    """Raised when a report file cannot be written."""
