class DomainError(Exception):
    """Base exception for business rule violations.

    ``status_code`` lets the calling boundary (HTTP, CLI) map an error to a response.
    """

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class BadRequestError(DomainError):
    """Raised when caller-supplied input is structurally invalid."""

    status_code = 400
    default_message = "Invalid parameters provided"


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401
    default_message = "Authentication could not be completed"


class ResourceNotFoundError(DomainError):
    """Raised when well-formed input matches no record."""

    status_code = 404
    default_message = "No resource found using provided criteria"


class ResourcePersistenceError(DomainError):
    """Raised when committing a record would violate a uniqueness rule."""

    status_code = 409
    default_message = "The resource was not persisted"
