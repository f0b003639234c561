"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthorizedError(DomainError):
    """Raised when an operation requires an authenticated user and there is none."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
