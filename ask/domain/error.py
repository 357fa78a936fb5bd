"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when input violates a domain rule.

    Carries the offending field so the API can report it back.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ForbiddenError(DomainError):
    """Raised when a user attempts an action they are not allowed to take."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class BackendUnavailableError(DomainError):
    """Raised when the indexed search backend cannot serve a query.

    Always recovered by the fallback matcher, never shown to callers.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Indexed search unavailable: {reason}")


class StorageConflictError(DomainError):
    """Raised when a uniqueness conflict could not be resolved locally."""

    def __init__(self, resource: str, message: str):
        self.resource = resource
        super().__init__(f"Conflict on {resource}: {message}")


class StorageUnavailableError(DomainError):
    """Raised when the relational store cannot be reached in time."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage unavailable during {operation}: {reason}")
