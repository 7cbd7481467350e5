"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Rejected input: empty or oversized content, bad reply target, unapproved community."""

    pass


class ContentDeletedException(ValidationError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class ForbiddenError(DomainError):
    """Raised when a capability check fails.

    Always raised before any write is attempted.
    """

    def __init__(
        self,
        action: str,
        resource: str,
        resource_id: str,
        principal_id: str | None,
    ):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.principal_id = principal_id
        who = f"Principal {principal_id}" if principal_id else "Anonymous principal"
        super().__init__(f"{who} is not allowed to {action} {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
