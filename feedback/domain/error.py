"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input: empty content, out-of-range rating, blank reason."""

    pass


class InvalidStatusTransitionError(ValidationError):
    """Raised when a thread status change is not allowed by the moderation flow."""

    def __init__(self, thread_id: str, current: str, requested: str):
        self.thread_id = thread_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Thread {thread_id} cannot move from {current} to {requested}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a moderator-only operation is attempted without admin rights."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Admin rights required to {action}")


class PersistenceError(DomainError):
    """Raised when the backing store rejects or fails an operation.

    Each store operation is all-or-nothing, so nothing was written when this
    is raised.
    """

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Persistence failure during {operation}: {detail}")
