"""Errors raised while serving activity requests."""


class ActivityNotFoundError(LookupError):
    """No activity matches the requested identifier."""

    def __init__(self, activity_id: int) -> None:
        super().__init__(f"Activity {activity_id} not found")
        self.activity_id = activity_id


class ActivityConflictError(ValueError):
    """A create request tried to choose the identifier of the new activity."""


class ActivityPermissionError(PermissionError):
    """A permission predicate refused the request."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ActivityStoreError(RuntimeError):
    """The activity store or one of its collaborators failed."""


__all__ = [
    "ActivityConflictError",
    "ActivityNotFoundError",
    "ActivityPermissionError",
    "ActivityStoreError",
]
