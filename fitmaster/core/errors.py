"""Exception hierarchy shared by repositories, services and the HTTP layer."""


class FitMasterError(Exception):
    """Base for all application errors."""


class NotAuthenticatedError(FitMasterError):
    """No (valid) user identity on the request."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class StoreError(FitMasterError):
    """The backing store failed to read or write."""


class NotFoundError(FitMasterError):
    """Record missing or owned by another user."""

    def __init__(self, kind: str, record_id: object):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")


class SessionStateError(FitMasterError):
    """Operation not valid for the live session in its current state."""
