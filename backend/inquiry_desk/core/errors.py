"""Service error taxonomy mapped to HTTP responses by the app's exception handler."""


class ServiceError(Exception):
    """Base service error. `detail` is the only text a client ever sees."""
    status_code: int = 500
    detail: str = "Internal server error"

    def __init__(self, message: str | None = None, *, detail: str | None = None):
        super().__init__(message or detail or self.detail)
        if detail is not None:
            self.detail = detail


class InvalidCredentials(ServiceError):
    """Unknown email or wrong password. Both causes look the same to the caller."""
    status_code = 401
    detail = "Invalid email or password"


class Unauthorized(ServiceError):
    """Missing, unknown or expired session."""
    status_code = 401
    detail = "Not authenticated"


class NotFound(ServiceError):
    status_code = 404
    detail = "Not found"

    def __init__(self, entity: str = "Resource", message: str | None = None):
        super().__init__(message, detail=f"{entity} not found")
        self.entity = entity


class DuplicateEmail(ServiceError):
    status_code = 409
    detail = "Email already registered"


class StorageError(ServiceError):
    """Store unreachable, timed out or rejected the operation."""
    status_code = 500
    detail = "Internal server error"


class NotifierError(ServiceError):
    """SMS or email dispatch failed. Never fatal to the triggering request."""
    status_code = 502
    detail = "Notification delivery failed"
