"""Outcome taxonomy shared by the services and both transports."""


class JobBoardError(Exception):
    """Base class. Carries the status code and outcome name reported to callers."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JobBoardError):
    """Malformed or missing input. Raised before storage is touched."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthenticationError(JobBoardError):
    """Credential mismatch. Unknown email and wrong token look the same."""

    status_code = 401
    code = "AUTHENTICATION_ERROR"


class NotFoundError(JobBoardError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(JobBoardError):
    """Uniqueness violation, caught by a pre-check or by the storage constraint."""

    status_code = 409
    code = "CONFLICT"


class InternalError(JobBoardError):
    status_code = 500
    code = "INTERNAL_ERROR"


class CreationFailedError(InternalError):
    """Unexpected failure while creating a record; reported as a bad request."""

    status_code = 400


__all__ = [
    "AuthenticationError",
    "ConflictError",
    "CreationFailedError",
    "InternalError",
    "JobBoardError",
    "NotFoundError",
    "ValidationError",
]
