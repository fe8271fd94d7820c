"""
Typed API errors.

Every error raised by an endpoint is an ``ApiError`` carrying an HTTP status
and a ``code`` naming the error kind. The exception handlers in
``app.middleware.exception`` render them into the error envelope.
"""
from fastapi import HTTPException, status


class ApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "Internal"

    def __init__(self, message: str, code: str | None = None, errors: list | None = None):
        super().__init__(status_code=self.status_code, detail=message)
        if code:
            self.code = code
        self.errors = errors or []


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "ValidationError"


class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "Unauthorized"


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "Forbidden"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NotFound"


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
    code = "Conflict"


class InternalError(ApiError):
    pass


def code_for_status(status_code: int) -> str:
    """Fallback error kind for plain HTTPExceptions raised by the framework."""
    for error_class in (ValidationError, UnauthorizedError, ForbiddenError, NotFoundError, ConflictError):
        if error_class.status_code == status_code:
            return error_class.code
    if status_code < 500:
        return "HttpError"
    return InternalError.code
