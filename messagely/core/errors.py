"""
Error types raised by the Messagely core.

Each HTTP-facing error is an HTTPException so it reaches the client with
its status code and detail no matter which layer raised it.
"""
from fastapi import HTTPException, status


class MessagelyError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None, headers: dict | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class ConflictError(MessagelyError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class UnauthorizedError(MessagelyError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class InvalidTokenError(UnauthorizedError):
    default_detail = "Invalid token"

    def __init__(self, detail: str | None = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(MessagelyError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized to access this resource"


class NotFoundError(MessagelyError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class NotificationError(Exception):
    """An outbound notification could not be delivered."""
