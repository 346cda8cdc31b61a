from typing import Generator
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from messagely.core.errors import ForbiddenError, UnauthorizedError

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Dependency to authenticate the caller via a Bearer token; returns the username"""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    return request.app.state.auth_service.tokens.verify(credentials.credentials)


def ensure_correct_user(
    username: str,
    current_user: str = Depends(get_current_user),
) -> str:
    """Dependency for /users/{username} routes: the caller must be that user"""
    if current_user != username:
        raise ForbiddenError()
    return current_user
