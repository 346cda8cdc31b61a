from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, Request

from messagely.core.auth_service import AuthService
from messagely.core.db.session import get_db
from messagely.core.logger import get_logger
from messagely.api.v0.auth.models import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/auth")


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post("/register", response_model=TokenResponse)
def register(
    register_request: RegisterRequest,
    session: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Register a new user and log them in.

    Returns a token for the new account; 409 if the username is taken.
    """
    logger.info(f"New user registration attempt: {register_request.username}")
    token = auth.register(session, **register_request.model_dump())
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
def login(
    login_request: LoginRequest,
    session: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Exchange a username and password for a token.

    Unknown users and wrong passwords get the same 401.
    """
    token = auth.login(session, login_request.username, login_request.password)
    return TokenResponse(token=token)
