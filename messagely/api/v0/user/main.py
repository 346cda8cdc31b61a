from sqlalchemy.orm import Session
from fastapi import APIRouter, BackgroundTasks, Depends, Request

from messagely.core import accounts, messages
from messagely.core.auth_service import AuthService
from messagely.core.db.session import ensure_correct_user, get_current_user, get_db
from messagely.core.logger import get_logger
from messagely.api.v0.auth.main import get_auth_service
from messagely.api.v0.user.models import (
    ForgotPasswordResponse,
    MessagesFromResponse,
    MessagesToResponse,
    RecoveryCodeInfo,
    ResetPasswordRequest,
    ResetPasswordResponse,
    UserDetailResponse,
    UserListResponse,
)

router = APIRouter(prefix="/users")
logger = get_logger(__name__)


@router.get("/", response_model=UserListResponse)
def list_users(
    current_user: str = Depends(get_current_user),
    session: Session = Depends(get_db),
):
    return {"users": accounts.list_accounts(session)}


@router.get("/{username}", response_model=UserDetailResponse)
def get_user(
    username: str,
    current_user: str = Depends(ensure_correct_user),
    session: Session = Depends(get_db),
):
    return {"user": accounts.get_account(session, username)}


@router.get("/{username}/to", response_model=MessagesToResponse)
def get_messages_to(
    username: str,
    current_user: str = Depends(ensure_correct_user),
    session: Session = Depends(get_db),
):
    """Messages received by the user"""
    return {"messages": messages.list_to(session, username)}


@router.get("/{username}/from", response_model=MessagesFromResponse)
def get_messages_from(
    username: str,
    current_user: str = Depends(ensure_correct_user),
    session: Session = Depends(get_db),
):
    """Messages sent by the user"""
    return {"messages": messages.list_from(session, username)}


@router.post("/{username}/forgot-password", response_model=ForgotPasswordResponse)
def forgot_password(
    request: Request,
    username: str,
    background_tasks: BackgroundTasks,
    current_user: str = Depends(ensure_correct_user),
    session: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Send a 6-digit recovery code to the user's phone.

    The code itself is left out of the response unless the server runs
    with expose_recovery_code enabled.
    """
    issued = auth.forgot_password(session, username, background_tasks)

    code = issued.code if request.app.state.settings.expose_recovery_code else None
    return ForgotPasswordResponse(
        code=RecoveryCodeInfo(username=issued.username, code=code)
    )


@router.post("/{username}/reset-password", response_model=ResetPasswordResponse)
def reset_password(
    username: str,
    reset_request: ResetPasswordRequest,
    current_user: str = Depends(ensure_correct_user),
    session: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    auth.reset_password(session, username, reset_request.code, reset_request.new_password)
    return ResetPasswordResponse(username=username)
