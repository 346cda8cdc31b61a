from datetime import datetime
from pydantic import BaseModel, Field

from messagely.api.v0.message.models import MessageParty


class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}


class UserDetail(UserSummary):
    phone: str
    joined_at: datetime
    last_login_at: datetime | None


class UserListResponse(BaseModel):
    users: list[UserSummary]


class UserDetailResponse(BaseModel):
    user: UserDetail


class MessageToUser(BaseModel):
    """A received message, annotated with its sender"""
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: MessageParty

    model_config = {"from_attributes": True}


class MessageFromUser(BaseModel):
    """A sent message, annotated with its recipient"""
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: MessageParty

    model_config = {"from_attributes": True}


class MessagesToResponse(BaseModel):
    messages: list[MessageToUser]


class MessagesFromResponse(BaseModel):
    messages: list[MessageFromUser]


class RecoveryCodeInfo(BaseModel):
    username: str
    # Only populated when the server is configured to expose codes
    code: str | None = None


class ForgotPasswordResponse(BaseModel):
    code: RecoveryCodeInfo


class ResetPasswordRequest(BaseModel):
    code: str = Field(..., pattern=r"^\d{6}$")
    new_password: str = Field(..., min_length=1, max_length=256)


class ResetPasswordResponse(BaseModel):
    username: str
    message: str = "Password updated"
