from pydantic import BaseModel, Field
from datetime import datetime


class MessageParty(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    model_config = {"from_attributes": True}


class MessageCreate(BaseModel):
    to_username: str = Field(..., min_length=1, max_length=64)
    body: str = Field(..., min_length=1, max_length=4096)


class MessageCreated(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime

    model_config = {"from_attributes": True}


class MessageDetail(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: MessageParty
    to_user: MessageParty

    model_config = {"from_attributes": True}


class MessageReadStatus(BaseModel):
    id: int
    read_at: datetime | None

    model_config = {"from_attributes": True}


class MessageDetailResponse(BaseModel):
    message: MessageDetail


class MessageCreatedResponse(BaseModel):
    message: MessageCreated


class MessageReadResponse(BaseModel):
    message: MessageReadStatus
