import uuid

from pydantic import BaseModel

from app.auth.policy import Role
from app.core.datetime_utils import UTCDatetime


class UserClientSummary(BaseModel):
    id: uuid.UUID
    name: str
    industry: str
    logo_url: str | None = None

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    name: str
    role: Role
    client_id: uuid.UUID | None = None
    client: UserClientSummary | None = None
    created_at: UTCDatetime | None = None

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    total: int
    users: list[UserResponse]
