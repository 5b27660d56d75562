import uuid

from pydantic import BaseModel, Field

from app.core.datetime_utils import UTCDatetime


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ProjectResponse(BaseModel):
    id: uuid.UUID
    name: str
    created_at: UTCDatetime

    model_config = {"from_attributes": True}
