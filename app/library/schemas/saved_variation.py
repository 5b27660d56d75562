import uuid

from pydantic import BaseModel, Field, field_validator

from app.ai.schemas.generation import CopyTypeField, PlatformField
from app.core.datetime_utils import UTCDatetime
from app.library.schemas.project import ProjectResponse


def _normalize_tags(tags: list[str]) -> list[str]:
    seen: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class SavedVariationCreate(BaseModel):
    """A generated variation the user chose to keep.

    ``char_count`` is stored exactly as sent.
    """

    client_id: uuid.UUID
    project_id: uuid.UUID | None = None
    platform: PlatformField
    type: CopyTypeField
    content: str = Field(..., min_length=1)
    char_count: int = Field(..., ge=0)
    segments: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    is_approved: bool = False

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: list[str]) -> list[str]:
        return _normalize_tags(value)


class SavedVariationUpdate(BaseModel):
    """Edit or approve a saved variation. Omitted fields are left unchanged.

    ``project_id`` may be set to null to detach the variation from its project.
    """

    content: str | None = Field(None, min_length=1)
    char_count: int | None = Field(None, ge=0)
    segments: dict[str, str] | None = None
    tags: list[str] | None = None
    is_approved: bool | None = None
    project_id: uuid.UUID | None = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: list[str] | None) -> list[str] | None:
        return _normalize_tags(value) if value is not None else None


class SavedVariationResponse(BaseModel):
    id: uuid.UUID
    client_id: uuid.UUID
    project_id: uuid.UUID | None = None
    project: ProjectResponse | None = None
    platform: PlatformField
    type: CopyTypeField
    content: str
    char_count: int
    segments: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    is_approved: bool
    saved_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = {"from_attributes": True}
