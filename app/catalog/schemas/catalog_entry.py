import uuid

from pydantic import BaseModel, Field

from app.catalog.models.catalog_entry import CatalogKind
from app.core.datetime_utils import UTCDatetime


class CatalogEntryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    sort_order: int | None = None


class CatalogEntryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    sort_order: int | None = None


class CatalogEntryResponse(BaseModel):
    id: uuid.UUID
    kind: CatalogKind
    name: str
    sort_order: int
    created_at: UTCDatetime

    model_config = {"from_attributes": True}


class CatalogResponse(BaseModel):
    voices: list[CatalogEntryResponse]
    goals: list[CatalogEntryResponse]
