import uuid

from pydantic import BaseModel, Field

from app.clients.schemas.dna_profile import DNAProfileResponse
from app.core.datetime_utils import UTCDatetime


class ClientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    industry: str = Field(..., min_length=1, max_length=255)
    logo_url: str | None = None
    brand_voice_guidelines: str = ""
    value_proposition: str = ""


class ClientUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    industry: str | None = Field(None, min_length=1, max_length=255)
    logo_url: str | None = None
    brand_voice_guidelines: str | None = None
    value_proposition: str | None = None


class ClientResponse(BaseModel):
    id: uuid.UUID
    name: str
    industry: str
    logo_url: str | None = None
    brand_voice_guidelines: str = ""
    value_proposition: str = ""
    created_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = {"from_attributes": True}


class ClientWithProfilesResponse(ClientResponse):
    dna_profiles: list[DNAProfileResponse] = Field(default_factory=list)
