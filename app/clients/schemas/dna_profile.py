import uuid

from pydantic import BaseModel, Field

from app.ai.schemas.generation import PlatformField
from app.core.datetime_utils import UTCDatetime


class FeedbackExample(BaseModel):
    """Historical successful copy used as a few-shot hint."""

    platform: PlatformField
    content: str = Field(..., min_length=1)


class DNAProfileFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    voice: str = Field(..., min_length=1)
    goal: str = Field(..., min_length=1)
    product: str = Field(..., min_length=1)
    target_audience: str = Field(..., min_length=1)
    theme: str = Field(..., min_length=1)
    keywords: str = ""
    brand_voice_guidelines: str = ""
    value_proposition: str = ""
    primary_cta: str = ""
    feedback_examples: list[FeedbackExample] = Field(default_factory=list)


class DNAProfileCreate(DNAProfileFields):
    client_id: uuid.UUID


class DNAProfileUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: str | None = Field(None, min_length=1, max_length=255)
    voice: str | None = Field(None, min_length=1)
    goal: str | None = Field(None, min_length=1)
    product: str | None = Field(None, min_length=1)
    target_audience: str | None = Field(None, min_length=1)
    theme: str | None = Field(None, min_length=1)
    keywords: str | None = None
    brand_voice_guidelines: str | None = None
    value_proposition: str | None = None
    primary_cta: str | None = None
    feedback_examples: list[FeedbackExample] | None = None


class DNAProfileResponse(DNAProfileFields):
    id: uuid.UUID
    client_id: uuid.UUID
    created_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = {"from_attributes": True}
