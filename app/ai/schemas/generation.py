import uuid
from enum import StrEnum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, field_validator


class Platform(StrEnum):
    PUSH = "Push"
    WHATSAPP = "WhatsApp"
    INSTAGRAM = "Instagram"
    GOOGLE_ADS = "Google Ads"
    EMAIL = "Email"
    POPUP = "Pop-up"

    @classmethod
    def parse(cls, value: Any) -> Any:
        """Map case variants and the legacy UI labels onto the enumeration.

        Unknown values are returned untouched so validation reports them.
        """
        if isinstance(value, cls) or not isinstance(value, str):
            return value
        key = value.strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        return _PLATFORM_ALIASES.get(key, value)


_PLATFORM_ALIASES: dict[str, Platform] = {
    "push notification": Platform.PUSH,
    "notificación push": Platform.PUSH,
    "instagram post": Platform.INSTAGRAM,
    "googleads": Platform.GOOGLE_ADS,
    "pop up": Platform.POPUP,
    "popup": Platform.POPUP,
}


class CopyType(StrEnum):
    """Rhetorical angle of a variation."""

    BENEFIT = "Beneficio"
    CURIOSITY = "Curiosidad"
    URGENCY = "Urgencia"

    @classmethod
    def parse(cls, value: Any) -> Any:
        if isinstance(value, cls) or not isinstance(value, str):
            return value
        key = value.strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        return value


PlatformField = Annotated[Platform, BeforeValidator(Platform.parse)]
CopyTypeField = Annotated[CopyType, BeforeValidator(CopyType.parse)]


class CopyVariation(BaseModel):
    """One generated piece of copy for one platform and one angle.

    Accepts ``charCount`` (provider contract) or ``char_count`` on input.
    """

    id: Annotated[str, BeforeValidator(lambda v: str(v) if isinstance(v, int) else v)]
    platform: PlatformField
    type: CopyTypeField
    content: str
    char_count: int = Field(..., ge=0, validation_alias=AliasChoices("charCount", "char_count"))
    segments: dict[str, str] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    @field_validator("segments", mode="before")
    @classmethod
    def keep_string_segments(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): v for k, v in value.items() if isinstance(v, str)}


class GenerationParams(BaseModel):
    platforms: list[PlatformField] = Field(..., min_length=1)


class GenerateRequest(BaseModel):
    dna_profile_id: uuid.UUID
    params: GenerationParams


class GenerationResponse(BaseModel):
    variations: list[CopyVariation]
