import json
from typing import Any

from jose import jwt

from app.ai.services.anthropic_service import ProviderReply
from app.core.config import settings


def assert_user_response_valid(data: dict[str, Any]) -> None:
    assert "id" in data
    assert "email" in data
    assert "name" in data
    assert "role" in data
    assert "client_id" in data


def assert_error_response(data: dict[str, Any], code: str) -> None:
    """Every error leaves the API as ``{"error", "code", "details"}``."""
    assert "error" in data
    assert data["code"] == code


def create_auth_headers(token: str) -> dict[str, str]:
    """Create Authorization headers with Bearer token."""
    return {"Authorization": f"Bearer {token}"}


def decode_jwt_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def make_variation(
    id: str = "1",
    platform: str = "Push",
    copy_type: str = "Beneficio",
    content: str = "Título | Cuerpo",
    char_count: int = 15,
    segments: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """One variation in the provider's reply format (camelCase ``charCount``)."""
    return {
        "id": id,
        "platform": platform,
        "type": copy_type,
        "content": content,
        "charCount": char_count,
        "segments": segments if segments is not None else {"title": "Título", "body": "Cuerpo"},
    }


def provider_reply(platforms: list[str]) -> str:
    """A well-formed provider reply with three variations per platform."""
    variations = []
    for platform in platforms:
        for copy_type in ("Beneficio", "Curiosidad", "Urgencia"):
            variations.append(
                make_variation(
                    id=str(len(variations) + 1),
                    platform=platform,
                    copy_type=copy_type,
                    content=f"{platform} {copy_type}",
                    char_count=len(f"{platform} {copy_type}"),
                )
            )
    return json.dumps({"variations": variations}, ensure_ascii=False)


def fake_reply(text: str, stop_reason: str = "end_turn") -> ProviderReply:
    return ProviderReply(
        text=text,
        model="claude-test",
        input_tokens=800,
        output_tokens=400,
        stop_reason=stop_reason,
    )
