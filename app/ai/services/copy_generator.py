"""Orchestrator: fetch DNA profile -> build prompt -> call AI -> validate response.

Every call goes to the provider; nothing is cached and nothing is retried. Any
failure surfaces as a single GenerationFailure.
"""

import json
import re
import time
import uuid

import anthropic
import structlog
from anthropic.types import MessageParam
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session, joinedload

from app.ai.schemas.generation import CopyVariation, GenerateRequest, GenerationResponse
from app.ai.services.anthropic_service import call_anthropic
from app.ai.services.prompt_builder import SYSTEM_PROMPT, build_generation_prompt
from app.clients.models.dna_profile import ContentDNAProfile
from app.core.config import settings
from app.core.exceptions import GenerationFailure, NotFoundError

logger = structlog.get_logger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def parse_generation_response(text: str) -> list[CopyVariation]:
    """Validate the provider reply into typed variations.

    The reply must be a JSON object with a ``variations`` array. A single
    surrounding markdown code fence is tolerated; nothing else is repaired.
    The number of variations is not checked.

    Raises:
        GenerationFailure: On empty output, invalid JSON or schema mismatch.
    """
    body = (text or "").strip()
    if not body:
        raise GenerationFailure("empty response from provider")

    fenced = _CODE_FENCE.match(body)
    if fenced:
        body = fenced.group(1).strip()

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise GenerationFailure(f"response is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("variations"), list):
        raise GenerationFailure('response has no "variations" array')

    try:
        return GenerationResponse.model_validate(data).variations
    except PydanticValidationError as e:
        raise GenerationFailure(f"variations do not match schema: {e.error_count()} errors") from e


def request_variations(prompt: str) -> list[CopyVariation]:
    """Send a built prompt to the provider and return the parsed variations."""
    if not settings.ANTHROPIC_API_KEY:
        raise GenerationFailure("ANTHROPIC_API_KEY is not configured")

    messages: list[MessageParam] = [{"role": "user", "content": prompt}]
    start = time.perf_counter()
    try:
        reply = call_anthropic(SYSTEM_PROMPT, messages)
    except anthropic.APIError as e:
        logger.error("generation_provider_error", error_type=type(e).__name__, error=str(e))
        raise GenerationFailure(f"provider call failed: {type(e).__name__}") from e

    if reply.truncated:
        # Parsing decides whether a cut-off reply is still usable
        logger.warning("generation_truncated", model=reply.model, tokens_used=reply.tokens_used)

    variations = parse_generation_response(reply.text)

    logger.info(
        "generation_completed",
        model=reply.model,
        tokens_used=reply.tokens_used,
        variations=len(variations),
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return variations


def _get_profile(db: Session, dna_profile_id: uuid.UUID) -> ContentDNAProfile:
    profile: ContentDNAProfile | None = (
        db.query(ContentDNAProfile)
        .options(joinedload(ContentDNAProfile.client))
        .filter(ContentDNAProfile.id == dna_profile_id)
        .first()
    )
    if profile is None:
        raise NotFoundError("Perfil de ADN no encontrado", resource="dna_profile")
    return profile


def generate_copy(db: Session, request: GenerateRequest) -> GenerationResponse:
    """Main orchestrator for copy generation."""
    profile = _get_profile(db, request.dna_profile_id)

    prompt = build_generation_prompt(
        profile,
        request.params.platforms,
        client_name=profile.client.name if profile.client else None,
    )

    logger.info(
        "generation_started",
        dna_profile_id=str(profile.id),
        client_id=str(profile.client_id),
        platforms=[p.value for p in request.params.platforms],
    )
    try:
        variations = request_variations(prompt)
    except GenerationFailure as e:
        logger.warning("generation_failed", dna_profile_id=str(profile.id), reason=e.reason)
        raise

    return GenerationResponse(variations=variations)
