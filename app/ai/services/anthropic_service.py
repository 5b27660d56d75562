from dataclasses import dataclass
from functools import lru_cache

import anthropic
from anthropic.types import MessageParam

from app.core.config import settings


@dataclass(frozen=True)
class ProviderReply:
    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    stop_reason: str | None = None

    @property
    def tokens_used(self) -> int:
        return self.input_tokens + self.output_tokens

    @property
    def truncated(self) -> bool:
        return self.stop_reason == "max_tokens"


@lru_cache(maxsize=1)
def get_anthropic_client() -> anthropic.Anthropic:
    """Process-wide client; its HTTP connection pool is shared across requests.

    Retries are disabled: a failed generation is reported to the user, who
    decides whether to try again.
    """
    return anthropic.Anthropic(api_key=settings.ANTHROPIC_API_KEY, max_retries=0)


def call_anthropic(
    system_prompt: str,
    messages: list[MessageParam],
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> ProviderReply:
    """Run one Messages API call and join the text blocks of the reply.

    Raises:
        anthropic.APIError: Transport failures and error statuses, unchanged.
    """
    response = get_anthropic_client().messages.create(
        model=settings.ANTHROPIC_MODEL,
        max_tokens=max_tokens or settings.ANTHROPIC_MAX_TOKENS,
        temperature=temperature if temperature is not None else settings.ANTHROPIC_TEMPERATURE,
        system=system_prompt,
        messages=messages,
    )

    text = "".join(block.text for block in response.content if block.type == "text")
    usage = response.usage
    return ProviderReply(
        text=text,
        model=response.model,
        input_tokens=usage.input_tokens if usage else 0,
        output_tokens=usage.output_tokens if usage else 0,
        stop_reason=response.stop_reason,
    )
