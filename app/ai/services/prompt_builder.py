"""Assembles the copy-generation prompt from a Content DNA profile.

The output is a pure function of its inputs: no timestamps, no randomness and
a fixed section order, so identical requests produce byte-identical prompts.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from app.ai.schemas.generation import CopyType, Platform
from app.clients.models.dna_profile import ContentDNAProfile
from app.core.exceptions import ValidationError

SYSTEM_PROMPT = "Eres un redactor creativo experto en estrategia de marca y marketing digital."

FEEDBACK_HEADER = (
    "HISTÓRICO DE ÉXITO (USA ESTOS EJEMPLOS COMO GUÍA DE ESTILO Y EFECTIVIDAD):"
)
VARIATIONS_PER_PLATFORM = 3


@dataclass(frozen=True)
class PlatformRule:
    rule: str
    segments: tuple[str, ...]


PLATFORM_RULES: dict[Platform, PlatformRule] = {
    Platform.EMAIL: PlatformRule(
        "Estructura de 4 bloques separados por guiones: [ASUNTO] - [HEADER] - [BODY] - [CTA].",
        ("subject", "header", "body", "cta"),
    ),
    Platform.PUSH: PlatformRule(
        "[Título] | [Cuerpo] (Max 45/120 carac.).",
        ("title", "body"),
    ),
    Platform.WHATSAPP: PlatformRule(
        'Negritas para énfasis, max 2 emojis, CTA basado en "{primary_cta}".',
        ("body",),
    ),
    Platform.INSTAGRAM: PlatformRule(
        "Hook en línea 1, 3-5 hashtags, Idea visual en [IDEA VISUAL: descripción].",
        ("hook", "body", "hashtags", "visual_idea"),
    ),
    Platform.GOOGLE_ADS: PlatformRule(
        "[Título] | [Descripción] (Max 30/90 carac.).",
        ("title", "description"),
    ),
    Platform.POPUP: PlatformRule(
        "[TÍTULO] | [CUERPO] | [CTA].",
        ("title", "body", "cta"),
    ),
}

ANGLES: tuple[tuple[CopyType, str], ...] = (
    (CopyType.BENEFIT, "Beneficio Directo (Propuesta de Valor)."),
    (CopyType.CURIOSITY, "Curiosidad/Storytelling."),
    (CopyType.URGENCY, "Urgencia/Conversión."),
)


def _dedupe_platforms(platforms: Iterable[Platform]) -> list[Platform]:
    ordered: list[Platform] = []
    for platform in platforms:
        platform = Platform(platform)
        if platform not in ordered:
            ordered.append(platform)
    return ordered


def _preamble(client_name: str | None) -> str:
    target = f'para "{client_name}" ' if client_name else ""
    return (
        'Actúa como "My Voice", el motor de copy estratégico de Grupo LoBueno.\n'
        f"Tu misión es generar contenido {target}basándote EXCLUSIVAMENTE "
        "en su ADN Estratégico."
    )


def _dna_section(profile: ContentDNAProfile) -> str:
    lines = [
        "ADN ESTRATÉGICO (PARÁMETROS OBLIGATORIOS):",
        f"- Campaña: {profile.name}",
        f"- Propuesta de Valor: {profile.value_proposition}",
        f"- Guías de Voz: {profile.brand_voice_guidelines}",
        f"- Tono: {profile.voice}",
        f"- Producto: {profile.product}",
        f"- Público: {profile.target_audience}",
        f"- Objetivo: {profile.goal}",
        f"- CTA Principal: {profile.primary_cta}",
        f"- Mensaje Central: {profile.theme}",
        f"- Keywords: {profile.keywords}",
    ]
    return "\n".join(lines)


def _feedback_section(examples: Sequence[dict[str, Any]]) -> str:
    """Format historical successful copy as few-shot hints."""
    lines = [FEEDBACK_HEADER]
    for example in examples:
        lines.append(f'- [{example.get("platform", "")}]: "{example.get("content", "")}"')
    return "\n".join(lines)


def _format_rules(platforms: Sequence[Platform], primary_cta: str) -> str:
    lines = ["REGLAS DE FORMATO:"]
    for i, platform in enumerate(platforms, 1):
        rule = PLATFORM_RULES[platform].rule.format(primary_cta=primary_cta)
        lines.append(f"{i}. {platform.value}: {rule}")
    return "\n".join(lines)


def _variations_instruction(platforms: Sequence[Platform]) -> str:
    names = ", ".join(p.value for p in platforms)
    lines = [
        f"Genera exactamente {VARIATIONS_PER_PLATFORM} variaciones por cada una de "
        f"estas plataformas: {names}."
    ]
    for i, (copy_type, description) in enumerate(ANGLES, 1):
        lines.append(f'V{i} (type "{copy_type.value}"): {description}')
    return "\n".join(lines)


def _response_contract(platforms: Sequence[Platform]) -> str:
    platform_values = " | ".join(f'"{p.value}"' for p in platforms)
    type_values = " | ".join(f'"{t.value}"' for t, _ in ANGLES)
    segment_lines = [
        f"- {p.value}: {', '.join(PLATFORM_RULES[p].segments)}" for p in platforms
    ]
    return "\n".join(
        [
            "Responde estrictamente en formato JSON, sin texto adicional, "
            "con la siguiente estructura:",
            "{",
            '  "variations": [',
            "    {",
            '      "id": "string",',
            f'      "platform": {platform_values},',
            f'      "type": {type_values},',
            '      "content": "string",',
            '      "charCount": number,',
            '      "segments": { "<clave>": "string" }',
            "    }",
            "  ]",
            "}",
            '"content" es el texto completo con el formato de la plataforma y "charCount" '
            "su número de caracteres.",
            'En "segments" devuelve cada parte del texto por separado con estas claves:',
            *segment_lines,
        ]
    )


def build_generation_prompt(
    profile: ContentDNAProfile,
    platforms: Iterable[Platform],
    client_name: str | None = None,
) -> str:
    """Assemble the full instruction block sent to the model.

    Args:
        profile: DNA brief whose fields are rendered verbatim.
        platforms: Requested output channels; duplicates are collapsed.
        client_name: Brand name used in the preamble, if known.

    Raises:
        ValidationError: If no platform was requested.
    """
    selected = _dedupe_platforms(platforms)
    if not selected:
        raise ValidationError("Selecciona al menos una plataforma", field="platforms")

    parts: list[str] = [_preamble(client_name), _dna_section(profile)]

    examples = profile.feedback_examples or []
    if examples:
        parts.append(_feedback_section(examples))

    parts.append(_format_rules(selected, profile.primary_cta or ""))
    parts.append(_variations_instruction(selected))
    parts.append(_response_contract(selected))

    return "\n\n".join(parts)
