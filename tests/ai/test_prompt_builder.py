import pytest

from app.ai.schemas.generation import Platform
from app.ai.services.prompt_builder import (
    FEEDBACK_HEADER,
    PLATFORM_RULES,
    build_generation_prompt,
)
from app.clients.models.dna_profile import ContentDNAProfile
from app.core.exceptions import ValidationError


def make_profile(**overrides) -> ContentDNAProfile:
    values = {
        "name": "Lanzamiento Invierno",
        "voice": "Profesional y Experta",
        "goal": "Fidelización (Retención)",
        "product": "Seguro de salud familiar",
        "target_audience": "Familias jóvenes",
        "theme": "Tu familia protegida todo el año",
        "keywords": "salud, familia, tranquilidad",
        "brand_voice_guidelines": "Tono cálido, sin tecnicismos",
        "value_proposition": "Atención médica sin filas",
        "primary_cta": "Agenda tu cita",
        "feedback_examples": [],
    }
    values.update(overrides)
    return ContentDNAProfile(**values)


class TestBuildGenerationPrompt:
    def test_renders_every_profile_field_verbatim(self):
        profile = make_profile()

        prompt = build_generation_prompt(profile, [Platform.EMAIL])

        for value in (
            profile.name,
            profile.voice,
            profile.goal,
            profile.product,
            profile.target_audience,
            profile.theme,
            profile.keywords,
            profile.brand_voice_guidelines,
            profile.value_proposition,
            profile.primary_cta,
        ):
            assert value in prompt
        assert "ADN ESTRATÉGICO" in prompt

    def test_names_client_in_preamble_when_known(self):
        prompt = build_generation_prompt(make_profile(), [Platform.PUSH], client_name="Colmédica")

        assert 'para "Colmédica"' in prompt
        assert prompt.startswith('Actúa como "My Voice"')

    def test_omits_feedback_section_when_no_examples(self):
        prompt = build_generation_prompt(make_profile(), [Platform.PUSH])

        assert FEEDBACK_HEADER not in prompt
        assert "HISTÓRICO DE ÉXITO" not in prompt

    def test_lists_feedback_examples(self):
        profile = make_profile(
            feedback_examples=[
                {"platform": "Push", "content": "Tu cita en 2 clics"},
                {"platform": "Email", "content": "Salud sin filas"},
            ]
        )

        prompt = build_generation_prompt(profile, [Platform.PUSH])

        assert FEEDBACK_HEADER in prompt
        assert '- [Push]: "Tu cita en 2 clics"' in prompt
        assert '- [Email]: "Salud sin filas"' in prompt

    def test_includes_rules_for_requested_platforms_only(self):
        prompt = build_generation_prompt(make_profile(), [Platform.EMAIL, Platform.PUSH])

        assert "[ASUNTO] - [HEADER] - [BODY] - [CTA]" in prompt
        assert "[Título] | [Cuerpo] (Max 45/120 carac.)" in prompt
        assert "[Título] | [Descripción]" not in prompt
        assert "[IDEA VISUAL: descripción]" not in prompt
        assert "[TÍTULO] | [CUERPO] | [CTA]" not in prompt
        assert "max 2 emojis" not in prompt

    def test_whatsapp_rule_uses_primary_cta(self):
        prompt = build_generation_prompt(make_profile(), [Platform.WHATSAPP])

        assert 'CTA basado en "Agenda tu cita"' in prompt

    def test_numbers_rules_in_request_order(self):
        prompt = build_generation_prompt(
            make_profile(), [Platform.GOOGLE_ADS, Platform.POPUP, Platform.INSTAGRAM]
        )

        assert "1. Google Ads:" in prompt
        assert "2. Pop-up:" in prompt
        assert "3. Instagram:" in prompt

    def test_requests_three_angles(self):
        prompt = build_generation_prompt(make_profile(), [Platform.PUSH])

        assert "Genera exactamente 3 variaciones" in prompt
        assert '"Beneficio"' in prompt
        assert '"Curiosidad"' in prompt
        assert '"Urgencia"' in prompt

    def test_contract_lists_segment_keys_of_requested_platforms(self):
        prompt = build_generation_prompt(make_profile(), [Platform.EMAIL])

        assert '"variations"' in prompt
        assert '"charCount"' in prompt
        assert "- Email: subject, header, body, cta" in prompt
        assert "- Google Ads:" not in prompt

    def test_collapses_duplicate_platforms(self):
        once = build_generation_prompt(make_profile(), [Platform.PUSH])
        twice = build_generation_prompt(make_profile(), [Platform.PUSH, Platform.PUSH])

        assert once == twice
        assert twice.count(PLATFORM_RULES[Platform.PUSH].rule) == 1

    def test_is_deterministic(self):
        platforms = [Platform.EMAIL, Platform.WHATSAPP, Platform.POPUP]
        profile = make_profile(feedback_examples=[{"platform": "Email", "content": "Hola"}])

        first = build_generation_prompt(profile, platforms, client_name="Terpel")
        second = build_generation_prompt(profile, platforms, client_name="Terpel")

        assert first == second

    def test_raises_when_no_platforms(self):
        with pytest.raises(ValidationError):
            build_generation_prompt(make_profile(), [])
