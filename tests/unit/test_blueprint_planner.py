"""Tests for blueprint planning."""

import json
import pytest

from pagesmith.models.intent import PageIntent
from pagesmith.models.orchestration import OrchestrationInput, WizardData
from pagesmith.services.blueprint_planner import (
    BlueprintPlanner,
    build_blueprint_user_message,
    fallback_blueprint,
    parse_blueprint,
    resolve_basis,
)
from pagesmith.utils.exceptions import GeneratorError


@pytest.fixture
def saas_input():
    return OrchestrationInput(
        description="AI email writer for founders",
        wizard_data=WizardData(vibe="techy", color_theme="midnight", font_pair="space-grotesk-inter"),
    )


class TestResolveBasis:
    """Tests for the static blueprint choices."""

    def test_uses_wizard_theme_and_fonts(self, sample_intent, saas_input, catalog):
        basis = resolve_basis(sample_intent, saas_input, catalog)

        assert basis.pattern.id == "saas"
        assert basis.framework == "AIDA"
        assert basis.color_strategy.background == "#0f172a"
        assert basis.typography.heading_font == "Space Grotesk"
        assert basis.vibe == "techy"

    def test_defaults_without_wizard(self, sample_intent, catalog):
        basis = resolve_basis(sample_intent, OrchestrationInput(description="x"), catalog)

        assert basis.color_strategy.background == "#0a0a0a"
        assert basis.typography.heading_font == "Inter"
        assert basis.vibe == "modern"


class TestParseBlueprint:
    """Tests for parse_blueprint."""

    def _parse(self, data, intent, request, catalog):
        basis = resolve_basis(intent, request, catalog)
        text = data if isinstance(data, str) else json.dumps(data)
        return parse_blueprint(text, intent, request, basis, catalog)

    def test_sections_get_selected_variants(self, sample_intent, saas_input, catalog):
        """Variants come from the selector, not the generator."""
        result = self._parse(
            {
                "copyFramework": "AIDA",
                "frameworkRationale": "Founders want clear benefits",
                "sectionSequence": [
                    {"type": "hero", "variant": "nonsense", "purpose": "attention", "copyGuidelines": "Be bold"},
                    {"type": "features", "purpose": "interest", "keyElements": ["speed"]},
                ],
                "targetSectionCount": 8,
            },
            sample_intent,
            saas_input,
            catalog,
        )

        assert result.ok
        blueprint = result.value
        assert blueprint.copy_framework == "AIDA"
        assert blueprint.framework_rationale == "Founders want clear benefits"
        assert blueprint.target_section_count == 10
        hero, features = blueprint.section_sequence
        assert hero.variant == "animated-preview"
        assert hero.copy_guidelines == "Be bold"
        assert hero.tier == "premium"
        assert hero.background_effect == "glow"
        assert features.variant == "bento"
        assert features.key_elements == ["speed"]
        assert features.copy_guidelines.startswith("## AIDA Framework")

    def test_selector_uses_chosen_framework(self, catalog):
        """Variants are scored against the framework picked from the intent."""
        intent = PageIntent(product_type="saas", primary_value_prop="x", urgency_level="high")
        request = OrchestrationInput(description="x", wizard_data=WizardData(vibe="modern"))

        result = self._parse(
            {"copyFramework": "AIDA", "sectionSequence": [{"type": "hero", "purpose": "attention"}]},
            intent,
            request,
            catalog,
        )

        assert result.value.copy_framework == "PAS"
        # PAS drops glassmorphism-trust below animated-preview
        assert result.value.section_sequence[0].variant == "animated-preview"

    def test_invalid_fields_defaulted(self, sample_intent, saas_input, catalog):
        result = self._parse(
            {
                "copyFramework": "STAR",
                "sectionSequence": [{"type": "faq", "purpose": "confusion"}, {"purpose": "action"}, "cta"],
            },
            sample_intent,
            saas_input,
            catalog,
        )

        blueprint = result.value
        assert blueprint.copy_framework == "AIDA"
        assert blueprint.framework_rationale == catalog.framework("AIDA").description
        assert [p.type for p in blueprint.section_sequence] == ["faq"]
        assert blueprint.section_sequence[0].purpose == "interest"

    def test_generator_framework_ignored(self, sample_intent, saas_input, catalog):
        """The decision table picks the framework whatever the generator echoes."""
        result = self._parse(
            {
                "copyFramework": "PAS",
                "frameworkRationale": "Pain first",
                "sectionSequence": [{"type": "hero", "purpose": "attention"}],
            },
            sample_intent,
            saas_input,
            catalog,
        )

        blueprint = result.value
        assert blueprint.copy_framework == "AIDA"
        assert blueprint.framework_rationale == catalog.framework("AIDA").description

    @pytest.mark.parametrize("generated", [9, 14, "nine", None])
    def test_target_count_from_pattern(self, sample_intent, saas_input, catalog, generated):
        result = self._parse(
            {"sectionSequence": [{"type": "hero"}], "targetSectionCount": generated},
            sample_intent,
            saas_input,
            catalog,
        )

        assert result.value.target_section_count == 10

    def test_requested_count_wins(self, sample_intent, catalog):
        request = OrchestrationInput.model_validate(
            {"description": "x", "preferences": {"sectionCount": 6}}
        )

        result = self._parse(
            {"sectionSequence": [{"type": "hero"}], "targetSectionCount": 12},
            sample_intent,
            request,
            catalog,
        )

        assert result.value.target_section_count == 6

    def test_sequence_capped_at_default(self, sample_intent, saas_input, catalog):
        result = self._parse(
            {"sectionSequence": [{"type": "features"}] * 20, "targetSectionCount": 40},
            sample_intent,
            saas_input,
            catalog,
        )

        assert len(result.value.section_sequence) == 9
        assert result.value.target_section_count == 10

    def test_sequence_capped_at_requested_count(self, sample_intent, catalog):
        request = OrchestrationInput.model_validate(
            {"description": "x", "preferences": {"sectionCount": 5}}
        )
        sequence = [{"type": "header"}, "junk", {"purpose": "attention"}] + [{"type": "features"}] * 14

        result = self._parse({"sectionSequence": sequence}, sample_intent, request, catalog)

        assert [p.type for p in result.value.section_sequence] == ["header"] + ["features"] * 4
        assert result.value.target_section_count == 5

    @pytest.mark.parametrize(
        "data",
        [
            {"copyFramework": "AIDA"},
            {"sectionSequence": []},
            {"sectionSequence": [{"purpose": "attention"}]},
            "not json",
        ],
    )
    def test_unusable_sequence_rejected(self, sample_intent, saas_input, catalog, data):
        assert not self._parse(data, sample_intent, saas_input, catalog).ok


class TestFallbackBlueprint:
    """Tests for the pattern-based fallback."""

    def test_uses_pattern_flow(self, sample_intent, saas_input, catalog):
        basis = resolve_basis(sample_intent, saas_input, catalog)

        blueprint = fallback_blueprint(sample_intent, saas_input, basis, catalog)

        assert [p.type for p in blueprint.section_sequence] == [
            step.type for step in basis.pattern.section_flow
        ]
        assert blueprint.section_sequence[1].purpose == "attention"
        assert blueprint.target_section_count == 10
        assert blueprint.copy_framework == "AIDA"
        assert all(p.variant for p in blueprint.section_sequence)


class TestBlueprintPlanner:
    """Tests for BlueprintPlanner."""

    def test_create_blueprint(self, scripted_generator, sample_intent, saas_input):
        generator = scripted_generator(usage=(400, 200))

        blueprint, usage = BlueprintPlanner(generator).create_blueprint(sample_intent, saas_input)

        assert [p.type for p in blueprint.section_sequence] == [
            "header", "hero", "features", "testimonials", "cta", "footer"
        ]
        assert blueprint.color_strategy.background == "#0f172a"
        assert usage.total == 600
        assert generator.calls[0]["max_tokens"] == 2048

    def test_malformed_output_uses_pattern(self, scripted_generator, sample_intent, saas_input):
        """A broken response falls back to the whole template flow."""
        generator = scripted_generator(blueprint='{"sectionSequence": ')

        blueprint, _ = BlueprintPlanner(generator).create_blueprint(sample_intent, saas_input)

        assert len(blueprint.section_sequence) == 10
        assert blueprint.section_sequence[0].type == "header"

    def test_generator_error_propagates(self, scripted_generator, sample_intent, saas_input):
        generator = scripted_generator(blueprint=GeneratorError("Bedrock invocation failed"))

        with pytest.raises(GeneratorError):
            BlueprintPlanner(generator).create_blueprint(sample_intent, saas_input)

    def test_user_message(self, sample_intent, catalog):
        request = OrchestrationInput.model_validate({
            "description": "x",
            "wizardData": {"pageType": "product"},
            "preferences": {"sectionCount": 7},
        })
        basis = resolve_basis(sample_intent, request, catalog)

        message = build_blueprint_user_message(sample_intent, basis, request, catalog)

        assert "SUGGESTED TEMPLATE PATTERN: SaaS Landing Page" in message
        assert "COPY FRAMEWORK TO USE: AIDA" in message
        assert "USER REQUESTED PAGE TYPE: product" in message
        assert "Contains 7 sections total" in message

    def test_user_message_lists_variants(self, sample_intent, saas_input, catalog):
        basis = resolve_basis(sample_intent, saas_input, catalog)

        message = build_blueprint_user_message(sample_intent, basis, saas_input, catalog)

        features_options = ", ".join(catalog.variant_options("features"))
        assert f"- features: {features_options} (techy vibe suggests bento)" in message
        assert "- footer: " in message
