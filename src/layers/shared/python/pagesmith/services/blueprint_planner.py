"""Blueprint planning: the second pipeline phase.

Picks the template pattern, copy framework and visual strategy from static
tables, then asks the generator for a section sequence. When that sequence
cannot be parsed the pattern's own section flow replaces it wholesale.
"""

from dataclasses import dataclass
from typing import Any

import structlog

from pagesmith.catalog import DesignCatalog, default_catalog
from pagesmith.models.blueprint import (
    ColorStrategy,
    PageBlueprint,
    SectionPlan,
    SectionPurpose,
    Typography,
)
from pagesmith.models.catalog import TemplatePattern
from pagesmith.models.intent import PageIntent
from pagesmith.models.orchestration import (
    DEFAULT_SECTION_COUNT,
    OrchestrationInput,
    TokenUsage,
)
from pagesmith.services.generator import Generator
from pagesmith.services.parsing import (
    ParseResult,
    log_parse_failure,
    optional_string,
    parse_json_object,
    string_list,
)

logger = structlog.get_logger()

PHASE = "blueprint"
MAX_TOKENS = 2048
DEFAULT_VIBE = "modern"

PURPOSES = {p.value for p in SectionPurpose}

BLUEPRINT_SYSTEM_PROMPT = """You are a landing page architect creating a detailed blueprint for page generation.

Given the analyzed intent and template pattern, create a section-by-section blueprint.

Return ONLY valid JSON matching this structure:
{
  "copyFramework": "AIDA" | "PAS" | "BAB",
  "frameworkRationale": "Why this framework fits this product/audience",
  "sectionSequence": [
    {
      "type": "hero" | "features" | "testimonials" | "pricing" | "cta" | "faq" | "stats" | "process" | "header" | "footer" | "logoCloud" | "creator" | "comparison" | "value-proposition" | "offer-details" | "gallery" | "video",
      "variant": "variant name or null",
      "purpose": "attention" | "interest" | "desire" | "action" | "proof" | "objections" | "navigation" | "footer",
      "copyGuidelines": "Specific instructions for this section's copy",
      "keyElements": ["element1", "element2"]
    }
  ],
  "targetSectionCount": 9
}

SECTION TYPES available:
- header (navigation)
- hero (main attention grabber) - variants: default, animated-preview, email-signup, sales-funnel
- logoCloud (brand trust)
- stats (credibility numbers) - variants: cards, minimal, bars, circles
- features (benefits/capabilities) - variants: default, illustrated, hover, bento, table
- process (how it works) - variants: timeline, cards, horizontal
- testimonials (social proof) - variants: scrolling, twitter-cards
- creator (expert/founder bio)
- comparison (vs alternatives)
- value-proposition (story-based value)
- offer-details (what's included)
- pricing (pricing tables)
- faq (objection handling)
- cta (call to action) - variants: centered, split, banner, minimal
- footer

COPY FRAMEWORK Guidelines:
- AIDA: Attention -> Interest -> Desire -> Action (best for SaaS, tech)
- PAS: Problem -> Agitate -> Solution (best for problem-solving, e-commerce)
- BAB: Before -> After -> Bridge (best for transformation, courses)

Return ONLY the JSON object, no markdown or explanation."""


@dataclass(frozen=True)
class BlueprintBasis:
    """Static choices made before the generator is consulted."""

    pattern: TemplatePattern
    framework: str
    color_strategy: ColorStrategy
    typography: Typography
    vibe: str


def resolve_basis(
    intent: PageIntent,
    request: OrchestrationInput,
    catalog: DesignCatalog,
) -> BlueprintBasis:
    wizard = request.wizard_data
    return BlueprintBasis(
        pattern=catalog.match_template_pattern(intent.product_type, intent.keywords),
        framework=catalog.select_copy_framework(
            intent.product_type, intent.urgency_level, intent.price_point
        ),
        color_strategy=catalog.color_strategy(wizard.color_theme if wizard else None),
        typography=catalog.typography(wizard.font_pair if wizard else None),
        vibe=request.vibe or DEFAULT_VIBE,
    )


def _variant_menu(basis: BlueprintBasis, catalog: DesignCatalog) -> str:
    """Variant choices for each section type in the pattern flow."""
    lines = []
    for section_type in dict.fromkeys(step.type for step in basis.pattern.section_flow):
        options = ", ".join(catalog.variant_options(section_type))
        preset = catalog.recommended_variant(basis.vibe, section_type)
        lines.append(f"- {section_type}: {options} ({basis.vibe} vibe suggests {preset})")
    return "\n".join(lines)


def planned_section_limit(request: OrchestrationInput) -> int:
    return request.requested_section_count or DEFAULT_SECTION_COUNT


def build_blueprint_user_message(
    intent: PageIntent,
    basis: BlueprintBasis,
    request: OrchestrationInput,
    catalog: DesignCatalog,
) -> str:
    pattern = basis.pattern
    requested_type = request.requested_page_type
    requested_line = f"USER REQUESTED PAGE TYPE: {requested_type}" if requested_type else ""
    section_count = planned_section_limit(request)

    return f"""
Create a page blueprint for:

PRODUCT TYPE: {intent.product_type}
TARGET AUDIENCE: {intent.target_audience}
PRIMARY VALUE PROP: {intent.primary_value_prop}
TONE: {intent.tone}
URGENCY: {intent.urgency_level}
PRICE POINT: {intent.price_point}

SUGGESTED TEMPLATE PATTERN: {pattern.name}
- Average Sections: {pattern.avg_sections}
- Conversion Tactics: {", ".join(pattern.conversion_tactics)}

COPY FRAMEWORK TO USE: {basis.framework}

AVAILABLE VARIANTS:
{_variant_menu(basis, catalog)}

{requested_line}

Create a section sequence that:
1. Follows the {basis.framework} framework progression
2. Includes appropriate variants for each section
3. Has specific copy guidelines for each section based on the product
4. Contains {section_count} sections total

The copyGuidelines for each section should be SPECIFIC to this product, not generic.
"""


def plan_section(
    section_type: str,
    purpose: str,
    intent: PageIntent,
    basis: BlueprintBasis,
    catalog: DesignCatalog,
    copy_guidelines: str | None = None,
    key_elements: list[str] | None = None,
) -> SectionPlan:
    """Plan one section with its variant resolved through the selector."""
    selection = catalog.select_variant(section_type, intent.product_type, basis.vibe, basis.framework)
    return SectionPlan(
        type=section_type,
        variant=selection.variant,
        purpose=purpose,
        copy_guidelines=copy_guidelines
        or catalog.section_copy_guidelines(basis.framework, section_type, purpose),
        key_elements=key_elements or [],
        effects=selection.effects,
        background_effect=selection.background_effect,
        tier=selection.tier,
    )


def _planned_sections(
    raw_sequence: list[Any],
    intent: PageIntent,
    basis: BlueprintBasis,
    catalog: DesignCatalog,
    limit: int,
) -> list[SectionPlan]:
    """Plans for the typed entries of a sequence, at most ``limit`` of them."""
    plans = []
    for raw in raw_sequence:
        if len(plans) >= limit:
            break
        if not isinstance(raw, dict):
            continue
        section_type = optional_string(raw.get("type"))
        if not section_type:
            continue
        purpose = raw.get("purpose")
        if purpose not in PURPOSES:
            purpose = SectionPurpose.INTEREST.value
        plans.append(
            plan_section(
                section_type,
                purpose,
                intent,
                basis,
                catalog,
                copy_guidelines=optional_string(raw.get("copyGuidelines")),
                key_elements=string_list(raw.get("keyElements")),
            )
        )
    return plans


def target_section_count(request: OrchestrationInput, pattern: TemplatePattern) -> int:
    """Requested count, else the pattern's average."""
    return request.requested_section_count or pattern.avg_sections


def parse_blueprint(
    text: str,
    intent: PageIntent,
    request: OrchestrationInput,
    basis: BlueprintBasis,
    catalog: DesignCatalog,
) -> ParseResult[PageBlueprint]:
    """Parse the generator's blueprint JSON.

    A response without a usable section sequence is rejected so the caller
    falls back to the full template flow.
    """
    parsed = parse_json_object(text, PHASE)
    if not parsed.ok:
        return ParseResult(error=parsed.error)

    data = parsed.value
    raw_sequence = data.get("sectionSequence")
    if not isinstance(raw_sequence, list) or not raw_sequence:
        return ParseResult.failure(PHASE, "Missing or empty sectionSequence", text)

    sections = _planned_sections(raw_sequence, intent, basis, catalog, planned_section_limit(request))
    if not sections:
        return ParseResult.failure(PHASE, "No section in sectionSequence has a type", text)

    # The rationale only describes the chosen framework if the generator agreed on it
    rationale = None
    if data.get("copyFramework") in (None, basis.framework):
        rationale = optional_string(data.get("frameworkRationale"))

    blueprint = PageBlueprint(
        copy_framework=basis.framework,
        framework_rationale=rationale or catalog.framework(basis.framework).description,
        section_sequence=sections,
        color_strategy=basis.color_strategy,
        typography=basis.typography,
        target_section_count=target_section_count(request, basis.pattern),
    )
    return ParseResult.success(blueprint)


def fallback_blueprint(
    intent: PageIntent,
    request: OrchestrationInput,
    basis: BlueprintBasis,
    catalog: DesignCatalog,
) -> PageBlueprint:
    """Blueprint built from the matched pattern's full section flow."""
    return PageBlueprint(
        copy_framework=basis.framework,
        framework_rationale=catalog.framework(basis.framework).description,
        section_sequence=[
            plan_section(step.type, step.purpose, intent, basis, catalog)
            for step in basis.pattern.section_flow
        ],
        color_strategy=basis.color_strategy,
        typography=basis.typography,
        target_section_count=target_section_count(request, basis.pattern),
    )


class BlueprintPlanner:
    """Plans the page structure with one generator call."""

    def __init__(self, generator: Generator, catalog: DesignCatalog | None = None):
        self.generator = generator
        self.catalog = catalog or default_catalog()

    def create_blueprint(
        self,
        intent: PageIntent,
        request: OrchestrationInput,
    ) -> tuple[PageBlueprint, TokenUsage]:
        """Create the page blueprint.

        Args:
            intent: Intent from the analysis phase, hint overrides applied.
            request: The orchestration request.

        Returns:
            The blueprint and the tokens spent producing it.

        Raises:
            GeneratorError: If the generator call itself fails.
        """
        basis = resolve_basis(intent, request, self.catalog)

        response = self.generator.generate(
            BLUEPRINT_SYSTEM_PROMPT,
            build_blueprint_user_message(intent, basis, request, self.catalog),
            max_tokens=MAX_TOKENS,
        )

        result = parse_blueprint(response.text, intent, request, basis, self.catalog)
        if result.ok:
            blueprint = result.value
        else:
            log_parse_failure(result.error)
            blueprint = fallback_blueprint(intent, request, basis, self.catalog)

        logger.info(
            "Blueprint created",
            pattern=basis.pattern.id,
            framework=blueprint.copy_framework,
            sections=len(blueprint.section_sequence),
            fallback=not result.ok,
        )
        return blueprint, response.usage
