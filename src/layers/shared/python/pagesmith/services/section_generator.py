"""Section generation: the third pipeline phase.

One generator call per planned section. Each call sees a short summary of
the section right before it, so prompt size stays flat as the page grows.
Every returned section is structurally valid: unparseable output is
replaced by a minimal fallback built from the intent.
"""

import re
from collections.abc import Callable, Collection, Iterable
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from pagesmith.catalog import DesignCatalog, default_catalog
from pagesmith.models.base import generate_short_id
from pagesmith.models.blueprint import ColorStrategy, PageBlueprint, SectionPlan
from pagesmith.models.intent import PageIntent
from pagesmith.models.orchestration import GenerationContext, TokenUsage
from pagesmith.models.page import ColorScheme
from pagesmith.models.section import LIST_SECTION_TYPES, PageSection, SectionItem
from pagesmith.services.generator import Generator
from pagesmith.services.parsing import ParseResult, log_parse_failure, parse_json_object

logger = structlog.get_logger()

PHASE = "section"
MAX_TOKENS = 2048

SECTION_ID_PATTERN = re.compile(r"^[a-z0-9]{7}$")

# Presentation flags that belong in the styling map, not in content
STYLING_KEYS = ("backgroundEffect", "subheadingAnimation")
VARIANT_KEY_SUFFIX = "Variant"

FALLBACK_ITEMS = (
    ("Key Feature", "Description of the feature benefit"),
    ("Another Feature", "Another important benefit"),
    ("Third Feature", "Yet another compelling benefit"),
)

ProgressCallback = Callable[[int, int], None]

SECTION_GENERATOR_BASE = """You are an expert landing page copywriter and designer.

Your job is to generate a SINGLE section with compelling, conversion-focused content.

CRITICAL RULES:
1. NEVER use placeholder text like "Lorem ipsum" or "Your text here"
2. Write SPECIFIC, REALISTIC content that matches the product/service
3. Use the EXACT color scheme provided
4. Follow the copy framework guidelines for this section's purpose
5. Generate unique 7-character IDs for the section and all items

Return ONLY valid JSON for a single PageSection object:
{
  "id": "7-char-id",
  "type": "section-type",
  "content": {
    "heading": "...",
    "subheading": "...",
    "backgroundColor": "#hex",
    "textColor": "#hex",
    "accentColor": "#hex",
    ...other content fields
  },
  "items": [
    {
      "id": "7-char-id",
      "title": "...",
      "description": "...",
      ...other item fields
    }
  ]
}

IMPORTANT: Return ONLY the JSON object, no markdown formatting or explanation."""


def summarize_section(section: PageSection) -> str:
    """Rolling summary handed to the next section's generation call."""
    content = section.content
    key_message = content.subheading or (content.body_text or "")[:100] or "N/A"
    return (
        f"Previous section ({section.type}):\n"
        f'- Headline: "{content.heading or "N/A"}"\n'
        f'- Key message: "{key_message}"\n'
        f"- Items: {len(section.items)} items"
    )


def build_context(
    blueprint: PageBlueprint,
    intent: PageIntent,
    previous_sections: list[PageSection],
    index: int,
) -> GenerationContext:
    """Context for the section at ``index`` given the sections before it."""
    return GenerationContext(
        blueprint=blueprint,
        intent=intent,
        previous_sections=list(previous_sections),
        previous_summary=summarize_section(previous_sections[-1]) if previous_sections else "",
        color_scheme=ColorScheme.from_strategy(blueprint.color_strategy),
        current_section_index=index,
        total_sections=len(blueprint.section_sequence),
    )


def _effects_context(plan: SectionPlan) -> str:
    if not plan.effects:
        return ""

    lines = [
        "",
        "## VISUAL EFFECTS TO APPLY (Premium Design)",
        f'This section uses the "{plan.variant}" variant ({plan.tier} tier).',
        f"Visual effects: {', '.join(plan.effects)}",
    ]
    if plan.background_effect:
        lines.append(f"Background effect: {plan.background_effect}")
    lines += [
        "",
        "IMPORTANT: Include these visual properties in the content object:",
        f'- {plan.type}Variant: "{plan.variant}"',
    ]
    if plan.background_effect:
        lines.append(f'- backgroundEffect: "{plan.background_effect}"')
    lines.append("- Enable hover effects, animations, and premium styling as appropriate")
    return "\n".join(lines) + "\n"


def build_section_system_prompt(
    plan: SectionPlan,
    blueprint: PageBlueprint,
    intent: PageIntent,
    catalog: DesignCatalog,
) -> str:
    colors = blueprint.color_strategy
    framework_guidelines = catalog.section_copy_guidelines(
        blueprint.copy_framework, plan.type, plan.purpose
    )
    variant = plan.variant or "default"
    variant_description = catalog.variant_description(plan.type, variant)
    if variant_description:
        variant = f"{variant} ({variant_description})"
    headlines = catalog.headline_examples(blueprint.copy_framework, plan.purpose, intent.keywords)
    if headlines:
        headline_block = "Headline examples for this stage (adapt, never copy):\n" + "\n".join(
            f"- {headline}" for headline in headlines
        )
    else:
        headline_block = ""

    return f"""{SECTION_GENERATOR_BASE}

## SECTION TYPE: {plan.type.upper()}
Variant: {variant}
Tier: {plan.tier}

{catalog.section_type_info(plan.type)}
{_effects_context(plan)}

## COLOR SCHEME (Use these exact colors)
- Background: {colors.background}
- Text: {colors.text}
- Primary/Accent: {colors.accent}
- Secondary: {colors.secondary}

## TYPOGRAPHY
- Heading Font: {blueprint.typography.heading_font}
- Body Font: {blueprint.typography.body_font}

## COPY FRAMEWORK: {blueprint.copy_framework}
Section Purpose: {plan.purpose}

{framework_guidelines}

{headline_block}

## SPECIFIC GUIDELINES FOR THIS SECTION
{plan.copy_guidelines}

## PRODUCT CONTEXT
- Product Type: {intent.product_type}
- Target Audience: {intent.target_audience}
- Value Proposition: {intent.primary_value_prop}
- Tone: {intent.tone}
- Keywords: {", ".join(intent.keywords)}
"""


def build_section_user_message(plan: SectionPlan, context: GenerationContext) -> str:
    variant_line = f"- Variant: {plan.variant}" if plan.variant else ""
    previous = (
        f"PREVIOUS SECTION CONTEXT:\n{context.previous_summary}\n" if context.previous_summary else ""
    )
    elements_line = (
        f"5. Include these elements: {', '.join(plan.key_elements)}" if plan.key_elements else ""
    )

    return f"""
Generate a {plan.type} section for this landing page.

SECTION DETAILS:
- Type: {plan.type}
{variant_line}
- Purpose in page: {plan.purpose}
- Position: Section {context.current_section_index + 1} of {context.total_sections}

{previous}
REQUIREMENTS:
1. Write compelling, specific copy for {context.blueprint.copy_framework} {plan.purpose} stage
2. Target audience: "{context.intent.target_audience}"
3. Main benefit to emphasize: "{context.intent.primary_value_prop}"
4. Tone: {context.intent.tone}
{elements_line}

Generate the complete section JSON now."""


def page_ids(sections: Iterable[PageSection]) -> set[str]:
    """Section and item ids already used on a page."""
    ids = set()
    for section in sections:
        ids.add(section.id)
        ids.update(item.id for item in section.items)
    return ids


def _short_id(value: Any, taken: set[str]) -> str:
    """The given id when it is valid and unused, else a fresh one.

    The returned id is added to ``taken``.
    """
    candidate = value.lower() if isinstance(value, str) else ""
    while not SECTION_ID_PATTERN.match(candidate) or candidate in taken:
        candidate = generate_short_id()
    taken.add(candidate)
    return candidate


def _is_styling_key(key: str) -> bool:
    return key in STYLING_KEYS or (key.endswith(VARIANT_KEY_SUFFIX) and key != VARIANT_KEY_SUFFIX)


def split_styling(content: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Separate premium presentation flags from section copy."""
    copy = {k: v for k, v in content.items() if not _is_styling_key(k)}
    styling = {k: v for k, v in content.items() if _is_styling_key(k)}
    return copy, styling


def parse_section(
    text: str,
    plan: SectionPlan,
    taken_ids: Collection[str] = (),
) -> ParseResult[PageSection]:
    """Parse the generator's section JSON.

    The section type always comes from the plan. Generator-provided section
    and item ids are kept only when they are valid 7-character ids not in
    ``taken_ids`` or earlier in the same section.
    """
    parsed = parse_json_object(text, PHASE)
    if not parsed.ok:
        return ParseResult(error=parsed.error)

    data = parsed.value
    raw_content = data.get("content")
    content, styling = split_styling(raw_content if isinstance(raw_content, dict) else {})

    taken = set(taken_ids)
    section_id = _short_id(data.get("id"), taken)

    raw_items = data.get("items")
    items = []
    for raw in raw_items if isinstance(raw_items, list) else []:
        if isinstance(raw, dict):
            items.append({**raw, "id": _short_id(raw.get("id"), taken)})

    try:
        section = PageSection(
            id=section_id,
            type=plan.type,
            content=content,
            items=items,
            styling=styling,
        )
    except PydanticValidationError as e:
        return ParseResult.failure(PHASE, f"Section does not match the content model: {e}", text)

    return ParseResult.success(section)


def fallback_section(plan: SectionPlan, context: GenerationContext) -> PageSection:
    """Minimal valid section built from the intent and color strategy."""
    intent = context.intent
    colors = context.blueprint.color_strategy

    items = []
    if plan.type in LIST_SECTION_TYPES:
        items = [SectionItem(title=title, description=description) for title, description in FALLBACK_ITEMS]

    return PageSection(
        type=plan.type,
        content={
            "heading": intent.primary_value_prop or "Welcome",
            "subheading": f"For {intent.target_audience}",
            "backgroundColor": colors.background,
            "textColor": colors.text,
            "accentColor": colors.accent,
        },
        items=items,
    )


def finalize_section(
    section: PageSection,
    plan: SectionPlan,
    colors: ColorStrategy,
    section_id: str | None = None,
) -> PageSection:
    """Apply the plan's type, palette and premium flags to a section.

    Args:
        section: Parsed or fallback section.
        plan: The section's plan.
        colors: Blueprint color strategy for missing colors.
        section_id: Id to keep, when replacing an existing section.

    Returns:
        A new section; the input is not modified.
    """
    content = section.content.model_copy(
        update={
            "background_color": section.content.background_color or colors.background,
            "text_color": section.content.text_color or colors.text,
            "accent_color": section.content.accent_color or colors.accent,
        }
    )

    styling = dict(section.styling)
    if plan.variant:
        styling[f"{plan.type}{VARIANT_KEY_SUFFIX}"] = plan.variant
    if plan.background_effect:
        styling["backgroundEffect"] = plan.background_effect
    if plan.is_premium and not styling.get("subheadingAnimation"):
        styling["subheadingAnimation"] = "stagger"

    return PageSection(
        id=section_id or section.id,
        type=plan.type,
        content=content,
        items=section.items,
        styling=styling,
    )


class SectionGenerator:
    """Writes page sections one generator call at a time."""

    def __init__(self, generator: Generator, catalog: DesignCatalog | None = None):
        self.generator = generator
        self.catalog = catalog or default_catalog()

    def generate_section(
        self,
        plan: SectionPlan,
        context: GenerationContext,
        section_id: str | None = None,
        taken_ids: Collection[str] = (),
    ) -> tuple[PageSection, TokenUsage]:
        """Generate one section.

        Args:
            plan: What to generate.
            context: Blueprint, intent and the preceding section summary.
            section_id: Id of the section being replaced, if regenerating.
            taken_ids: Ids used elsewhere on the page, never reused.

        Returns:
            The section and the tokens spent on it.

        Raises:
            GeneratorError: If the generator call itself fails.
        """
        response = self.generator.generate(
            build_section_system_prompt(plan, context.blueprint, context.intent, self.catalog),
            build_section_user_message(plan, context),
            max_tokens=MAX_TOKENS,
        )

        result = parse_section(response.text, plan, taken_ids)
        if result.ok:
            section = result.value
        else:
            log_parse_failure(result.error)
            section = fallback_section(plan, context)

        section = finalize_section(section, plan, context.blueprint.color_strategy, section_id)
        logger.debug(
            "Section generated",
            section_type=plan.type,
            section_id=section.id,
            position=context.current_section_index + 1,
            fallback=not result.ok,
        )
        return section, response.usage

    def generate_all_sections(
        self,
        blueprint: PageBlueprint,
        intent: PageIntent,
        on_progress: ProgressCallback | None = None,
    ) -> tuple[list[PageSection], TokenUsage]:
        """Generate every planned section in order.

        Reports ``(index, total)`` before each section and ``(total, total)``
        once all are done.
        """
        sections: list[PageSection] = []
        usage = TokenUsage()
        total = len(blueprint.section_sequence)

        for index, plan in enumerate(blueprint.section_sequence):
            if on_progress:
                on_progress(index, total)

            context = build_context(blueprint, intent, sections, index)
            section, section_usage = self.generate_section(plan, context, taken_ids=page_ids(sections))
            sections.append(section)
            usage = usage + section_usage

        if on_progress:
            on_progress(total, total)

        return sections, usage

    def regenerate_section(
        self,
        blueprint: PageBlueprint,
        intent: PageIntent,
        sections: list[PageSection],
        index: int,
    ) -> tuple[PageSection, TokenUsage]:
        """Replace the section at ``index``, keeping its id."""
        context = build_context(blueprint, intent, sections[:index], index)
        return self.generate_section(
            blueprint.section_sequence[index],
            context,
            section_id=sections[index].id,
            taken_ids=page_ids(sections),
        )
