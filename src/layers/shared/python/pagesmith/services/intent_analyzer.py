"""Intent analysis: the first pipeline phase.

Turns a free-text description plus optional wizard hints into a
``PageIntent``. Always produces an intent; malformed generator output falls
back to defaults built from the request itself.
"""

from enum import Enum
from typing import Any

import structlog

from pagesmith.models.intent import PageIntent, PricePoint, ProductType, Tone, UrgencyLevel
from pagesmith.models.orchestration import OrchestrationInput, TokenUsage
from pagesmith.services.generator import Generator
from pagesmith.services.parsing import (
    ParseResult,
    log_parse_failure,
    optional_string,
    parse_json_object,
    string_list,
)

logger = structlog.get_logger()

PHASE = "intent"
MAX_TOKENS = 1024

# Wizard vibe -> copy tone
VIBE_TO_TONE = {
    "modern": Tone.PROFESSIONAL,
    "minimal": Tone.PROFESSIONAL,
    "bold": Tone.URGENT,
    "professional": Tone.PROFESSIONAL,
    "playful": Tone.PLAYFUL,
    "elegant": Tone.ASPIRATIONAL,
    "techy": Tone.TECHNICAL,
}

# Wizard page type -> product type; "landing" keeps the inferred type
PAGE_TYPE_TO_PRODUCT = {
    "sales-funnel": ProductType.COURSE,
    "product": ProductType.ECOMMERCE,
    "lead-magnet": ProductType.LEADMAGNET,
}

INTENT_SYSTEM_PROMPT = """You are an expert at understanding business and marketing intent for landing page generation.

Your job is to analyze the user's description of their product/service and extract structured information that will guide page generation.

IMPORTANT: Extract real, useful information. Don't make generic assumptions.

Return ONLY valid JSON matching this exact structure:
{
  "productType": "saas" | "course" | "ecommerce" | "agency" | "leadmagnet" | "webinar" | "general",
  "targetAudience": "specific description of ideal customer",
  "primaryValueProp": "the main benefit/promise in clear language",
  "secondaryValueProps": ["additional benefit 1", "additional benefit 2"],
  "tone": "professional" | "casual" | "urgent" | "playful" | "technical" | "aspirational",
  "urgencyLevel": "low" | "medium" | "high",
  "pricePoint": "free" | "low" | "medium" | "premium" | "enterprise",
  "keywords": ["relevant", "keywords", "from", "description"],
  "competitorContext": "what alternatives exist or what they compare to",
  "uniqueDifferentiator": "what makes this unique vs competitors"
}

Guidelines for each field:

productType - Classify based on:
- saas: software, apps, tools, APIs, developer products
- course: education, training, coaching, workshops, tutorials
- ecommerce: physical products, retail, shopping
- agency: services, consulting, creative work
- leadmagnet: free resources, ebooks, guides, newsletters
- webinar: live events, masterclasses, workshops
- general: doesn't fit other categories

targetAudience - Be specific:
- BAD: "businesses" or "everyone"
- GOOD: "SaaS founders with 10-50 employees struggling to scale customer support"

primaryValueProp - The ONE main promise:
- BAD: "Great product that helps you"
- GOOD: "Cut customer support response time by 80% with AI automation"

tone - Match the language used:
- professional: formal, B2B, enterprise
- casual: friendly, conversational, startup
- urgent: time-sensitive, scarcity, FOMO
- playful: fun, creative, bold
- technical: developer-focused, detailed specs
- aspirational: transformation, lifestyle, dreams

urgencyLevel:
- low: informational, no pressure
- medium: some urgency, limited offer
- high: scarcity, deadline, FOMO-driven

pricePoint - Infer from language:
- free: completely free, open source
- low: budget-friendly, starter tier
- medium: mid-market, standard pricing
- premium: high-ticket, expensive
- enterprise: custom pricing, large orgs

keywords: Extract 5-10 important terms from the description

competitorContext: What alternatives exist (if mentioned or implied)

uniqueDifferentiator: What makes this different (if clear from description)

Return ONLY the JSON object, no markdown or explanation."""


def build_intent_user_message(request: OrchestrationInput) -> str:
    parts = [f'Analyze this landing page request:\n\n"{request.description}"']

    wizard = request.wizard_data
    if wizard:
        parts.append("\nAdditional context from user selections:")
        if wizard.business_name:
            parts.append(f"- Business Name: {wizard.business_name}")
        if wizard.product_description:
            parts.append(f"- Product/Service: {wizard.product_description}")
        if wizard.target_audience:
            parts.append(f"- Target Audience: {wizard.target_audience}")
        if wizard.vibe:
            parts.append(f"- Desired Vibe: {wizard.vibe}")
        if wizard.page_type:
            parts.append(f"- Page Type: {wizard.page_type}")

    parts.append("\nExtract the structured intent from this information.")
    return "\n".join(parts)


def _enum_value(enum_cls: type[Enum], value: Any, default: Enum) -> str:
    """Value of the enum member matching ``value``, else the default's."""
    if isinstance(value, str):
        candidate = value.strip().lower()
        for member in enum_cls:
            if member.value == candidate:
                return member.value
    return default.value


def _default_value_prop(request: OrchestrationInput) -> str:
    return request.description[:100].strip() or "Welcome"


def apply_hint_overrides(intent: PageIntent, request: OrchestrationInput) -> PageIntent:
    """Let wizard vibe and page type win over the inferred tone and product type."""
    updates: dict[str, str] = {}

    tone = VIBE_TO_TONE.get(request.vibe or "")
    if tone:
        updates["tone"] = tone.value

    page_type = request.requested_page_type
    if page_type and page_type in PAGE_TYPE_TO_PRODUCT:
        updates["product_type"] = PAGE_TYPE_TO_PRODUCT[page_type].value

    if not updates:
        return intent
    return intent.model_copy(update=updates)


def parse_intent(text: str, request: OrchestrationInput) -> ParseResult[PageIntent]:
    """Parse the generator's intent JSON, defaulting every missing field."""
    parsed = parse_json_object(text, PHASE)
    if not parsed.ok:
        return ParseResult(error=parsed.error)

    data = parsed.value
    intent = PageIntent(
        product_type=_enum_value(ProductType, data.get("productType"), ProductType.GENERAL),
        target_audience=optional_string(data.get("targetAudience")) or "potential customers",
        primary_value_prop=optional_string(data.get("primaryValueProp")) or _default_value_prop(request),
        secondary_value_props=string_list(data.get("secondaryValueProps")),
        tone=_enum_value(Tone, data.get("tone"), Tone.PROFESSIONAL),
        urgency_level=_enum_value(UrgencyLevel, data.get("urgencyLevel"), UrgencyLevel.MEDIUM),
        price_point=_enum_value(PricePoint, data.get("pricePoint"), PricePoint.MEDIUM),
        keywords=string_list(data.get("keywords")),
        competitor_context=optional_string(data.get("competitorContext")),
        unique_differentiator=optional_string(data.get("uniqueDifferentiator")),
    )
    return ParseResult.success(intent)


def fallback_intent(request: OrchestrationInput) -> PageIntent:
    """Deterministic intent built from the request alone."""
    audience = request.wizard_data.target_audience if request.wizard_data else None
    return PageIntent(
        product_type=ProductType.GENERAL,
        target_audience=audience or "potential customers",
        primary_value_prop=_default_value_prop(request),
        tone=Tone.PROFESSIONAL,
        urgency_level=UrgencyLevel.MEDIUM,
        price_point=PricePoint.MEDIUM,
        keywords=request.description.split()[:5],
    )


class IntentAnalyzer:
    """Extracts a normalized ``PageIntent`` with one generator call."""

    def __init__(self, generator: Generator):
        self.generator = generator

    def analyze(self, request: OrchestrationInput) -> tuple[PageIntent, TokenUsage]:
        """Analyze a request.

        Args:
            request: The orchestration request.

        Returns:
            The intent and the tokens spent producing it.

        Raises:
            GeneratorError: If the generator call itself fails.
        """
        response = self.generator.generate(
            INTENT_SYSTEM_PROMPT,
            build_intent_user_message(request),
            max_tokens=MAX_TOKENS,
        )

        result = parse_intent(response.text, request)
        if result.ok:
            intent = result.value
        else:
            log_parse_failure(result.error)
            intent = fallback_intent(request)

        intent = apply_hint_overrides(intent, request)
        logger.info(
            "Intent analyzed",
            product_type=intent.product_type,
            tone=intent.tone,
            fallback=not result.ok,
        )
        return intent, response.usage
