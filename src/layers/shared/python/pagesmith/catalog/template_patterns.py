"""Template patterns: proven section flows per page archetype.

Patterns are matched in declaration order; the first one (SaaS) is the
catch-all default.
"""

from pagesmith.models.catalog import SectionFlowStep, TemplatePattern


def _flow(*steps: tuple) -> tuple[SectionFlowStep, ...]:
    """Build a section flow from (type, purpose[, variant]) tuples."""
    return tuple(
        SectionFlowStep(type=step[0], purpose=step[1], variant=step[2] if len(step) > 2 else None)
        for step in steps
    )


TEMPLATE_PATTERNS: tuple[TemplatePattern, ...] = (
    TemplatePattern(
        id="saas",
        name="SaaS Landing Page",
        industries=("software", "tech", "b2b", "startup", "api", "developer-tools"),
        section_flow=_flow(
            ("header", "navigation", "default"),
            ("hero", "attention", "default"),
            ("logoCloud", "proof"),
            ("stats", "interest", "cards"),
            ("process", "interest", "horizontal"),
            ("features", "interest", "bento"),
            ("testimonials", "desire", "twitter-cards"),
            ("faq", "objections"),
            ("cta", "action", "centered"),
            ("footer", "footer"),
        ),
        copy_framework="AIDA",
        color_psychology="Blue (trust) + Orange (action) for enterprise appeal",
        conversion_tactics=(
            "Free trial emphasis",
            "No credit card required",
            "Stats showing usage/customers",
            "Logo cloud for social proof",
        ),
        avg_sections=10,
    ),
    TemplatePattern(
        id="agency",
        name="Agency/Services Page",
        industries=("agency", "consulting", "creative", "marketing", "design"),
        section_flow=_flow(
            ("header", "navigation", "floating-header"),
            ("hero", "attention", "default"),
            ("stats", "proof", "minimal"),
            ("features", "interest", "illustrated"),
            ("process", "interest", "timeline"),
            ("testimonials", "desire", "scrolling"),
            ("founders", "desire"),
            ("faq", "objections"),
            ("cta", "action", "split"),
            ("footer", "footer"),
        ),
        copy_framework="PAS",
        color_psychology="Black + Gold for premium positioning",
        conversion_tactics=(
            "Case study results",
            "Problem-focused headlines",
            "Team credibility",
            "Process transparency",
        ),
        avg_sections=10,
    ),
    TemplatePattern(
        id="course",
        name="Online Course Page",
        industries=("education", "course", "coaching", "training", "workshop"),
        section_flow=_flow(
            ("header", "navigation", "simple-header"),
            ("hero", "attention", "sales-funnel"),
            ("value-proposition", "interest"),
            ("features", "interest", "default"),
            ("creator", "desire"),
            ("testimonials", "desire", "scrolling"),
            ("pricing", "action"),
            ("faq", "objections"),
            ("cta", "action", "centered"),
            ("footer", "footer"),
        ),
        copy_framework="BAB",
        color_psychology="Green (growth) + Navy (trust) for transformation",
        conversion_tactics=(
            "Transformation promise",
            "Instructor credibility",
            "Student results",
            "Money-back guarantee",
        ),
        avg_sections=10,
    ),
    TemplatePattern(
        id="ecommerce",
        name="E-Commerce Product Page",
        industries=("ecommerce", "retail", "product", "physical-goods", "ddc"),
        section_flow=_flow(
            ("header", "navigation", "header-with-search"),
            ("hero", "attention", "default"),
            ("features", "interest", "default"),
            ("gallery", "interest", "bento"),
            ("testimonials", "desire", "twitter-cards"),
            ("comparison", "interest"),
            ("pricing", "action"),
            ("faq", "objections"),
            ("cta", "action", "banner"),
            ("footer", "footer"),
        ),
        copy_framework="PAS",
        color_psychology="Red (urgency) + Gold (premium) for purchase motivation",
        conversion_tactics=(
            "Scarcity messaging",
            "Customer reviews",
            "Product comparisons",
            "Free shipping threshold",
        ),
        avg_sections=10,
    ),
    TemplatePattern(
        id="leadmagnet",
        name="Lead Magnet Page",
        industries=("leadgen", "newsletter", "ebook", "guide", "checklist"),
        section_flow=_flow(
            ("header", "navigation", "simple-header"),
            ("hero", "attention", "email-signup"),
            ("features", "interest", "default"),
            ("creator", "desire"),
            ("testimonials", "desire", "scrolling"),
            ("cta", "action", "centered"),
            ("footer", "footer"),
        ),
        copy_framework="AIDA",
        color_psychology="Green (growth) + Navy (trust) for value exchange",
        conversion_tactics=(
            "Value preview",
            "Expert positioning",
            "Social proof from users",
            "No spam promise",
        ),
        avg_sections=7,
    ),
    TemplatePattern(
        id="webinar",
        name="Webinar/Event Page",
        industries=("webinar", "event", "workshop", "masterclass", "live"),
        section_flow=_flow(
            ("header", "navigation", "simple-header"),
            ("hero", "attention", "sales-funnel"),
            ("features", "interest", "default"),
            ("creator", "desire"),
            ("testimonials", "desire", "twitter-cards"),
            ("faq", "objections"),
            ("cta", "action", "centered"),
            ("footer", "footer"),
        ),
        copy_framework="AIDA",
        color_psychology="Purple (premium) + Pink (urgency) for event excitement",
        conversion_tactics=(
            "Limited seats",
            "Date/time urgency",
            "Speaker credibility",
            "What you'll learn",
        ),
        avg_sections=8,
    ),
    TemplatePattern(
        id="sales-funnel",
        name="High-Converting Sales Funnel",
        industries=("info-product", "digital-product", "high-ticket"),
        section_flow=_flow(
            ("header", "navigation", "simple-header"),
            ("hero", "attention", "sales-funnel"),
            ("value-proposition", "interest"),
            ("features", "interest", "default"),
            ("creator", "desire"),
            ("offer-details", "interest"),
            ("testimonials", "desire", "scrolling"),
            ("comparison", "interest"),
            ("pricing", "action"),
            ("faq", "objections"),
            ("cta", "action", "centered"),
            ("footer", "footer"),
        ),
        copy_framework="PAS",
        color_psychology="Dark background with lime accent for urgency",
        conversion_tactics=(
            "Story-based value prop",
            "Detailed offer breakdown",
            "Multiple testimonials",
            "Risk reversal",
        ),
        avg_sections=12,
    ),
    TemplatePattern(
        id="dark-conversion",
        name="Dark Mode Tech Product",
        industries=("developer", "api", "tech-product", "tool"),
        section_flow=_flow(
            ("header", "navigation", "floating-header"),
            ("hero", "attention", "animated-preview"),
            ("logoCloud", "proof"),
            ("features", "interest", "bento"),
            ("stats", "interest", "cards"),
            ("video", "interest", "centered"),
            ("testimonials", "desire", "twitter-cards"),
            ("pricing", "action"),
            ("faq", "objections"),
            ("cta", "action", "centered"),
            ("footer", "footer"),
        ),
        copy_framework="AIDA",
        color_psychology="Black + Cyan for tech sophistication",
        conversion_tactics=(
            "App preview demo",
            "Technical features",
            "Developer testimonials",
            "Free tier option",
        ),
        avg_sections=11,
    ),
)


def match_template_pattern(
    patterns: tuple[TemplatePattern, ...],
    product_type: str,
    keywords: list[str],
) -> TemplatePattern:
    """Match intent to a template pattern.

    Direct id match on the product type first, then the first industry
    that overlaps a keyword (substring either way), else the first pattern.

    Args:
        patterns: Patterns in match order.
        product_type: Intent product type.
        keywords: Intent keywords.

    Returns:
        Exactly one pattern.
    """
    for pattern in patterns:
        if pattern.id == product_type:
            return pattern

    lowered = [k.lower() for k in keywords if k and k.strip()]
    for pattern in patterns:
        for industry in pattern.industries:
            if any(k in industry or industry in k for k in lowered):
                return pattern

    return patterns[0]
