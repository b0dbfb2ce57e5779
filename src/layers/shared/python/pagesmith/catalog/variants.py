"""Premium section variants and the selector that scores them.

Each section type lists its variants in preference order; ties in score go
to the variant declared first.
"""

from collections.abc import Mapping

import structlog

from pagesmith.models.blueprint import VariantTier
from pagesmith.models.catalog import (
    BackgroundEffect,
    VariantFit,
    VariantMetadata,
    VariantSelection,
)

logger = structlog.get_logger()

ANY = "any"

TIER_SCORES: dict[str, int] = {
    VariantTier.PREMIUM.value: 100,
    VariantTier.ADVANCED.value: 75,
    VariantTier.STANDARD.value: 50,
    VariantTier.BASIC.value: 25,
}

PRODUCT_MATCH_SCORE = (40, 20)
VIBE_MATCH_SCORE = (30, 15)
FRAMEWORK_MATCH_SCORE = (25, 12)

# Only these section types get an animated background
BACKGROUND_EFFECT_SECTIONS = ("hero", "cta")


def _variant(
    tier: str,
    effects: tuple[str, ...],
    product_types: tuple[str, ...],
    vibes: tuple[str, ...],
    frameworks: tuple[str, ...],
    description: str,
) -> VariantMetadata:
    return VariantMetadata(
        tier=tier,
        visual_effects=effects,
        best_for=VariantFit(product_types=product_types, vibes=vibes, frameworks=frameworks),
        description=description,
    )


def _standard(description: str, effects: tuple[str, ...] = ()) -> VariantMetadata:
    """A standard-tier variant that fits everything."""
    return _variant("standard", effects, (ANY,), (ANY,), (ANY,), description)


PREMIUM_VARIANTS: dict[str, dict[str, VariantMetadata]] = {
    "hero": {
        "glassmorphism-trust": _variant(
            "premium",
            ("glassmorphism", "animated-stats", "video-modal", "glow"),
            ("agency", "course", "saas"),
            ("professional", "elegant", "modern"),
            ("BAB", "AIDA"),
            "Agency-focused with glassmorphism badges and animated trust elements",
        ),
        "animated-preview": _variant(
            "premium",
            ("tilt-card", "shimmer", "brand-marquee", "spring-animations"),
            ("saas", "ecommerce"),
            ("playful", "modern", "techy", "bold"),
            ("AIDA", "PAS"),
            "Animated product preview with tilt card and shimmer effects",
        ),
        "sales-funnel": _variant(
            "advanced",
            ("urgency-elements", "countdown", "scarcity-badge"),
            ("course", "leadmagnet", "webinar"),
            ("bold", "urgent"),
            ("PAS", "BAB"),
            "High-conversion sales page hero with urgency elements",
        ),
        "email-signup": _variant(
            "standard",
            ("form-focus",),
            ("leadmagnet", "webinar"),
            ("professional", "minimal"),
            (ANY,),
            "Email capture focused hero layout",
        ),
        "default": _variant("basic", (), (ANY,), ("minimal",), (ANY,), "Clean, classic hero layout"),
    },
    "features": {
        "bento": _variant(
            "premium",
            ("masonry-grid", "parallax-images", "mesh-gradient", "hover-glow"),
            ("saas", "course"),
            ("modern", "techy", "bold"),
            ("AIDA",),
            "Masonry bento grid with parallax images and mesh gradient backgrounds",
        ),
        "hover": _variant(
            "advanced",
            ("animated-borders", "glow-bars", "hover-transforms"),
            (ANY,),
            ("bold", "playful"),
            (ANY,),
            "4-column grid with animated hover borders and glowing accent bars",
        ),
        "illustrated": _variant(
            "standard",
            ("custom-illustrations",),
            ("saas", "course"),
            ("professional", "friendly"),
            ("BAB",),
            "Feature cards with custom illustrations",
        ),
        "table": _variant(
            "standard",
            (),
            ("saas",),
            ("professional", "techy"),
            (ANY,),
            "Comparison table format for feature lists",
        ),
        "default": _variant("basic", (), (ANY,), ("minimal",), (ANY,), "Simple grid feature layout"),
    },
    "testimonials": {
        "twitter-cards": _variant(
            "premium",
            ("social-format", "avatar-stack", "star-animation"),
            ("saas", "course", "agency"),
            ("modern", "techy", "bold"),
            ("AIDA", ANY),
            "Social proof card format with ratings",
        ),
        "screenshots": _variant(
            "advanced",
            ("screenshot-frame", "quote-overlay"),
            ("saas", "course"),
            ("professional", "elegant"),
            (ANY,),
            "Screenshot format testimonials with frame styling",
        ),
        "scrolling": _standard("Horizontally scrolling testimonial marquee", ("marquee",)),
    },
    "cta": {
        "split": _variant(
            "premium",
            ("two-column", "image-float", "glow-accent"),
            ("saas", "agency"),
            ("professional", "elegant", "modern"),
            ("AIDA", ANY),
            "Two-column split CTA with visual element",
        ),
        "banner": _variant(
            "advanced",
            ("full-width", "gradient-bg"),
            ("ecommerce", "course", "saas"),
            ("bold", "techy"),
            ("PAS", ANY),
            "Full-width banner CTA with impact",
        ),
        "centered": _standard("Clean centered CTA"),
        "minimal": _variant(
            "standard", (), (ANY,), ("minimal", "elegant"), (ANY,), "Minimal, focused CTA section"
        ),
    },
    "stats": {
        "circles": _variant(
            "advanced",
            ("animated-circles", "count-up"),
            ("course", "agency"),
            ("modern", "bold"),
            (ANY,),
            "Circular progress indicators with count-up animation",
        ),
        "bars": _variant(
            "advanced",
            ("animated-bars", "progress-fill"),
            ("saas",),
            ("techy",),
            ("AIDA",),
            "Animated progress bars",
        ),
        "cards": _standard("Standard stat cards", ("hover-lift",)),
        "minimal": _variant(
            "basic", (), (ANY,), ("minimal", "elegant"), (ANY,), "Minimalist stat display"
        ),
    },
    "pricing": {
        "default": _standard("Standard pricing grid with hover effects", ("hover-lift", "glow-accent")),
    },
    "process": {
        "timeline": _variant(
            "premium",
            ("animated-line", "step-reveal"),
            ("course", "agency", "saas"),
            ("professional", "elegant", "modern"),
            ("BAB", "AIDA"),
            "Vertical timeline with animated reveal",
        ),
        "horizontal": _variant(
            "advanced",
            ("connector-lines", "step-animation"),
            ("saas",),
            ("modern", "techy", "bold"),
            ("AIDA",),
            "Horizontal step process",
        ),
        "cards": _standard("Card-based process steps", ("number-badges",)),
    },
    "faq": {
        "default": _standard("Accordion FAQ section", ("accordion-smooth",)),
    },
    "logoCloud": {
        "default": _standard("Logo cloud with marquee scroll", ("logo-marquee", "grayscale-hover")),
    },
    "header": {
        "floating-header": _variant(
            "premium",
            ("backdrop-blur", "scroll-shrink"),
            ("saas", "agency"),
            ("modern", "professional", "techy"),
            (ANY,),
            "Floating header with blur effect",
        ),
        "header-2": _variant(
            "advanced", ("nav-animation",), (ANY,), ("modern",), (ANY,), "Modern header variant"
        ),
        "simple-header": _variant(
            "standard", (), (ANY,), ("minimal", "elegant"), (ANY,), "Minimalist simple header"
        ),
        "default": _standard("Standard header"),
    },
    "footer": {
        "default": _standard("Standard footer with links"),
    },
    "video": {
        "centered": _variant(
            "advanced",
            ("video-modal", "play-button-glow"),
            ("course", "saas"),
            ("modern",),
            (ANY,),
            "Centered video with modal playback",
        ),
        "default": _standard("Standard video embed"),
    },
    "founders": {
        "glass-3d": _variant(
            "premium",
            ("glassmorphism", "3d-cards", "avatar-ring"),
            ("course", "agency"),
            ("modern", "elegant"),
            ("BAB",),
            "Glassmorphic founder cards with 3D effects",
        ),
        "default": _standard("Standard founder profiles"),
    },
    "comparison": {
        "glow": _variant(
            "advanced",
            ("row-glow", "checkmark-animation"),
            ("saas",),
            ("modern", "techy"),
            ("AIDA", "PAS"),
            "Comparison table with glow effects",
        ),
        "default": _standard("Standard comparison table"),
    },
    "offer": {
        "bento-3d": _variant(
            "premium",
            ("3d-tilt", "glow-borders", "shine-effect", "checkmark-draw"),
            ("course", "leadmagnet"),
            ("bold", "modern"),
            ("PAS", "BAB"),
            "Premium bento offer showcase with 3D tilt cards",
        ),
        "default": _standard("Standard offer section"),
    },
}

BACKGROUND_EFFECTS: tuple[BackgroundEffect, ...] = (
    BackgroundEffect(name="shooting-stars", vibes=("bold", "modern"), tiers=("premium", "advanced")),
    BackgroundEffect(name="glow", vibes=(ANY,), tiers=("premium", "advanced")),
    BackgroundEffect(name="elegant-shapes", vibes=("elegant", "professional"), tiers=("advanced",)),
    BackgroundEffect(name="aurora", vibes=("modern", "playful"), tiers=("premium",)),
    BackgroundEffect(name="spotlight", vibes=("modern", "techy"), tiers=("premium", "advanced")),
    BackgroundEffect(name="meteors", vibes=("bold", "techy"), tiers=("premium",)),
    BackgroundEffect(name="sparkles", vibes=("playful",), tiers=("advanced",)),
    BackgroundEffect(name="background-beams", vibes=("techy",), tiers=("advanced",)),
)


def _fit_score(candidates: tuple[str, ...], value: str, scores: tuple[int, int]) -> int:
    """Score one best-for dimension; a wildcard listing takes the lower score."""
    exact, wildcard = scores
    if ANY in candidates:
        return wildcard
    if value in candidates:
        return exact
    return 0


class VariantSelector:
    """Scores variants per section type against intent, vibe and framework."""

    def __init__(
        self,
        variants: Mapping[str, Mapping[str, VariantMetadata]],
        background_effects: tuple[BackgroundEffect, ...],
    ):
        self.variants = variants
        self.background_effects = background_effects

    def score(self, meta: VariantMetadata, product_type: str, vibe: str, framework: str) -> int:
        fit = meta.best_for
        return (
            TIER_SCORES[meta.tier]
            + _fit_score(fit.product_types, product_type, PRODUCT_MATCH_SCORE)
            + _fit_score(fit.vibes, vibe, VIBE_MATCH_SCORE)
            + _fit_score(fit.frameworks, framework, FRAMEWORK_MATCH_SCORE)
        )

    def select(
        self,
        section_type: str,
        product_type: str,
        vibe: str,
        framework: str,
    ) -> VariantSelection:
        """Select the best variant for a section type.

        Args:
            section_type: Section type being planned.
            product_type: Intent product type.
            vibe: Requested visual vibe.
            framework: Chosen copy framework.

        Returns:
            Variant, its effects and tier, plus a background effect for
            hero/cta sections above basic tier.
        """
        options = self.variants.get(section_type)
        if not options:
            return VariantSelection(variant="default", effects=[], tier=VariantTier.BASIC)

        # max() keeps the first of equal scores, so declaration order breaks ties
        name, meta = max(
            options.items(),
            key=lambda entry: self.score(entry[1], product_type, vibe, framework),
        )

        background_effect = None
        if section_type in BACKGROUND_EFFECT_SECTIONS and meta.tier != VariantTier.BASIC.value:
            background_effect = self.background_effect(vibe, meta.tier)

        return VariantSelection(
            variant=name,
            effects=list(meta.visual_effects),
            background_effect=background_effect,
            tier=meta.tier,
        )

    def background_effect(self, vibe: str, tier: str) -> str | None:
        """First declared effect matching the vibe (or any) and the tier."""
        for effect in self.background_effects:
            if (vibe in effect.vibes or ANY in effect.vibes) and tier in effect.tiers:
                return effect.name
        return None

    def options(self, section_type: str) -> list[str]:
        """All variant names for a section type."""
        options = self.variants.get(section_type)
        if not options:
            return ["default"]
        return list(options)

    def description(self, section_type: str, variant: str) -> str:
        meta = self.variants.get(section_type, {}).get(variant)
        return meta.description if meta else ""
