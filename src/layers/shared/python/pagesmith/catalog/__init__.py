"""Static design knowledge consulted while planning and writing pages."""

from collections.abc import Mapping
from functools import lru_cache

from pagesmith.catalog import copy_frameworks, template_patterns
from pagesmith.catalog.copy_frameworks import COPY_FRAMEWORKS
from pagesmith.catalog.section_types import (
    RECOMMENDED_VARIANTS,
    SECTION_TYPE_INFO,
    generic_section_info,
)
from pagesmith.catalog.template_patterns import TEMPLATE_PATTERNS
from pagesmith.catalog.themes import COLOR_SCHEMES, DEFAULT_FONT_PAIR, DEFAULT_THEME, FONT_PAIRS
from pagesmith.catalog.variants import BACKGROUND_EFFECTS, PREMIUM_VARIANTS, VariantSelector
from pagesmith.models.blueprint import ColorStrategy, Typography
from pagesmith.models.catalog import (
    BackgroundEffect,
    CopyFrameworkDefinition,
    TemplatePattern,
    VariantMetadata,
    VariantSelection,
)


class DesignCatalog:
    """Read-only lookup tables for patterns, frameworks, themes and variants.

    Every table can be replaced at construction, which keeps the agents
    testable against a small catalog.
    """

    def __init__(
        self,
        patterns: tuple[TemplatePattern, ...] = TEMPLATE_PATTERNS,
        frameworks: Mapping[str, CopyFrameworkDefinition] = COPY_FRAMEWORKS,
        color_schemes: Mapping[str, ColorStrategy] = COLOR_SCHEMES,
        font_pairs: Mapping[str, Typography] = FONT_PAIRS,
        section_info: Mapping[str, str] = SECTION_TYPE_INFO,
        recommended_variants: Mapping[str, Mapping[str, str]] = RECOMMENDED_VARIANTS,
        variants: Mapping[str, Mapping[str, VariantMetadata]] = PREMIUM_VARIANTS,
        background_effects: tuple[BackgroundEffect, ...] = BACKGROUND_EFFECTS,
    ):
        if not patterns:
            raise ValueError("catalog needs at least one template pattern")
        self.patterns = patterns
        self.frameworks = frameworks
        self.color_schemes = color_schemes
        self.font_pairs = font_pairs
        self.section_info = section_info
        self.recommended_variants = recommended_variants
        self.variant_selector = VariantSelector(variants, background_effects)

    # Patterns and frameworks

    def match_template_pattern(self, product_type: str, keywords: list[str]) -> TemplatePattern:
        return template_patterns.match_template_pattern(self.patterns, product_type, keywords)

    def select_copy_framework(self, product_type: str, urgency_level: str, price_point: str) -> str:
        return copy_frameworks.select_copy_framework(product_type, urgency_level, price_point)

    def framework(self, framework: str) -> CopyFrameworkDefinition:
        """Framework definition by id, AIDA for unknown ids."""
        return self.frameworks.get(framework) or self.frameworks["AIDA"]

    def section_copy_guidelines(self, framework: str, section_type: str, purpose: str) -> str:
        return copy_frameworks.section_copy_guidelines(self.framework(framework), section_type, purpose)

    def headline_examples(self, framework: str, purpose: str, keywords: list[str]) -> list[str]:
        return copy_frameworks.headline_examples(framework, purpose, keywords)

    # Visual strategy

    def color_strategy(self, theme: str | None) -> ColorStrategy:
        """Color scheme by theme name; unknown or missing themes use the default."""
        return self.color_schemes.get(theme or DEFAULT_THEME) or self.color_schemes[DEFAULT_THEME]

    def typography(self, font_pair: str | None) -> Typography:
        return self.font_pairs.get(font_pair or DEFAULT_FONT_PAIR) or self.font_pairs[DEFAULT_FONT_PAIR]

    # Section types and variants

    def section_type_info(self, section_type: str) -> str:
        return self.section_info.get(section_type) or generic_section_info(section_type)

    def recommended_variant(self, vibe: str | None, section_type: str) -> str:
        """Preset variant for a vibe, "default" when the vibe has none."""
        return self.recommended_variants.get(vibe or "", {}).get(section_type, "default")

    def select_variant(
        self,
        section_type: str,
        product_type: str,
        vibe: str,
        framework: str,
    ) -> VariantSelection:
        return self.variant_selector.select(section_type, product_type, vibe, framework)

    def variant_options(self, section_type: str) -> list[str]:
        return self.variant_selector.options(section_type)

    def variant_description(self, section_type: str, variant: str) -> str:
        return self.variant_selector.description(section_type, variant)


@lru_cache(maxsize=1)
def default_catalog() -> DesignCatalog:
    """Catalog built from the bundled tables."""
    return DesignCatalog()


__all__ = [
    "DesignCatalog",
    "default_catalog",
    "VariantSelector",
]
