"""Tests for the design catalog and variant selection."""

import pytest

from pagesmith.catalog import DesignCatalog, default_catalog
from pagesmith.catalog.template_patterns import TEMPLATE_PATTERNS
from pagesmith.catalog.variants import BACKGROUND_EFFECTS, VariantSelector
from pagesmith.models.catalog import VariantFit, VariantMetadata


class TestTemplatePatterns:
    """Tests for template pattern matching."""

    def test_direct_product_match(self, catalog):
        """Product type matching a pattern id wins."""
        assert catalog.match_template_pattern("course", ["software"]).id == "course"

    def test_keyword_industry_match(self, catalog):
        """Keywords are matched against pattern industries."""
        pattern = catalog.match_template_pattern("general", ["Newsletter", "writing"])

        assert pattern.id == "leadmagnet"

    def test_keyword_substring_match(self, catalog):
        """Keywords match industries by substring either way."""
        assert catalog.match_template_pattern("general", ["developer-tools"]).id == "saas"

    def test_defaults_to_first_pattern(self, catalog):
        """No match returns the first pattern."""
        pattern = catalog.match_template_pattern("general", ["yoga", "", "  "])

        assert pattern.id == TEMPLATE_PATTERNS[0].id

    def test_empty_catalog_rejected(self):
        """A catalog needs at least one pattern."""
        with pytest.raises(ValueError):
            DesignCatalog(patterns=())


class TestCopyFrameworks:
    """Tests for copy framework selection and guidance."""

    @pytest.mark.parametrize(
        "product_type,urgency,price,expected",
        [
            ("saas", "high", "medium", "PAS"),
            ("ecommerce", "low", "low", "PAS"),
            ("course", "medium", "medium", "BAB"),
            ("webinar", "low", "free", "BAB"),
            ("agency", "medium", "enterprise", "BAB"),
            ("saas", "medium", "medium", "AIDA"),
            ("general", "low", "free", "AIDA"),
        ],
    )
    def test_select_copy_framework(self, catalog, product_type, urgency, price, expected):
        """Test framework decision rules."""
        assert catalog.select_copy_framework(product_type, urgency, price) == expected

    def test_unknown_framework_falls_back_to_aida(self, catalog):
        """Unknown framework ids resolve to AIDA."""
        assert catalog.framework("XYZ").id == "AIDA"

    def test_stage_guidelines(self, catalog):
        """A section listed in a stage gets that stage's guidance."""
        guidelines = catalog.section_copy_guidelines("AIDA", "hero", "attention")

        assert guidelines.startswith("## AIDA Framework - ")
        assert "General Copy Rules for hero (attention)" in guidelines

    def test_general_guidelines(self, catalog):
        """Sections outside every stage get the general rules."""
        guidelines = catalog.section_copy_guidelines("PAS", "gallery", "interest")

        assert guidelines.startswith("## PAS Framework Guidelines")
        assert "Headlines:" in guidelines

    def test_headline_examples_use_keywords(self, catalog):
        """Attention headlines are seeded with the first keyword."""
        examples = catalog.headline_examples("PAS", "attention", ["Spreadsheets"])

        assert "Tired of Spreadsheets?" in examples

    def test_headline_examples_without_keywords(self, catalog):
        examples = catalog.headline_examples("BAB", "attention", [])

        assert "From Struggling to Success" in examples


class TestVisualStrategy:
    """Tests for color and typography lookups."""

    def test_known_theme(self, catalog):
        strategy = catalog.color_strategy("forest")

        assert strategy.background == "#052e16"
        assert strategy.mode == "dark"

    def test_unknown_theme_uses_dark(self, catalog):
        """Unknown or missing themes use the dark scheme."""
        assert catalog.color_strategy("neon").background == "#0a0a0a"
        assert catalog.color_strategy(None).background == "#0a0a0a"

    def test_typography(self, catalog):
        assert catalog.typography("playfair-inter").heading_font == "Playfair Display"
        assert catalog.typography(None).heading_font == "Inter"
        assert catalog.typography("comic-sans").body_font == "Inter"


class TestSectionTypes:
    """Tests for section type documentation and presets."""

    def test_known_type_info(self, catalog):
        assert catalog.section_type_info("hero").startswith("HERO SECTION")

    def test_generic_type_info(self, catalog):
        """Unknown types get generic guidance."""
        info = catalog.section_type_info("gallery")

        assert info.startswith("GALLERY SECTION")
        assert "Required: heading" in info

    def test_recommended_variant(self, catalog):
        assert catalog.recommended_variant("techy", "hero") == "animated-preview"
        assert catalog.recommended_variant("techy", "pricing") == "default"
        assert catalog.recommended_variant(None, "hero") == "default"


class TestVariantSelector:
    """Tests for variant scoring."""

    def test_default_catalog_is_shared(self):
        assert default_catalog() is default_catalog()

    def test_declaration_order_breaks_ties(self, catalog):
        """Equal scores go to the variant declared first."""
        selection = catalog.select_variant("hero", "saas", "modern", "AIDA")

        assert selection.variant == "glassmorphism-trust"
        assert selection.tier == "premium"
        assert selection.background_effect == "shooting-stars"

    def test_best_fit_wins(self, catalog):
        """Product, vibe and framework matches raise the score."""
        selection = catalog.select_variant("hero", "saas", "techy", "PAS")

        assert selection.variant == "animated-preview"
        assert selection.effects == ["tilt-card", "shimmer", "brand-marquee", "spring-animations"]
        assert selection.background_effect == "glow"

    def test_only_hero_and_cta_get_background_effects(self, catalog):
        selection = catalog.select_variant("features", "saas", "modern", "AIDA")

        assert selection.variant == "bento"
        assert selection.background_effect is None

    def test_unknown_section_type(self, catalog):
        """Types without variants get the basic default."""
        selection = catalog.select_variant("gallery", "saas", "modern", "AIDA")

        assert selection.variant == "default"
        assert selection.effects == []
        assert selection.tier == "basic"
        assert selection.background_effect is None

    def test_wildcard_scores_lower_than_exact_match(self):
        """An "any" listing earns the wildcard score even when the value is listed too."""
        exact = VariantMetadata(
            tier="standard",
            best_for=VariantFit(product_types=("saas",), vibes=("modern",), frameworks=("AIDA",)),
            description="exact",
        )
        wildcard = VariantMetadata(
            tier="standard",
            best_for=VariantFit(product_types=("any", "saas"), vibes=("any",), frameworks=("any",)),
            description="wildcard",
        )
        selector = VariantSelector({"hero": {"w": wildcard, "e": exact}}, BACKGROUND_EFFECTS)

        assert selector.score(exact, "saas", "modern", "AIDA") == 50 + 40 + 30 + 25
        assert selector.score(wildcard, "saas", "modern", "AIDA") == 50 + 20 + 15 + 12
        assert selector.select("hero", "saas", "modern", "AIDA").variant == "e"

    def test_basic_tier_gets_no_background(self):
        basic = VariantMetadata(
            tier="basic",
            best_for=VariantFit(product_types=("any",), vibes=("any",), frameworks=("any",)),
            description="plain",
        )
        selector = VariantSelector({"cta": {"plain": basic}}, BACKGROUND_EFFECTS)

        assert selector.select("cta", "saas", "modern", "AIDA").background_effect is None

    def test_background_effect_lookup(self, catalog):
        selector = catalog.variant_selector

        assert selector.background_effect("elegant", "advanced") == "glow"
        assert selector.background_effect("playful", "premium") == "glow"
        assert selector.background_effect("modern", "standard") is None

    def test_options_and_descriptions(self, catalog):
        assert catalog.variant_options("hero")[0] == "glassmorphism-trust"
        assert catalog.variant_options("gallery") == ["default"]
        assert catalog.variant_description("cta", "centered") == "Clean centered CTA"
        assert catalog.variant_description("cta", "nope") == ""
