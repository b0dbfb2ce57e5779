"""Static catalog entry models (template patterns, copy frameworks, variants)."""

from pydantic import ConfigDict, Field

from pagesmith.models.base import CamelModel
from pagesmith.models.blueprint import CopyFramework, SectionPurpose, VariantTier


class CatalogEntry(CamelModel):
    model_config = ConfigDict(frozen=True)


class SectionFlowStep(CatalogEntry):
    type: str
    purpose: SectionPurpose
    variant: str | None = None


class TemplatePattern(CatalogEntry):
    """A known page archetype with its canonical section flow."""

    id: str
    name: str
    industries: tuple[str, ...]
    section_flow: tuple[SectionFlowStep, ...]
    copy_framework: CopyFramework
    color_psychology: str
    conversion_tactics: tuple[str, ...]
    avg_sections: int


class FrameworkStage(CatalogEntry):
    name: str
    sections: tuple[str, ...]
    copy_guidelines: str


class CopyFrameworkDefinition(CatalogEntry):
    """A copywriting methodology and its stage guidance."""

    id: CopyFramework
    name: str
    description: str
    stages: tuple[FrameworkStage, ...]
    section_mapping: dict[str, tuple[str, ...]]
    headlines: str
    subheadlines: str
    ctas: str
    body_text: str

    def stage_for(self, section_type: str) -> FrameworkStage | None:
        """First stage listing the section type."""
        for stage in self.stages:
            if section_type in stage.sections:
                return stage
        return None


class VariantFit(CatalogEntry):
    """Where a variant fits; "any" matches everything at a lower score."""

    product_types: tuple[str, ...]
    vibes: tuple[str, ...]
    frameworks: tuple[str, ...]


class VariantMetadata(CatalogEntry):
    tier: VariantTier
    visual_effects: tuple[str, ...] = ()
    best_for: VariantFit
    description: str


class BackgroundEffect(CatalogEntry):
    name: str
    vibes: tuple[str, ...]
    tiers: tuple[VariantTier, ...]


class VariantSelection(CatalogEntry):
    """Chosen variant for one section type."""

    variant: str
    effects: list[str] = Field(default_factory=list)
    background_effect: str | None = None
    tier: VariantTier
