"""Blueprint models produced by the planning phase."""

from enum import Enum
from typing import Literal

from pydantic import ConfigDict, Field

from pagesmith.models.base import CamelModel

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class CopyFramework(str, Enum):
    """Copywriting methodology driving section order and copy."""

    AIDA = "AIDA"
    PAS = "PAS"
    BAB = "BAB"


class SectionPurpose(str, Enum):
    """Role a section plays in the page narrative."""

    NAVIGATION = "navigation"
    ATTENTION = "attention"
    INTEREST = "interest"
    DESIRE = "desire"
    ACTION = "action"
    PROOF = "proof"
    OBJECTIONS = "objections"
    FOOTER = "footer"


class VariantTier(str, Enum):
    """Visual richness of a section variant."""

    PREMIUM = "premium"
    ADVANCED = "advanced"
    STANDARD = "standard"
    BASIC = "basic"


class ColorStrategy(CamelModel):
    """Color contract every generated section follows."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["dark", "light"] = "dark"
    primary: str = Field(..., pattern=HEX_COLOR)
    secondary: str = Field(..., pattern=HEX_COLOR)
    accent: str = Field(..., pattern=HEX_COLOR)
    background: str = Field(..., pattern=HEX_COLOR)
    text: str = Field(..., pattern=HEX_COLOR)
    psychology: str | None = None


class Typography(CamelModel):
    """Heading and body font pairing."""

    model_config = ConfigDict(frozen=True)

    heading_font: str
    body_font: str


class SectionPlan(CamelModel):
    """One planned section, before any content exists."""

    model_config = ConfigDict(frozen=True)

    type: str
    variant: str | None = None
    purpose: SectionPurpose = SectionPurpose.INTEREST
    copy_guidelines: str = ""
    key_elements: list[str] = Field(default_factory=list)
    effects: list[str] = Field(default_factory=list)
    background_effect: str | None = None
    tier: VariantTier = VariantTier.STANDARD

    @property
    def is_premium(self) -> bool:
        """Whether the plan's tier enables premium animation flags."""
        return self.tier in (VariantTier.PREMIUM.value, VariantTier.ADVANCED.value)


class PageBlueprint(CamelModel):
    """The full page plan: framework, ordered sections and visual strategy."""

    model_config = ConfigDict(frozen=True)

    copy_framework: CopyFramework
    framework_rationale: str
    section_sequence: list[SectionPlan]
    color_strategy: ColorStrategy
    typography: Typography
    target_section_count: int
