"""Orchestration inputs, outputs and per-call context."""

from enum import Enum

from pydantic import ConfigDict, Field

from pagesmith.models.base import CamelModel
from pagesmith.models.blueprint import PageBlueprint
from pagesmith.models.intent import PageIntent
from pagesmith.models.page import ColorScheme, LandingPage
from pagesmith.models.quality import QualityReport
from pagesmith.models.section import PageSection

DEFAULT_SECTION_COUNT = 9
MIN_SECTION_COUNT = 5
MAX_SECTION_COUNT = 15


class OrchestrationPhase(str, Enum):
    UNDERSTANDING = "understanding"
    PLANNING = "planning"
    GENERATING = "generating"
    VALIDATING = "validating"
    REGENERATING = "regenerating"
    COMPLETE = "complete"
    FAILED = "failed"


class TokenUsage(CamelModel):
    """Generator token counts; instances add up across calls."""

    model_config = ConfigDict(frozen=True)

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total(self) -> int:
        return self.input_tokens + self.output_tokens

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            input_tokens=self.input_tokens + other.input_tokens,
            output_tokens=self.output_tokens + other.output_tokens,
        )


class WizardData(CamelModel):
    """Structured hints collected by the page wizard."""

    business_name: str | None = None
    product_description: str | None = None
    target_audience: str | None = None
    color_theme: str | None = None
    vibe: str | None = None
    font_pair: str | None = None
    page_type: str | None = None


class OrchestrationPreferences(CamelModel):
    section_count: int | None = Field(None, ge=MIN_SECTION_COUNT, le=MAX_SECTION_COUNT)
    enable_refinement: bool = True


class OrchestrationInput(CamelModel):
    """A page generation request."""

    description: str = ""
    wizard_data: WizardData | None = None
    preferences: OrchestrationPreferences | None = None

    @property
    def vibe(self) -> str | None:
        return self.wizard_data.vibe if self.wizard_data else None

    @property
    def requested_page_type(self) -> str | None:
        """Wizard page type, ignoring the "auto" placeholder."""
        if self.wizard_data and self.wizard_data.page_type not in (None, "", "auto"):
            return self.wizard_data.page_type
        return None

    @property
    def requested_section_count(self) -> int | None:
        return self.preferences.section_count if self.preferences else None

    @property
    def refinement_enabled(self) -> bool:
        return self.preferences is None or self.preferences.enable_refinement


class RefinementPolicy(CamelModel):
    """Bounds for the quality-gated regeneration loop.

    A page scoring at or above ``score_threshold`` ships without further
    regeneration even when it still has issues.
    """

    model_config = ConfigDict(frozen=True)

    score_threshold: int = Field(70, ge=0, le=100)
    max_iterations: int = Field(1, ge=0, le=2)
    max_sections_per_iteration: int = Field(2, ge=1, le=2)


class GenerationContext(CamelModel):
    """Everything a single section generation call needs."""

    model_config = ConfigDict(frozen=True)

    blueprint: PageBlueprint
    intent: PageIntent
    previous_sections: list[PageSection] = Field(default_factory=list)
    previous_summary: str = ""
    color_scheme: ColorScheme
    current_section_index: int
    total_sections: int


class OrchestrationProgress(CamelModel):
    """Progress event reported to the caller."""

    phase: OrchestrationPhase
    progress: int = Field(..., ge=0, le=100)
    message: str = ""
    current_section: int | None = None
    total_sections: int | None = None


class OrchestrationMetadata(CamelModel):
    intent: PageIntent
    blueprint: PageBlueprint
    tokens_used: int
    token_usage: TokenUsage
    cost_cents: int = 0
    generation_time_ms: int
    quality_score: int
    quality_report: QualityReport | None = None


class OrchestrationResult(CamelModel):
    """Final pipeline output."""

    success: bool
    page: LandingPage | None = None
    metadata: OrchestrationMetadata | None = None
    error: str | None = None
