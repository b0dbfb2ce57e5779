"""Pydantic models for Pagesmith entities."""

from pagesmith.models.base import BaseModel, CamelModel, TimestampMixin
from pagesmith.models.intent import PageIntent, PricePoint, ProductType, Tone, UrgencyLevel
from pagesmith.models.blueprint import (
    ColorStrategy,
    CopyFramework,
    PageBlueprint,
    SectionPlan,
    SectionPurpose,
    Typography,
    VariantTier,
)
from pagesmith.models.section import (
    LIST_SECTION_TYPES,
    PageSection,
    SectionContent,
    SectionItem,
    content_model_for,
)
from pagesmith.models.page import ColorScheme, LandingPage
from pagesmith.models.quality import IssueSeverity, QualityIssue, QualityReport
from pagesmith.models.orchestration import (
    GenerationContext,
    OrchestrationInput,
    OrchestrationMetadata,
    OrchestrationPhase,
    OrchestrationPreferences,
    OrchestrationProgress,
    OrchestrationResult,
    RefinementPolicy,
    TokenUsage,
    WizardData,
)
from pagesmith.models.generation import CreateGenerationRequest, Generation, GenerationStatus

__all__ = [
    "BaseModel",
    "CamelModel",
    "TimestampMixin",
    "PageIntent",
    "PricePoint",
    "ProductType",
    "Tone",
    "UrgencyLevel",
    "ColorStrategy",
    "CopyFramework",
    "PageBlueprint",
    "SectionPlan",
    "SectionPurpose",
    "Typography",
    "VariantTier",
    "LIST_SECTION_TYPES",
    "PageSection",
    "SectionContent",
    "SectionItem",
    "content_model_for",
    "ColorScheme",
    "LandingPage",
    "IssueSeverity",
    "QualityIssue",
    "QualityReport",
    "GenerationContext",
    "OrchestrationInput",
    "OrchestrationMetadata",
    "OrchestrationPhase",
    "OrchestrationPreferences",
    "OrchestrationProgress",
    "OrchestrationResult",
    "RefinementPolicy",
    "TokenUsage",
    "WizardData",
    "CreateGenerationRequest",
    "Generation",
    "GenerationStatus",
]
