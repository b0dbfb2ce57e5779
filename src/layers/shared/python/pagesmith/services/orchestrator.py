"""Page orchestrator: runs the generation phases end to end.

understanding -> planning -> generating -> validating (-> regenerating)
-> complete, or failed when a phase raises.
"""

import re
import time
from collections.abc import Callable

import structlog

from pagesmith.catalog import DesignCatalog, default_catalog
from pagesmith.models.blueprint import PageBlueprint
from pagesmith.models.intent import PageIntent
from pagesmith.models.orchestration import (
    OrchestrationInput,
    OrchestrationMetadata,
    OrchestrationPhase,
    OrchestrationProgress,
    OrchestrationResult,
    RefinementPolicy,
    TokenUsage,
    WizardData,
)
from pagesmith.models.page import ColorScheme, LandingPage
from pagesmith.models.section import PageSection
from pagesmith.services.blueprint_planner import BlueprintPlanner
from pagesmith.services.cost_tracker import calculate_cost
from pagesmith.services.generator import BedrockGenerator, Generator
from pagesmith.services.intent_analyzer import IntentAnalyzer
from pagesmith.services.quality_validator import assess_quality, validate_and_refine
from pagesmith.services.section_generator import SectionGenerator
from pagesmith.utils.exceptions import GenerationFailedError

logger = structlog.get_logger()

ProgressCallback = Callable[[OrchestrationProgress], None]

TITLE_MAX_LENGTH = 60
DESCRIPTION_MAX_LENGTH = 160
SHORT_AUDIENCE_LENGTH = 50

_TITLE_STRIP = re.compile(r"[^\w\s-]")


def page_title(intent: PageIntent) -> str:
    """SEO title from the value proposition, led by the first keyword."""
    title = _TITLE_STRIP.sub("", intent.primary_value_prop)[:TITLE_MAX_LENGTH]
    if intent.keywords:
        keyword = intent.keywords[0]
        if keyword.lower() not in title.lower():
            return f"{keyword} - {title}"
    return title


def meta_description(intent: PageIntent) -> str:
    parts = [intent.primary_value_prop]
    if len(intent.target_audience) < SHORT_AUDIENCE_LENGTH:
        parts.append(f"Perfect for {intent.target_audience}.")
    if intent.secondary_value_props:
        parts.append(intent.secondary_value_props[0])
    return " ".join(parts)[:DESCRIPTION_MAX_LENGTH]


def assemble_page(
    sections: list[PageSection],
    intent: PageIntent,
    blueprint: PageBlueprint,
) -> LandingPage:
    return LandingPage(
        title=page_title(intent),
        description=meta_description(intent),
        sections=sections,
        color_scheme=ColorScheme.from_strategy(blueprint.color_strategy),
        typography=blueprint.typography,
        smooth_scroll=True,
        animation_preset="moderate",
        content_width="medium",
        design_canvas_width=896,
    )


class PageOrchestrator:
    """Coordinates intent, blueprint, section and quality phases.

    Generator failures are fatal for the run and come back as an
    unsuccessful result. Malformed generator output never is; each phase
    falls back on its own.
    """

    def __init__(
        self,
        generator: Generator,
        catalog: DesignCatalog | None = None,
        policy: RefinementPolicy | None = None,
    ):
        self.catalog = catalog or default_catalog()
        self.policy = policy or RefinementPolicy()
        self.intent_analyzer = IntentAnalyzer(generator)
        self.blueprint_planner = BlueprintPlanner(generator, self.catalog)
        self.section_generator = SectionGenerator(generator, self.catalog)

    def orchestrate(
        self,
        request: OrchestrationInput,
        on_progress: ProgressCallback | None = None,
    ) -> OrchestrationResult:
        """Generate a complete landing page.

        Args:
            request: Description, wizard hints and preferences.
            on_progress: Called at phase boundaries and per section.

        Returns:
            The page and run metadata, or ``success=False`` with the error.
        """
        started = time.monotonic()

        def report(phase: OrchestrationPhase, progress: int, message: str, **kwargs) -> None:
            if on_progress:
                on_progress(
                    OrchestrationProgress(phase=phase, progress=progress, message=message, **kwargs)
                )

        try:
            # Understanding
            report(OrchestrationPhase.UNDERSTANDING, 0, "Analyzing your requirements...")
            intent, usage = self.intent_analyzer.analyze(request)
            report(
                OrchestrationPhase.UNDERSTANDING,
                100,
                f"Identified: {intent.product_type} for {intent.target_audience}",
            )

            # Planning
            report(OrchestrationPhase.PLANNING, 0, "Creating page blueprint...")
            blueprint, blueprint_usage = self.blueprint_planner.create_blueprint(intent, request)
            usage = usage + blueprint_usage
            total = len(blueprint.section_sequence)
            report(
                OrchestrationPhase.PLANNING,
                100,
                f"{blueprint.copy_framework} framework with {total} sections",
            )

            # Generating
            report(
                OrchestrationPhase.GENERATING,
                0,
                "Generating sections...",
                current_section=0,
                total_sections=total,
            )

            def section_progress(current: int, total: int) -> None:
                plan_type = (
                    blueprint.section_sequence[current].type if current < total else "section"
                )
                report(
                    OrchestrationPhase.GENERATING,
                    round(current / total * 100) if total else 100,
                    f"Generating {plan_type}...",
                    current_section=current,
                    total_sections=total,
                )

            sections, sections_usage = self.section_generator.generate_all_sections(
                blueprint, intent, section_progress
            )
            usage = usage + sections_usage
            page = assemble_page(sections, intent, blueprint)

            # Validating
            report(OrchestrationPhase.VALIDATING, 0, "Validating quality...")
            if request.refinement_enabled:
                page, quality, refine_usage = validate_and_refine(
                    page,
                    blueprint,
                    intent,
                    self.section_generator,
                    self.policy,
                    on_regenerate=lambda section: report(
                        OrchestrationPhase.REGENERATING, 50, f"Regenerating {section.type}..."
                    ),
                )
                usage = usage + refine_usage
            else:
                quality = assess_quality(page, blueprint)
            report(OrchestrationPhase.VALIDATING, 100, f"Quality score: {quality.score}/100")

            report(OrchestrationPhase.COMPLETE, 100, "Page generated successfully!")

        except Exception as e:
            logger.exception("Page orchestration failed", error=str(e))
            report(OrchestrationPhase.FAILED, 100, f"Generation failed: {e}")
            return OrchestrationResult(success=False, error=str(e) or "Unknown error occurred")

        generation_time_ms = int((time.monotonic() - started) * 1000)
        cost = calculate_cost(usage)
        logger.info(
            "Page generated",
            sections=len(page.sections),
            quality_score=quality.score,
            tokens_used=usage.total,
            cost_cents=cost.total_cost_cents,
            generation_time_ms=generation_time_ms,
        )

        return OrchestrationResult(
            success=True,
            page=page,
            metadata=OrchestrationMetadata(
                intent=intent,
                blueprint=blueprint,
                tokens_used=usage.total,
                token_usage=usage,
                cost_cents=cost.total_cost_cents,
                generation_time_ms=generation_time_ms,
                quality_score=quality.score,
                quality_report=quality,
            ),
        )


def generate_landing_page(
    description: str,
    wizard_data: WizardData | None = None,
    generator: Generator | None = None,
) -> LandingPage:
    """Generate a page in one call.

    Raises:
        GenerationFailedError: If the pipeline did not produce a page.
    """
    orchestrator = PageOrchestrator(generator or BedrockGenerator())
    result = orchestrator.orchestrate(
        OrchestrationInput(description=description, wizard_data=wizard_data)
    )
    if not result.success or result.page is None:
        raise GenerationFailedError(result.error or "Failed to generate page")
    return result.page
