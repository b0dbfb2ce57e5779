"""Quality validation and the bounded regeneration loop.

``assess_quality`` is a pure scan of an assembled page. ``validate_and_refine``
uses it to pick a few failing sections and regenerate them in place.
"""

import re
from collections.abc import Callable

import structlog

from pagesmith.models.blueprint import PageBlueprint
from pagesmith.models.intent import PageIntent
from pagesmith.models.orchestration import RefinementPolicy, TokenUsage
from pagesmith.models.page import LandingPage
from pagesmith.models.quality import IssueSeverity, QualityIssue, QualityReport
from pagesmith.models.section import PageSection
from pagesmith.services.section_generator import SectionGenerator

logger = structlog.get_logger()

PLACEHOLDER_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"lorem ipsum",
        r"dolor sit amet",
        r"your (text|content|headline|title) here",
        r"placeholder",
        r"example\.com",
        r"test@test",
        r"\[.*?\]",
        r"xxx+",
        r"todo:",
        r"fixme:",
        r"insert .* here",
        r"sample (text|content)",
        r"default (text|content|heading)",
    )
)

POWER_WORDS = (
    "free",
    "new",
    "you",
    "instant",
    "proven",
    "guaranteed",
    "secret",
    "discover",
    "amazing",
    "exclusive",
    "limited",
    "save",
    "easy",
    "fast",
    "simple",
    "powerful",
    "ultimate",
    "complete",
    "transform",
    "boost",
    "unlock",
    "master",
    "effortless",
    "revolutionary",
)

WEAK_CTAS = frozenset({"click here", "submit", "send", "learn more", "read more"})

MIN_HEADLINE_WORDS = 3
MAX_HEADLINE_WORDS = 15

ERROR_PENALTY = 15
WARNING_PENALTY = 5
EXCELLENT_SCORE = 90
WARNINGS_BEFORE_SUGGESTION = 3

RegenerateCallback = Callable[[PageSection], None]


def contains_placeholder(text: str | None) -> bool:
    if not text:
        return False
    return any(pattern.search(text) for pattern in PLACEHOLDER_PATTERNS)


def _issue(
    severity: IssueSeverity,
    section: PageSection,
    field: str,
    issue: str,
    suggestion: str,
) -> QualityIssue:
    return QualityIssue(
        severity=severity,
        section_id=section.id,
        section_type=section.type,
        field=field,
        issue=issue,
        suggestion=suggestion,
    )


def check_headline(section: PageSection) -> list[QualityIssue]:
    heading = section.content.heading
    if not heading:
        return [
            _issue(IssueSeverity.ERROR, section, "heading", "Missing headline", "Add a compelling headline")
        ]

    issues = []
    if contains_placeholder(heading):
        issues.append(
            _issue(
                IssueSeverity.ERROR,
                section,
                "heading",
                "Contains placeholder text",
                "Replace with real, compelling copy",
            )
        )

    word_count = len(heading.split())
    if word_count < MIN_HEADLINE_WORDS:
        issues.append(
            _issue(
                IssueSeverity.WARNING,
                section,
                "heading",
                "Headline is too short",
                "Add more benefit-focused words (aim for 3-10 words)",
            )
        )
    if word_count > MAX_HEADLINE_WORDS:
        issues.append(
            _issue(
                IssueSeverity.WARNING,
                section,
                "heading",
                "Headline is too long",
                "Shorten to 10 words or fewer for impact",
            )
        )

    lowered = heading.lower()
    if section.type == "hero" and not any(word in lowered for word in POWER_WORDS):
        issues.append(
            _issue(
                IssueSeverity.INFO,
                section,
                "heading",
                "Headline lacks power words",
                f"Consider adding words like: {', '.join(POWER_WORDS[:5])}",
            )
        )

    return issues


def check_cta(section: PageSection) -> list[QualityIssue]:
    button_text = section.content.button_text
    if not button_text:
        return []

    issues = []
    if contains_placeholder(button_text):
        issues.append(
            _issue(
                IssueSeverity.ERROR,
                section,
                "buttonText",
                "CTA contains placeholder text",
                "Replace with action-oriented button text",
            )
        )
    if button_text.strip().lower() in WEAK_CTAS:
        issues.append(
            _issue(
                IssueSeverity.WARNING,
                section,
                "buttonText",
                "CTA is generic/weak",
                "Use action + outcome: 'Start Free Trial', 'Get Instant Access'",
            )
        )
    return issues


def check_items(section: PageSection) -> list[QualityIssue]:
    if not section.items:
        if section.requires_items:
            return [
                _issue(
                    IssueSeverity.ERROR,
                    section,
                    "items",
                    "Section requires items but has none",
                    "Add at least 3 items",
                )
            ]
        return []

    issues = []
    for i, item in enumerate(section.items):
        if contains_placeholder(item.title):
            issues.append(
                _issue(
                    IssueSeverity.ERROR,
                    section,
                    f"items[{i}].title",
                    "Item title contains placeholder",
                    "Replace with specific benefit/feature name",
                )
            )
        if contains_placeholder(item.description):
            issues.append(
                _issue(
                    IssueSeverity.ERROR,
                    section,
                    f"items[{i}].description",
                    "Item description contains placeholder",
                    "Write specific, benefit-focused description",
                )
            )
    return issues


def check_supporting_copy(section: PageSection) -> list[QualityIssue]:
    issues = []
    if contains_placeholder(section.content.subheading):
        issues.append(
            _issue(
                IssueSeverity.ERROR,
                section,
                "subheading",
                "Subheading contains placeholder text",
                "Replace with supporting copy",
            )
        )
    if contains_placeholder(section.content.body_text):
        issues.append(
            _issue(
                IssueSeverity.ERROR,
                section,
                "bodyText",
                "Body text contains placeholder",
                "Write specific, benefit-focused content",
            )
        )
    return issues


def check_color_consistency(page: LandingPage, blueprint: PageBlueprint) -> list[QualityIssue]:
    """Flag sections whose background strays from the strategy.

    Only informational: a close shade sharing the expected hex prefix passes.
    """
    expected = blueprint.color_strategy.background.lower()
    issues = []
    for section in page.sections:
        background = (section.content.background_color or "").lower()
        if background and expected[1:4] not in background and background != expected:
            issues.append(
                _issue(
                    IssueSeverity.INFO,
                    section,
                    "backgroundColor",
                    "Background color differs from scheme",
                    f"Expected {expected}",
                )
            )
    return issues


def assess_quality(page: LandingPage, blueprint: PageBlueprint) -> QualityReport:
    """Score a page and list its issues.

    Args:
        page: The assembled page.
        blueprint: The blueprint it was generated from.

    Returns:
        A report whose score drops 15 per error and 5 per warning; it passes
        only when there are no errors.
    """
    issues: list[QualityIssue] = []
    for section in page.sections:
        issues += check_headline(section)
        issues += check_cta(section)
        issues += check_items(section)
        issues += check_supporting_copy(section)
    issues += check_color_consistency(page, blueprint)

    error_count = sum(1 for i in issues if i.severity == IssueSeverity.ERROR.value)
    warning_count = sum(1 for i in issues if i.severity == IssueSeverity.WARNING.value)
    score = max(0, 100 - error_count * ERROR_PENALTY - warning_count * WARNING_PENALTY)

    suggestions = []
    if error_count:
        suggestions.append(f"Fix {error_count} critical issues (placeholder text, missing content)")
    if warning_count > WARNINGS_BEFORE_SUGGESTION:
        suggestions.append(f"Improve {warning_count} areas for better conversion")
    if score >= EXCELLENT_SCORE:
        suggestions.append("Page quality is excellent!")

    return QualityReport(
        score=score,
        issues=issues,
        suggestions=suggestions,
        passes_validation=error_count == 0,
    )


def _is_good_enough(report: QualityReport, policy: RefinementPolicy) -> bool:
    return report.passes_validation or report.score >= policy.score_threshold


def validate_and_refine(
    page: LandingPage,
    blueprint: PageBlueprint,
    intent: PageIntent,
    section_generator: SectionGenerator,
    policy: RefinementPolicy | None = None,
    on_regenerate: RegenerateCallback | None = None,
) -> tuple[LandingPage, QualityReport, TokenUsage]:
    """Regenerate failing sections until the page is good enough.

    Each round regenerates at most ``policy.max_sections_per_iteration``
    sections that carry errors, in page order, keeping their ids. A section
    whose regeneration raises keeps its previous content.

    Returns:
        The refined page, its final report and the regeneration tokens.
    """
    policy = policy or RefinementPolicy()
    sections = list(page.sections)
    usage = TokenUsage()

    for iteration in range(policy.max_iterations):
        report = assess_quality(page.model_copy(update={"sections": sections}), blueprint)
        if _is_good_enough(report, policy):
            break

        failing = set(report.sections_with_errors())
        targets = [i for i, s in enumerate(sections) if s.id in failing]
        targets = targets[: policy.max_sections_per_iteration]
        if not targets:
            break

        logger.info(
            "Regenerating sections",
            iteration=iteration + 1,
            score=report.score,
            section_ids=[sections[i].id for i in targets],
        )

        for index in targets:
            section = sections[index]
            if index >= len(blueprint.section_sequence):
                continue
            if on_regenerate:
                on_regenerate(section)
            try:
                regenerated, section_usage = section_generator.regenerate_section(
                    blueprint, intent, sections, index
                )
            except Exception:
                logger.exception(
                    "Section regeneration failed",
                    section_id=section.id,
                    section_type=section.type,
                )
                continue
            sections[index] = regenerated
            usage = usage + section_usage

    page = page.model_copy(update={"sections": sections})
    return page, assess_quality(page, blueprint), usage
