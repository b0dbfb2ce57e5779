"""Quality assessment models."""

from enum import Enum

from pydantic import Field

from pagesmith.models.base import CamelModel


class IssueSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class QualityIssue(CamelModel):
    """One detected defect in a generated section."""

    severity: IssueSeverity
    section_id: str
    section_type: str
    field: str
    issue: str
    suggestion: str


class QualityReport(CamelModel):
    """Aggregate verdict of one validation pass."""

    score: int = Field(..., ge=0, le=100)
    issues: list[QualityIssue] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    passes_validation: bool

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.ERROR.value)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING.value)

    def sections_with_errors(self) -> list[str]:
        """Distinct ids of sections carrying at least one error, in issue order."""
        seen: list[str] = []
        for issue in self.issues:
            if issue.severity == IssueSeverity.ERROR.value and issue.section_id not in seen:
                seen.append(issue.section_id)
        return seen
