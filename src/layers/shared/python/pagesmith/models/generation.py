"""Generation job model for asynchronous page generation."""

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import Field

from pagesmith.models.base import BaseModel, utc_now
from pagesmith.models.orchestration import (
    OrchestrationInput,
    OrchestrationProgress,
    OrchestrationResult,
)

MAX_DESCRIPTION_LENGTH = 10_000


class GenerationStatus(str, Enum):
    """Generation job status enum."""

    PENDING = "pending"
    GENERATING = "generating"
    COMPLETE = "complete"
    FAILED = "failed"


class Generation(BaseModel):
    """Generation job - one asynchronous orchestration run.

    Key Pattern:
        PK: WS#{workspace_id}
        SK: GEN#{id}
    """

    _pk_prefix: ClassVar[str] = "WS#"
    _sk_prefix: ClassVar[str] = "GEN#"

    workspace_id: str = Field(..., description="Parent workspace ID")
    user_id: str = Field(..., description="User who requested the page")
    status: GenerationStatus = Field(default=GenerationStatus.PENDING)

    input: OrchestrationInput
    progress: OrchestrationProgress | None = Field(None, description="Latest progress event")
    result: OrchestrationResult | None = None
    error: str | None = None

    quality_score: int | None = None
    tokens_used: int = 0
    cost_cents: int = 0
    completed_at: datetime | None = None

    def get_pk(self) -> str:
        """Get partition key: WS#{workspace_id}."""
        return f"WS#{self.workspace_id}"

    def get_sk(self) -> str:
        """Get sort key: GEN#{id}."""
        return f"GEN#{self.id}"

    @property
    def is_finished(self) -> bool:
        return self.status in (GenerationStatus.COMPLETE.value, GenerationStatus.FAILED.value)

    def mark_generating(self) -> None:
        self.status = GenerationStatus.GENERATING
        self.error = None

    def mark_finished(self, result: OrchestrationResult) -> None:
        """Record the outcome of a run, successful or not."""
        self.result = result
        self.completed_at = utc_now()
        if result.success:
            self.status = GenerationStatus.COMPLETE
            self.error = None
        else:
            self.status = GenerationStatus.FAILED
            self.error = result.error or "Unknown error occurred"
        if result.metadata:
            self.quality_score = result.metadata.quality_score
            self.tokens_used = result.metadata.tokens_used
            self.cost_cents = result.metadata.cost_cents

    def to_status_dict(self) -> dict:
        """Polling payload returned by the API."""
        return {
            "id": self.id,
            "status": self.status,
            "progress": (
                self.progress.model_dump(mode="json", by_alias=True) if self.progress else None
            ),
            "result": self._result_payload(),
            "error": self.error,
            "quality_score": self.quality_score,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    def _result_payload(self) -> dict | None:
        if not self.result or not self.result.success:
            return None
        payload = self.result.model_dump(mode="json", by_alias=True, exclude={"page"})
        if self.result.page:
            payload["page"] = self.result.page.to_editor_dict()
        return payload


class CreateGenerationRequest(OrchestrationInput):
    """Request model for starting a generation."""

    description: str = Field(..., min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
