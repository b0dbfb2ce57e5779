"""Generation job repository."""

import structlog

from pagesmith.models.generation import Generation
from pagesmith.models.orchestration import OrchestrationProgress
from pagesmith.repositories.base import BaseRepository

logger = structlog.get_logger()

MAX_LIST_LIMIT = 100


class GenerationRepository(BaseRepository[Generation]):
    """Repository for Generation jobs, keyed under their workspace."""

    def __init__(self, table_name: str | None = None):
        super().__init__(Generation, table_name)

    def get_by_id(self, workspace_id: str, generation_id: str) -> Generation | None:
        return self.get(pk=f"WS#{workspace_id}", sk=f"GEN#{generation_id}")

    def list_for_workspace(
        self,
        workspace_id: str,
        limit: int = 20,
        last_key: dict | None = None,
    ) -> tuple[list[Generation], dict | None]:
        """List a workspace's generations, newest first.

        ULID ids sort by creation time, so a descending sort key scan is
        newest first.
        """
        return self.query(
            pk=f"WS#{workspace_id}",
            sk_prefix="GEN#",
            limit=min(limit, MAX_LIST_LIMIT),
            scan_forward=False,
            last_key=last_key,
        )

    def update_progress(self, generation: Generation, progress: OrchestrationProgress) -> Generation:
        """Store the latest progress event on a running job.

        Progress writes skip the version check: the worker is the only
        writer while a job runs.
        """
        generation.progress = progress
        return self.update(generation, check_version=False)
