"""Tests for the generation repository."""

import pytest

from pagesmith.models.generation import Generation
from pagesmith.models.orchestration import OrchestrationInput, OrchestrationPhase, OrchestrationProgress
from pagesmith.repositories.generation import GenerationRepository
from pagesmith.utils.exceptions import ConflictError, NotFoundError


def _generation(workspace_id="ws-123", **kwargs):
    return Generation(
        workspace_id=workspace_id,
        user_id="user-1",
        input=OrchestrationInput(description="AI email writer for founders"),
        **kwargs,
    )


class TestGenerationRepository:
    """Tests for GenerationRepository."""

    def test_create_and_get(self, dynamodb_table):
        """Test storing and reading back a job."""
        repo = GenerationRepository()
        generation = repo.create(_generation())

        stored = repo.get_by_id("ws-123", generation.id)

        assert stored.id == generation.id
        assert stored.status == "pending"
        assert stored.input.description == "AI email writer for founders"

    def test_get_missing(self, dynamodb_table):
        repo = GenerationRepository()

        assert repo.get_by_id("ws-123", "missing") is None
        with pytest.raises(NotFoundError) as exc_info:
            repo.get_or_raise("WS#ws-123", "GEN#missing", "Generation")
        assert exc_info.value.resource_id == "missing"

    def test_create_duplicate(self, dynamodb_table):
        repo = GenerationRepository()
        generation = repo.create(_generation())

        with pytest.raises(ConflictError):
            repo.create(generation)

    def test_update_bumps_version(self, dynamodb_table):
        repo = GenerationRepository()
        generation = repo.create(_generation())

        generation.mark_generating()
        repo.update(generation)

        stored = repo.get_by_id("ws-123", generation.id)
        assert stored.status == "generating"
        assert stored.version == 2

    def test_stale_update_conflicts(self, dynamodb_table):
        """A writer holding an old version loses."""
        repo = GenerationRepository()
        generation = repo.create(_generation())
        stale = repo.get_by_id("ws-123", generation.id)

        generation.mark_generating()
        repo.update(generation)

        with pytest.raises(ConflictError):
            repo.update(stale)
        assert stale.version == 1

    def test_update_progress(self, dynamodb_table):
        """Progress writes skip the version check."""
        repo = GenerationRepository()
        generation = repo.create(_generation())
        stale = repo.get_by_id("ws-123", generation.id)
        repo.update(generation)

        repo.update_progress(
            stale,
            OrchestrationProgress(phase=OrchestrationPhase.PLANNING, progress=100, message="AIDA"),
        )

        stored = repo.get_by_id("ws-123", generation.id)
        assert stored.progress.phase == "planning"
        assert stored.progress.message == "AIDA"

    def test_list_newest_first(self, dynamodb_table):
        repo = GenerationRepository()
        first = repo.create(_generation(id="01HZX0000000000000000000A1"))
        second = repo.create(_generation(id="01HZX0000000000000000000B2"))
        repo.create(_generation(workspace_id="ws-other"))

        generations, next_key = repo.list_for_workspace("ws-123")

        assert [g.id for g in generations] == [second.id, first.id]
        assert next_key is None

    def test_list_pagination(self, dynamodb_table):
        repo = GenerationRepository()
        for _ in range(3):
            repo.create(_generation())

        page, next_key = repo.list_for_workspace("ws-123", limit=2)
        rest, _ = repo.list_for_workspace("ws-123", limit=2, last_key=next_key)

        assert len(page) == 2
        assert next_key is not None
        assert len(rest) == 1
