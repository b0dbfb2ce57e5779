"""Page generator worker.

Runs queued generation jobs through the page orchestrator.
"""

import json
from typing import Any

import structlog
from botocore.exceptions import ClientError

from pagesmith.models.generation import Generation
from pagesmith.models.orchestration import OrchestrationProgress
from pagesmith.repositories.generation import GenerationRepository
from pagesmith.services.generator import BedrockGenerator, Generator
from pagesmith.services.orchestrator import PageOrchestrator

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Process generation jobs from SQS.

    Args:
        event: SQS event with records.
        context: Lambda context.

    Returns:
        Partial batch response listing the records to retry.
    """
    records = event.get("Records", [])

    logger.info("Processing generation queue", record_count=len(records))

    repo = GenerationRepository()
    generator = BedrockGenerator()

    failures = []
    for record in records:
        try:
            body = json.loads(record.get("body", "{}"))
            message_type = body.get("type")

            if message_type == "generate_page":
                result = process_generation(repo, generator, body)
            else:
                logger.warning("Unknown message type", type=message_type)
                result = {"success": False, "error": "Unknown message type"}

        except Exception as e:
            logger.exception("Failed to process generation message", error=str(e))
            result = {"success": False, "error": str(e)}

        if not result.get("success", False):
            failures.append({"itemIdentifier": record["messageId"]})

    return {"batchItemFailures": failures}


def process_generation(
    repo: GenerationRepository,
    generator: Generator,
    data: dict,
) -> dict:
    """Run one generation job to completion.

    A failed pipeline run still counts as processed: the job is stored as
    failed and the message is not retried.
    """
    workspace_id = data.get("workspace_id")
    generation_id = data.get("generation_id")

    generation = repo.get_by_id(workspace_id, generation_id)
    if not generation:
        logger.warning("Generation not found", generation_id=generation_id)
        return {"success": False, "error": "Generation not found"}

    if generation.is_finished:
        logger.info("Generation already finished", generation_id=generation_id, status=generation.status)
        return {"success": True, "skipped": True}

    generation.mark_generating()
    repo.update(generation)

    orchestrator = PageOrchestrator(generator)
    result = orchestrator.orchestrate(generation.input, on_progress=_progress_recorder(repo, generation))

    generation.mark_finished(result)
    repo.update(generation)

    logger.info(
        "Generation finished",
        generation_id=generation.id,
        status=generation.status,
        quality_score=generation.quality_score,
        tokens_used=generation.tokens_used,
    )
    return {"success": True}


def _progress_recorder(repo: GenerationRepository, generation: Generation):
    def record(progress: OrchestrationProgress) -> None:
        try:
            repo.update_progress(generation, progress)
        except ClientError as e:
            # Progress is advisory; the final write still records the outcome
            logger.warning("Progress update failed", generation_id=generation.id, error=str(e))

    return record
