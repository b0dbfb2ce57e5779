"""Page generation API handler.

Generation runs in the page generator worker; this handler only creates the
job, queues it, and serves its status.
"""

import json
import os
from typing import Any

import boto3
import structlog
from pydantic import ValidationError as PydanticValidationError

from pagesmith.models.generation import CreateGenerationRequest, Generation
from pagesmith.models.orchestration import OrchestrationInput
from pagesmith.repositories.generation import MAX_LIST_LIMIT, GenerationRepository
from pagesmith.utils.auth import get_auth_context, require_workspace_access
from pagesmith.utils.exceptions import (
    ForbiddenError,
    NotFoundError,
    PagesmithError,
    ValidationError,
)
from pagesmith.utils.responses import (
    accepted,
    error,
    forbidden,
    not_found,
    success,
    validation_error,
)

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle page generation API requests.

    Routes:
        POST /workspaces/{workspace_id}/generations
        GET  /workspaces/{workspace_id}/generations
        GET  /workspaces/{workspace_id}/generations/{generation_id}
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        path_params = event.get("pathParameters", {}) or {}
        workspace_id = path_params.get("workspace_id")
        generation_id = path_params.get("generation_id")

        auth = get_auth_context(event)
        if not workspace_id:
            return error("Workspace ID is required", 400)
        require_workspace_access(auth, workspace_id)

        repo = GenerationRepository()

        if http_method == "POST" and not generation_id:
            return start_generation(repo, workspace_id, auth.user_id, event)
        elif http_method == "GET" and generation_id:
            return get_generation(repo, workspace_id, generation_id)
        elif http_method == "GET":
            return list_generations(repo, workspace_id, event)
        else:
            return error("Method not allowed", 405)

    except ValidationError as e:
        return validation_error(e.errors)
    except NotFoundError as e:
        return not_found(e.resource_type, e.resource_id)
    except ForbiddenError as e:
        return forbidden(e.message)
    except PagesmithError as e:
        return error(e.message, e.status_code, error_code=e.error_code)
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.exception("Generations handler error", error=str(e))
        return error("Internal server error", 500)


def start_generation(
    repo: GenerationRepository,
    workspace_id: str,
    user_id: str,
    event: dict,
) -> dict:
    """Create a pending generation job and queue it."""
    try:
        body = json.loads(event.get("body") or "{}")
        request = CreateGenerationRequest.model_validate(body)
    except PydanticValidationError as e:
        logger.warning("Generation request validation failed", errors=e.errors())
        raise ValidationError.from_pydantic(e)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON body", error=str(e))
        return error("Invalid JSON body", 400)

    generation = Generation(
        workspace_id=workspace_id,
        user_id=user_id,
        input=OrchestrationInput.model_validate(request.model_dump()),
    )
    repo.create(generation)

    _queue_generation(generation)

    logger.info(
        "Generation queued",
        workspace_id=workspace_id,
        generation_id=generation.id,
        description_length=len(request.description),
    )

    return accepted({
        "id": generation.id,
        "status": generation.status,
        "message": "Page generation started",
    })


def get_generation(
    repo: GenerationRepository,
    workspace_id: str,
    generation_id: str,
) -> dict:
    """Poll a generation job."""
    generation = repo.get_by_id(workspace_id, generation_id)
    if not generation:
        return not_found("Generation", generation_id)

    return success(generation.to_status_dict())


def list_generations(
    repo: GenerationRepository,
    workspace_id: str,
    event: dict,
) -> dict:
    """List generation jobs in a workspace, newest first."""
    query_params = event.get("queryStringParameters", {}) or {}

    limit = min(int(query_params.get("limit", 20)), MAX_LIST_LIMIT)
    if limit < 1:
        raise ValueError("limit must be at least 1")

    generations, next_key = repo.list_for_workspace(workspace_id, limit=limit)

    return success({
        "items": [
            {
                "id": g.id,
                "status": g.status,
                "description": g.input.description[:200],
                "quality_score": g.quality_score,
                "created_at": g.created_at.isoformat(),
                "completed_at": g.completed_at.isoformat() if g.completed_at else None,
            }
            for g in generations
        ],
        "pagination": {
            "limit": limit,
            "has_more": next_key is not None,
        },
    })


def _queue_generation(generation: Generation) -> None:
    """Send a generation job to the page generator queue."""
    queue_url = os.environ.get("GENERATION_QUEUE_URL")
    if not queue_url:
        logger.warning("GENERATION_QUEUE_URL not set, generation not queued", generation_id=generation.id)
        return

    sqs = boto3.client("sqs")

    sqs.send_message(
        QueueUrl=queue_url,
        MessageBody=json.dumps({
            "type": "generate_page",
            "generation_id": generation.id,
            "workspace_id": generation.workspace_id,
        }),
    )
