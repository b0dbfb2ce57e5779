"""Tests for the page generations API handler."""

import json
import pytest

from pagesmith.models.generation import Generation
from pagesmith.models.orchestration import OrchestrationInput, OrchestrationResult
from pagesmith.repositories.generation import GenerationRepository

WORKSPACE_ID = "test-workspace-456"
GENERATIONS_PATH = f"/workspaces/{WORKSPACE_ID}/generations"
QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789/pagesmith-test-generations"


def _store_generation(description: str = "AI email writer", **kwargs) -> Generation:
    """Persist a generation job directly through the repository."""
    generation = Generation(
        workspace_id=WORKSPACE_ID,
        user_id="test-user-123",
        input=OrchestrationInput(description=description),
        **kwargs,
    )
    return GenerationRepository().create(generation)


class TestStartGeneration:
    """Tests for POST /generations."""

    def test_start_generation_queues_job(self, dynamodb_table, api_gateway_event, mock_sqs, monkeypatch):
        """POST stores a pending job and queues it for the worker."""
        from api.generations import handler

        monkeypatch.setenv("GENERATION_QUEUE_URL", QUEUE_URL)
        event = api_gateway_event(
            method="POST",
            path=GENERATIONS_PATH,
            path_params={"workspace_id": WORKSPACE_ID},
            body={
                "description": "AI email writer for startup founders",
                "wizardData": {"vibe": "techy", "colorTheme": "midnight"},
                "preferences": {"sectionCount": 8},
            },
        )

        response = handler(event, None)

        assert response["statusCode"] == 202
        data = json.loads(response["body"])
        assert data["status"] == "pending"
        assert data["message"] == "Page generation started"

        stored = GenerationRepository().get_by_id(WORKSPACE_ID, data["id"])
        assert stored.user_id == "test-user-123"
        assert stored.input.wizard_data.color_theme == "midnight"
        assert stored.input.requested_section_count == 8

        mock_sqs.send_message.assert_called_once()
        kwargs = mock_sqs.send_message.call_args.kwargs
        assert kwargs["QueueUrl"] == QUEUE_URL
        assert json.loads(kwargs["MessageBody"]) == {
            "type": "generate_page",
            "generation_id": data["id"],
            "workspace_id": WORKSPACE_ID,
        }

    def test_start_generation_without_queue(self, dynamodb_table, api_gateway_event, mock_sqs):
        """Without a queue URL the job is stored but not sent."""
        from api.generations import handler

        event = api_gateway_event(
            method="POST",
            path=GENERATIONS_PATH,
            path_params={"workspace_id": WORKSPACE_ID},
            body={"description": "AI email writer"},
        )

        response = handler(event, None)

        assert response["statusCode"] == 202
        mock_sqs.send_message.assert_not_called()

    def test_missing_description(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(
            method="POST",
            path=GENERATIONS_PATH,
            path_params={"workspace_id": WORKSPACE_ID},
            body={"wizardData": {"vibe": "bold"}},
        )

        response = handler(event, None)

        assert response["statusCode"] == 400
        data = json.loads(response["body"])
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["errors"][0]["field"] == "description"

    def test_section_count_out_of_range(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(
            method="POST",
            path=GENERATIONS_PATH,
            path_params={"workspace_id": WORKSPACE_ID},
            body={"description": "AI email writer", "preferences": {"sectionCount": 30}},
        )

        response = handler(event, None)

        assert response["statusCode"] == 400

    def test_invalid_json(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(
            method="POST",
            path=GENERATIONS_PATH,
            path_params={"workspace_id": WORKSPACE_ID},
            body="{not json",
        )

        response = handler(event, None)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid JSON body"


class TestGetGeneration:
    """Tests for GET /generations/{generation_id}."""

    def test_get_pending(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        generation = _store_generation()
        event = api_gateway_event(
            method="GET",
            path=f"{GENERATIONS_PATH}/{generation.id}",
            path_params={"workspace_id": WORKSPACE_ID, "generation_id": generation.id},
        )

        response = handler(event, None)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])
        assert data["id"] == generation.id
        assert data["status"] == "pending"
        assert data["progress"] is None
        assert data["result"] is None
        assert data["completed_at"] is None

    def test_get_failed(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        generation = Generation(
            workspace_id=WORKSPACE_ID,
            user_id="test-user-123",
            input=OrchestrationInput(description="AI email writer"),
        )
        generation.mark_finished(OrchestrationResult(success=False, error="Bedrock invocation failed"))
        GenerationRepository().create(generation)
        event = api_gateway_event(
            method="GET",
            path_params={"workspace_id": WORKSPACE_ID, "generation_id": generation.id},
        )

        data = json.loads(handler(event, None)["body"])

        assert data["status"] == "failed"
        assert data["error"] == "Bedrock invocation failed"
        assert data["completed_at"] is not None

    def test_get_missing(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(
            method="GET",
            path_params={"workspace_id": WORKSPACE_ID, "generation_id": "nope"},
        )

        response = handler(event, None)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error_code"] == "NOT_FOUND"


class TestListGenerations:
    """Tests for GET /generations."""

    def test_list(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        _store_generation("First page")
        _store_generation("Second page")
        event = api_gateway_event(
            method="GET",
            path=GENERATIONS_PATH,
            path_params={"workspace_id": WORKSPACE_ID},
            query_params={"limit": "1"},
        )

        response = handler(event, None)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])
        assert len(data["items"]) == 1
        assert data["items"][0]["status"] == "pending"
        assert data["pagination"] == {"limit": 1, "has_more": True}

    def test_invalid_limit(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(
            method="GET",
            path_params={"workspace_id": WORKSPACE_ID},
            query_params={"limit": "0"},
        )

        assert handler(event, None)["statusCode"] == 400


class TestAccess:
    """Tests for routing and workspace access."""

    def test_other_workspace_forbidden(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(
            method="GET",
            path_params={"workspace_id": "someone-elses-workspace"},
        )

        response = handler(event, None)

        assert response["statusCode"] == 403
        assert json.loads(response["body"])["error_code"] == "FORBIDDEN"

    def test_missing_user(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        event = api_gateway_event(method="GET", path_params={"workspace_id": WORKSPACE_ID})
        event["requestContext"]["authorizer"] = {}

        assert handler(event, None)["statusCode"] == 401

    def test_missing_workspace(self, dynamodb_table, api_gateway_event):
        from api.generations import handler

        assert handler(api_gateway_event(method="GET"), None)["statusCode"] == 400

    @pytest.mark.parametrize("method", ["PUT", "DELETE"])
    def test_method_not_allowed(self, dynamodb_table, api_gateway_event, method):
        from api.generations import handler

        event = api_gateway_event(method=method, path_params={"workspace_id": WORKSPACE_ID})

        assert handler(event, None)["statusCode"] == 405
