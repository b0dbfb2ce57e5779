"""Pytest configuration and fixtures."""

import json
import os
import re
import pytest
from unittest.mock import MagicMock, patch

# Set environment variables before imports
os.environ["TABLE_NAME"] = "pagesmith-test"
os.environ["STAGE"] = "test"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ.pop("GENERATION_QUEUE_URL", None)

from pagesmith.models.orchestration import TokenUsage  # noqa: E402
from pagesmith.services.generator import Generator, GeneratorResponse  # noqa: E402

LIST_TYPES = {"features", "testimonials", "pricing", "faq", "stats", "process"}

_SECTION_TYPE = re.compile(r"Generate a (\S+) section for this landing page")


def good_section(section_type: str, heading: str = "Send Smarter Emails You Will Love") -> dict:
    """A section response that passes every quality check."""
    section = {
        "id": "abc1234",
        "type": section_type,
        "content": {
            "heading": heading,
            "subheading": "Founders reply to every lead without writing a single draft",
            "buttonText": "Start Free Trial",
            "buttonLink": "#signup",
            "backgroundColor": "#0a0a0a",
            "textColor": "#ffffff",
            "accentColor": "#D6FC51",
        },
    }
    if section_type in LIST_TYPES:
        section["items"] = [
            {"id": f"itm000{i}", "title": title, "description": f"{title} for busy founders"}
            for i, title in enumerate(["Smart Drafts", "Inbox Triage", "Reply Tracking"])
        ]
    return section


DEFAULT_INTENT = {
    "productType": "saas",
    "targetAudience": "startup founders",
    "primaryValueProp": "Write sales emails 10x faster with AI",
    "secondaryValueProps": ["Never miss a follow-up"],
    "tone": "professional",
    "urgencyLevel": "medium",
    "pricePoint": "medium",
    "keywords": ["email", "ai", "founders"],
}

DEFAULT_BLUEPRINT = {
    "copyFramework": "AIDA",
    "frameworkRationale": "Founders respond to clear benefits",
    "sectionSequence": [
        {"type": "header", "purpose": "navigation"},
        {"type": "hero", "purpose": "attention", "copyGuidelines": "Lead with speed"},
        {"type": "features", "purpose": "interest", "keyElements": ["drafts", "triage"]},
        {"type": "testimonials", "purpose": "desire"},
        {"type": "cta", "purpose": "action"},
        {"type": "footer", "purpose": "footer"},
    ],
    "targetSectionCount": 6,
}


class ScriptedGenerator(Generator):
    """Generator double that answers each pipeline phase from a script.

    A scripted answer is raw text, a dict (sent as JSON) or an exception
    (raised). Section answers are keyed by section type; a list is consumed
    one call at a time and its last entry repeats.
    """

    def __init__(self, intent=None, blueprint=None, sections=None, usage=(100, 50)):
        self.intent = DEFAULT_INTENT if intent is None else intent
        self.blueprint = DEFAULT_BLUEPRINT if blueprint is None else blueprint
        self.sections = dict(sections or {})
        self.usage = TokenUsage(input_tokens=usage[0], output_tokens=usage[1])
        self.calls = []

    def generate(self, system_prompt, user_message, max_tokens=4096, temperature=0.7):
        self.calls.append(
            {"system_prompt": system_prompt, "user_message": user_message, "max_tokens": max_tokens}
        )

        if system_prompt.startswith("You are an expert at understanding"):
            answer = self.intent
        elif system_prompt.startswith("You are a landing page architect"):
            answer = self.blueprint
        else:
            section_type = _SECTION_TYPE.search(user_message).group(1)
            answer = self._section_answer(section_type)

        if isinstance(answer, Exception):
            raise answer
        text = answer if isinstance(answer, str) else json.dumps(answer)
        return GeneratorResponse(text=text, usage=self.usage)

    def _section_answer(self, section_type):
        answer = self.sections.get(section_type)
        if isinstance(answer, list):
            return answer.pop(0) if len(answer) > 1 else answer[0]
        if answer is None:
            return good_section(section_type)
        return answer

    def calls_for(self, section_type):
        marker = f"Generate a {section_type} section"
        return [c for c in self.calls if marker in c["user_message"]]


@pytest.fixture
def scripted_generator():
    """Factory for phase-scripted generators."""
    def _create(**kwargs):
        return ScriptedGenerator(**kwargs)

    return _create


@pytest.fixture
def good_section_response():
    return good_section


@pytest.fixture
def catalog():
    from pagesmith.catalog import default_catalog

    return default_catalog()


@pytest.fixture
def sample_intent():
    """A SaaS intent as the analysis phase would produce it."""
    from pagesmith.models.intent import PageIntent

    return PageIntent(
        product_type="saas",
        target_audience="startup founders",
        primary_value_prop="Write sales emails 10x faster with AI",
        secondary_value_props=["Never miss a follow-up"],
        keywords=["email", "ai", "founders"],
    )


@pytest.fixture
def sample_blueprint(catalog):
    """A small dark-theme AIDA blueprint."""
    from pagesmith.models.blueprint import PageBlueprint, SectionPlan

    return PageBlueprint(
        copy_framework="AIDA",
        framework_rationale="Founders respond to clear benefits",
        section_sequence=[
            SectionPlan(type="hero", variant="animated-preview", purpose="attention", tier="premium",
                        effects=["tilt-card"], background_effect="shooting-stars"),
            SectionPlan(type="features", variant="bento", purpose="interest", tier="premium"),
            SectionPlan(type="testimonials", variant="scrolling", purpose="desire", tier="standard"),
            SectionPlan(type="cta", variant="centered", purpose="action", tier="standard"),
        ],
        color_strategy=catalog.color_strategy("dark"),
        typography=catalog.typography("inter-inter"),
        target_section_count=4,
    )


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_table(aws_credentials):
    """Create mocked DynamoDB table."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName="pagesmith-test",
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()

        yield table


@pytest.fixture
def api_gateway_event():
    """Create a sample API Gateway event."""
    def _create_event(
        method: str = "GET",
        path: str = "/",
        path_params: dict = None,
        query_params: dict = None,
        body: dict = None,
        user_id: str = "test-user-123",
        workspace_ids: list = None,
    ):
        workspace_ids = workspace_ids or ["test-workspace-456"]

        return {
            "httpMethod": method,
            "path": path,
            "pathParameters": path_params or {},
            "queryStringParameters": query_params or {},
            "body": body if isinstance(body, str) else (
                json.dumps(body) if body else None
            ),
            "headers": {
                "Authorization": "Bearer test-token",
                "Content-Type": "application/json",
            },
            "requestContext": {
                "authorizer": {
                    "userId": user_id,
                    "email": "test@example.com",
                    "workspaceIds": ",".join(workspace_ids),
                    "isAdmin": "false",
                },
            },
        }

    return _create_event


@pytest.fixture
def mock_sqs():
    """Mock SQS client."""
    with patch("boto3.client") as mock_client:
        mock_sqs = MagicMock()
        mock_client.return_value = mock_sqs

        mock_sqs.send_message.return_value = {
            "MessageId": "test-message-id",
        }

        yield mock_sqs


class LambdaContext:
    """Mock Lambda context."""

    def __init__(self):
        self.function_name = "test-function"
        self.memory_limit_in_mb = 128
        self.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789:function:test"
        self.aws_request_id = "test-request-id"

    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context."""
    return LambdaContext()
