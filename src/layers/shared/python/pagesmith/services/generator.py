"""Text generator used by every pipeline phase.

Phases only depend on ``Generator.generate``; the JSON contracts they need
are instructions inside the system prompt, never enforced by the transport.
"""

import json
import os
from abc import ABC, abstractmethod
from typing import Any

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from pagesmith.models.orchestration import TokenUsage
from pagesmith.utils.exceptions import GeneratorError

logger = structlog.get_logger()

# Cross-region inference profile (us. prefix)
DEFAULT_MODEL = "us.anthropic.claude-sonnet-4-5-20250929-v1:0"

ANTHROPIC_VERSION = "bedrock-2023-05-31"

# Keeps a hung request from holding the Lambda until its own timeout
BEDROCK_CONFIG = Config(
    read_timeout=60,
    connect_timeout=10,
    retries={
        "max_attempts": 2,
        "mode": "adaptive",
    },
)


class GeneratorResponse(BaseModel):
    """Generated text plus the tokens it cost."""

    text: str
    usage: TokenUsage = TokenUsage()


class Generator(ABC):
    """A large language model behind a single text-in, text-out call."""

    @abstractmethod
    def generate(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> GeneratorResponse:
        """Generate a completion.

        Raises:
            GeneratorError: If the underlying service call fails.
        """


class BedrockGenerator(Generator):
    """Claude on Amazon Bedrock via the messages API."""

    def __init__(self, model_id: str | None = None, client: Any = None):
        self.model_id = model_id or os.environ.get("BEDROCK_MODEL_ID", DEFAULT_MODEL)
        self.client = client or boto3.client("bedrock-runtime", config=BEDROCK_CONFIG)

    def generate(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ) -> GeneratorResponse:
        request_body = {
            "anthropic_version": ANTHROPIC_VERSION,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "system": system_prompt,
            "messages": [{"role": "user", "content": user_message}],
        }

        try:
            response = self.client.invoke_model(
                modelId=self.model_id,
                body=json.dumps(request_body),
                contentType="application/json",
                accept="application/json",
            )
            response_body = json.loads(response["body"].read())
        except (BotoCoreError, ClientError) as e:
            logger.error("Bedrock invocation failed", model=self.model_id, error=str(e))
            raise GeneratorError("Bedrock invocation failed", original_error=str(e)) from e

        try:
            text = response_body["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected Bedrock response shape", model=self.model_id)
            raise GeneratorError("Bedrock returned no text content", original_error=str(e)) from e

        usage = response_body.get("usage") or {}
        return GeneratorResponse(
            text=text,
            usage=TokenUsage(
                input_tokens=usage.get("input_tokens", 0),
                output_tokens=usage.get("output_tokens", 0),
            ),
        )
