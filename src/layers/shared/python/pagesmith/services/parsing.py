"""Parsing helpers for generator JSON output.

Generator output is never trusted: every phase parses it into a
``ParseResult`` and builds a fallback when parsing fails.
"""

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")

# Length of raw output kept in parse-failure logs
LOG_EXCERPT_LENGTH = 500


class ContractParseError(Exception):
    """Generator output did not satisfy the phase's JSON contract."""

    def __init__(self, phase: str, message: str, raw: str = ""):
        self.phase = phase
        self.message = message
        self.raw = raw
        super().__init__(f"{phase}: {message}")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the contract error that prevented it."""

    value: T | None = None
    error: ContractParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, phase: str, message: str, raw: str = "") -> "ParseResult[T]":
        return cls(error=ContractParseError(phase, message, raw))

    def unwrap_or(self, fallback: T) -> T:
        return self.value if self.error is None else fallback


def clean_json_response(text: str) -> str:
    """Strip markdown code fences from a model response."""
    text = text.strip()
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    if "```" in text:
        start = text.find("```") + 3
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    return text


def parse_json_object(text: str, phase: str) -> ParseResult[dict[str, Any]]:
    """Parse a response that must be a single JSON object.

    Args:
        text: Raw generator text.
        phase: Phase name recorded on the error.

    Returns:
        The decoded object, or a failure describing why it was rejected.
    """
    cleaned = clean_json_response(text or "")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        return ParseResult.failure(phase, f"Invalid JSON: {e}", text)

    if not isinstance(data, dict):
        return ParseResult.failure(phase, f"Expected JSON object, got {type(data).__name__}", text)

    return ParseResult.success(data)


def log_parse_failure(error: ContractParseError) -> None:
    """Warn about a rejected response, keeping only an excerpt of it."""
    logger.warning(
        "Generator response rejected, using fallback",
        phase=error.phase,
        error=error.message,
        response=error.raw[:LOG_EXCERPT_LENGTH],
    )


def string_list(value: Any) -> list[str]:
    """Coerce a JSON value into a list of non-empty strings."""
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


def optional_string(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
