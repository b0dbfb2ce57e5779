"""API response helper functions."""

import json
import os
from datetime import datetime
from typing import Any

from pydantic import BaseModel as PydanticBaseModel

# Localhost origins are also allowed in dev
_ALLOWED_ORIGIN = os.environ.get("CORS_ALLOWED_ORIGIN", "https://dev.pagesmith.app")
_STAGE = os.environ.get("STAGE", "dev")


def _get_cors_origin(request_origin: str | None = None) -> str:
    """Get the appropriate CORS origin for the response."""
    if _STAGE == "dev" and request_origin:
        if request_origin.startswith("http://localhost:"):
            return request_origin

    return _ALLOWED_ORIGIN


def get_cors_headers(request_origin: str | None = None) -> dict:
    """Get CORS headers with the appropriate origin."""
    return {
        "Access-Control-Allow-Origin": _get_cors_origin(request_origin),
        "Access-Control-Allow-Headers": "Content-Type,Authorization,X-Amz-Date,X-Api-Key,X-Amz-Security-Token",
        "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
        "Access-Control-Allow-Credentials": "true",
        "Content-Type": "application/json",
    }


CORS_HEADERS = get_cors_headers()


def _json_serializer(obj: Any) -> Any:
    """JSON serializer for objects not serializable by default."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, PydanticBaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def _serialize(data: Any) -> str:
    """Serialize data to JSON string."""
    return json.dumps(data, default=_json_serializer)


def success(data: Any, status_code: int = 200) -> dict:
    """Create a successful API response.

    Args:
        data: Response data (dict, list, or Pydantic model).
        status_code: HTTP status code (default 200).

    Returns:
        API Gateway response dict.
    """
    if isinstance(data, PydanticBaseModel):
        body = data.model_dump(mode="json", by_alias=True)
    else:
        body = data

    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": _serialize(body),
    }


def accepted(data: Any) -> dict:
    """Create a 202 Accepted response for work handed to a background worker."""
    return success(data, status_code=202)


def error(
    message: str,
    status_code: int = 500,
    error_code: str | None = None,
    details: dict | None = None,
) -> dict:
    """Create an error API response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        error_code: Machine-readable error code.
        details: Additional error details.

    Returns:
        API Gateway response dict.
    """
    body: dict[str, Any] = {
        "error": True,
        "message": message,
    }

    if error_code:
        body["error_code"] = error_code
    if details:
        body["details"] = details

    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": _serialize(body),
    }


def validation_error(errors: list[dict]) -> dict:
    """Create a validation error response."""
    return error(
        message="Validation failed",
        status_code=400,
        error_code="VALIDATION_ERROR",
        details={"errors": errors},
    )


def not_found(resource_type: str, resource_id: str) -> dict:
    """Create a 404 Not Found response.

    Args:
        resource_type: Type of resource (e.g., "Generation").
        resource_id: ID of the resource.

    Returns:
        API Gateway response dict.
    """
    return error(
        message=f"{resource_type} with ID '{resource_id}' not found",
        status_code=404,
        error_code="NOT_FOUND",
        details={"resource_type": resource_type, "resource_id": resource_id},
    )


def forbidden(message: str = "You don't have permission to perform this action") -> dict:
    """Create a 403 Forbidden response."""
    return error(
        message=message,
        status_code=403,
        error_code="FORBIDDEN",
    )
