"""Utility functions and helpers."""

from pagesmith.utils.responses import success, accepted, error, validation_error, not_found
from pagesmith.utils.auth import get_auth_context, require_workspace_access, AuthContext
from pagesmith.utils.exceptions import (
    PagesmithError,
    NotFoundError,
    ValidationError,
    UnauthorizedError,
    ForbiddenError,
    ConflictError,
    ExternalServiceError,
    GeneratorError,
    GenerationFailedError,
)

__all__ = [
    # Response helpers
    "success",
    "accepted",
    "error",
    "validation_error",
    "not_found",
    # Auth
    "get_auth_context",
    "require_workspace_access",
    "AuthContext",
    # Exceptions
    "PagesmithError",
    "NotFoundError",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "ExternalServiceError",
    "GeneratorError",
    "GenerationFailedError",
]
