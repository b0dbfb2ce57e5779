"""Repository classes for DynamoDB data access."""

from pagesmith.repositories.base import BaseRepository
from pagesmith.repositories.generation import GenerationRepository

__all__ = [
    "BaseRepository",
    "GenerationRepository",
]
