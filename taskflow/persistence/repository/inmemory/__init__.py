"""In-memory repository implementations for testing."""

from .task import InMemoryTaskRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryTaskRepository",
    "InMemoryUserRepository",
]
