"""Domain value objects for Taskflow."""

from taskflow.domain.value.identifiers import TaskId, UserId
from taskflow.domain.value.types import (
    AuthProvider,
    Email,
    ProviderAssertion,
    TaskStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "TaskId",
    # Types
    "AuthProvider",
    "Email",
    "ProviderAssertion",
    "TaskStatus",
]
