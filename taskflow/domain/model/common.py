"""Shared base for users and tasks."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain record.

    Changes go through ``model_copy(update=...)`` and are persisted by the
    owning repository; instances are never mutated in place.
    """

    model_config = ConfigDict(frozen=True)
