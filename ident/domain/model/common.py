"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    Entities are validated when built and never changed afterwards; unknown
    fields are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
