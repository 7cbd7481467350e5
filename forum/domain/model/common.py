"""Shared configuration for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity; changes go through ``model_copy(update=...)``.

    Unknown fields are rejected so a stray column in a row mapping fails
    loudly instead of being dropped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
