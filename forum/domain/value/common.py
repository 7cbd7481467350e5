"""Shared configuration for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value, equal to any other with the same fields.

    Input strings are stripped of surrounding whitespace on validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)
