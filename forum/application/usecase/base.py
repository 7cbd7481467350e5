"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from forum.domain.value import PrincipalId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def actor_id_from(value: str | None) -> PrincipalId | None:
    """Parse the acting principal id of a request (None for anonymous)."""
    return PrincipalId(UUID(value)) if value else None
