"""Principal use cases."""

from .follow import FollowRequest, FollowResponse, FollowUseCase, UnfollowUseCase
from .search import (
    PrincipalItem,
    SearchPrincipalsRequest,
    SearchPrincipalsResponse,
    SearchPrincipalsUseCase,
)

__all__ = [
    "FollowRequest",
    "FollowResponse",
    "FollowUseCase",
    "PrincipalItem",
    "SearchPrincipalsRequest",
    "SearchPrincipalsResponse",
    "SearchPrincipalsUseCase",
    "UnfollowUseCase",
]
