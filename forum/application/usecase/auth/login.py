"""Login use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import BootstrapService
from forum.domain.value import ExternalIdentity


class LoginRequest(BaseModel):
    """Login request carrying an identity already verified by the provider."""

    provider_user_id: str
    display_name: str
    avatar_url: str | None = None


class LoginResponse(BaseModel):
    """Login response."""

    principal_id: str
    display_name: str
    avatar_url: str | None
    rank: str
    is_global_admin: bool


class LoginUseCase(BaseUseCase):
    """Use case for logging in a principal after external authentication."""

    def __init__(self, bootstrap_service: BootstrapService) -> None:
        """Initialize login use case.

        Args:
            bootstrap_service: Admin bootstrap domain service
        """
        self.bootstrap_service = bootstrap_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Create or refresh the principal and resolve its global rank.

        Args:
            request: Verified identity from the authentication provider

        Returns:
            Principal details with resolved rank
        """
        identity = ExternalIdentity(
            provider_user_id=request.provider_user_id,
            display_name=request.display_name,
            avatar_url=request.avatar_url,
        )
        principal = await self.bootstrap_service.bootstrap(identity)

        return LoginResponse(
            principal_id=str(principal.id),
            display_name=principal.display_name,
            avatar_url=principal.avatar_url,
            rank=principal.rank.name,
            is_global_admin=principal.is_global_admin,
        )
