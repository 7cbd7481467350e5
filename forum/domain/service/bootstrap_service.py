"""Admin bootstrap: rank assignment on every successful login."""

import logfire

from forum.config import AuthSettings
from forum.domain.model import Principal
from forum.domain.repository import PrincipalRepository
from forum.domain.value import ExternalIdentity, GlobalRank

from .base import Service


class BootstrapService(Service):
    """Domain service creating or refreshing principals on login.

    The first principal ever to log in, and the configured designated
    admin, are elevated to global admin. Ranks are merged by maximum so a
    login never lowers an existing rank.
    """

    def __init__(
        self,
        principal_repository: PrincipalRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize bootstrap service.

        Args:
            principal_repository: Principal repository
            auth_settings: Authentication settings (designated admin id)
        """
        self.principal_repository = principal_repository
        self.auth_settings = auth_settings

    def _is_designated_admin(self, identity: ExternalIdentity) -> bool:
        designated = self.auth_settings.designated_admin_id
        return bool(designated) and designated == identity.provider_user_id

    async def bootstrap(self, identity: ExternalIdentity) -> Principal:
        """Create or refresh the principal for a verified external identity.

        The admin count and the upsert are two separate statements, so two
        simultaneous first logins can both become admin. The upsert itself
        is atomic and keyed by external id.

        Args:
            identity: Identity delivered by the authentication provider

        Returns:
            Stored principal with its resolved global rank
        """
        with logfire.span(
            "bootstrap_service.bootstrap",
            provider_user_id=identity.provider_user_id,
        ):
            admin_count = await self.principal_repository.count_with_rank_at_least(
                GlobalRank.ADMIN
            )
            designated = self._is_designated_admin(identity)
            should_be_admin = designated or admin_count == 0

            rank = GlobalRank.ADMIN if should_be_admin else GlobalRank.MEMBER
            principal = await self.principal_repository.upsert_identity(identity, rank)

            if should_be_admin:
                logfire.info(
                    "Principal elevated to global admin on login",
                    principal_id=str(principal.id),
                    designated=designated,
                    first_admin=admin_count == 0,
                )
            logfire.info(
                "Principal logged in",
                principal_id=str(principal.id),
                rank=principal.rank.name,
            )
            return principal
