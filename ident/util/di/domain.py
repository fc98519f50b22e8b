"""Domain layer DI providers."""

from dishka import Scope, provide

from ident.config import Settings
from ident.domain.model import ServerSigningKey
from ident.domain.repository import (
    EphemeralKeyRepository,
    InviteRepository,
    UnitOfWork,
)
from ident.domain.service import InviteService, KeyService, PublicKeyService
from ident.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Ledger services are REQUEST-scoped to align with the repository/session
    lifecycle. Key material is APP-scoped: it is built once at startup and
    never changes.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_key_service(self, settings: Settings) -> KeyService:
        """Provide signing key domain service.

        Raises:
            UnsupportedAlgorithmError: If the configured algorithm is not ed25519
            ConfigurationError: If the configured seed is invalid
        """
        return KeyService.from_settings(settings)

    @provide(scope=Scope.APP)
    def get_signing_key(self, key_service: KeyService) -> ServerSigningKey:
        """Provide the long-term signing key."""
        return key_service.signing_key

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        ephemeral_key_repository: EphemeralKeyRepository,
        unit_of_work: UnitOfWork,
    ) -> InviteService:
        """Provide invite ledger domain service."""
        return InviteService(
            invite_repository=invite_repository,
            ephemeral_key_repository=ephemeral_key_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_public_key_service(
        self, signing_key: ServerSigningKey, invite_service: InviteService
    ) -> PublicKeyService:
        """Provide public key validity domain service."""
        return PublicKeyService(signing_key=signing_key, invite_service=invite_service)
