"""Application layer DI providers."""

from dishka import Scope, provide

from ident.application.usecase.invite import SignEd25519UseCase, StoreInviteUseCase
from ident.application.usecase.pubkey import (
    CheckEphemeralPublicKeyUseCase,
    CheckPublicKeyUseCase,
    GetPublicKeyUseCase,
)
from ident.config import Settings
from ident.domain.service import (
    InviteNotifier,
    InviteService,
    KeyService,
    PublicKeyService,
)
from ident.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_store_invite_use_case(
        self,
        key_service: KeyService,
        invite_service: InviteService,
        notifier: InviteNotifier,
        settings: Settings,
    ) -> StoreInviteUseCase:
        """Provide store invite use case."""
        return StoreInviteUseCase(
            key_service=key_service,
            invite_service=invite_service,
            notifier=notifier,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_sign_ed25519_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> SignEd25519UseCase:
        """Provide sign ed25519 use case."""
        return SignEd25519UseCase(invite_service=invite_service, settings=settings)

    # Public key use cases
    @provide(scope=Scope.REQUEST)
    def get_check_public_key_use_case(
        self, public_key_service: PublicKeyService
    ) -> CheckPublicKeyUseCase:
        """Provide long-term key validity use case."""
        return CheckPublicKeyUseCase(public_key_service=public_key_service)

    @provide(scope=Scope.REQUEST)
    def get_check_ephemeral_public_key_use_case(
        self, public_key_service: PublicKeyService
    ) -> CheckEphemeralPublicKeyUseCase:
        """Provide ephemeral key validity use case."""
        return CheckEphemeralPublicKeyUseCase(public_key_service=public_key_service)

    @provide(scope=Scope.REQUEST)
    def get_get_public_key_use_case(
        self, public_key_service: PublicKeyService
    ) -> GetPublicKeyUseCase:
        """Provide public key lookup use case."""
        return GetPublicKeyUseCase(public_key_service=public_key_service)
