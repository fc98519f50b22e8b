"""Store invite use case."""

import secrets
import string
from typing import Any

import logfire
from pydantic import BaseModel, field_validator

from ident.application.usecase.base import BaseUseCase
from ident.config import Settings
from ident.domain.error import (
    InvalidEmailError,
    InvalidParamError,
    UnsupportedMediumError,
)
from ident.domain.model import Invite
from ident.domain.service import (
    InviteNotification,
    InviteNotifier,
    InviteService,
    KeyService,
)
from ident.domain.value import (
    InviteToken,
    Medium,
    is_valid_email_address,
    redact_email,
    split_id,
)
from ident.domain.value.types import SUPPORTED_MEDIUMS

TOKEN_LENGTH = 128
TOKEN_ALPHABET = string.ascii_letters + string.digits


def generate_invite_token() -> InviteToken:
    """Generate a 128-character token from the OS CSPRNG."""
    return InviteToken(
        root="".join(secrets.choice(TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH))
    )


class StoreInviteRequest(BaseModel):
    """Request to store a third-party invite."""

    medium: str = ""
    address: str = ""
    room_id: str = ""
    sender: str = ""

    # Only used to render the notification
    room_alias: str | None = None
    room_avatar_url: str | None = None
    room_join_rules: str | None = None
    room_name: str | None = None
    sender_display_name: str | None = None
    sender_avatar_url: str | None = None

    @field_validator("medium", "address", "room_id", "sender", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat JSON null like an absent field."""
        return "" if v is None else v


class PublicKeyItem(BaseModel):
    """Public key with the URL a relying party can use to check it."""

    public_key: str
    key_validity_url: str


class StoreInviteResponse(BaseModel):
    """Response after storing an invite."""

    token: str
    public_key: str  # Long-term public key
    public_keys: list[PublicKeyItem]
    display_name: str  # Redacted address


class StoreInviteUseCase(BaseUseCase[StoreInviteRequest, StoreInviteResponse]):
    """Use case issuing a third-party invite.

    The notification is sent before anything is persisted: if delivery fails
    nothing is stored, so there is never a stored invite nobody was told about.
    """

    def __init__(
        self,
        key_service: KeyService,
        invite_service: InviteService,
        notifier: InviteNotifier,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            key_service: Signing key domain service
            invite_service: Invite ledger domain service
            notifier: Invite notification adapter
            settings: Application settings
        """
        self.key_service = key_service
        self.invite_service = invite_service
        self.notifier = notifier
        self.settings = settings

    async def execute(self, request: StoreInviteRequest) -> StoreInviteResponse:
        """Execute store invite use case.

        Args:
            request: Store invite request

        Returns:
            Token, long-term and ephemeral public keys with validity URLs

        Raises:
            UnsupportedMediumError: If the medium is not email
            InvalidEmailError: If the address is not a valid email address
            InvalidParamError: If the room ID or sender ID is malformed
            NotifierError: If the invite could not be delivered
            StorageError: If the invite could not be stored
        """
        with logfire.span(
            "store_invite",
            medium=request.medium,
            room_id=request.room_id,
            sender=request.sender,
        ):
            self._validate(request)

            key_pair = self.key_service.generate_ephemeral_key_pair()
            token = generate_invite_token()

            await self.notifier.deliver(
                InviteNotification(
                    medium=request.medium,
                    address=request.address,
                    token=token.root,
                    ephemeral_private_key=key_pair.private_key_base64,
                    room_id=request.room_id,
                    sender=request.sender,
                    base_url=self.settings.ident.base_url,
                    room_alias=request.room_alias,
                    room_avatar_url=request.room_avatar_url,
                    room_join_rules=request.room_join_rules,
                    room_name=request.room_name,
                    sender_display_name=request.sender_display_name,
                    sender_avatar_url=request.sender_avatar_url,
                )
            )

            invite = await self.invite_service.store_invite(
                Invite(
                    token=token,
                    medium=Medium(request.medium),
                    address=request.address,
                    room_id=request.room_id,
                    sender=request.sender,
                    ephemeral_public_key=key_pair.public_key_base64,
                )
            )

            return self._build_response(invite)

    def _validate(self, request: StoreInviteRequest) -> None:
        """Check the request before any key is minted or anything is stored."""
        if request.medium not in SUPPORTED_MEDIUMS:
            logfire.warn("Unsupported medium", medium=request.medium)
            raise UnsupportedMediumError(request.medium)

        if request.medium == Medium.EMAIL.value and not is_valid_email_address(
            request.address
        ):
            logfire.warn("Invalid email address", address=request.address)
            raise InvalidEmailError(request.address)

        try:
            split_id("!", request.room_id)
        except ValueError:
            raise InvalidParamError("Invalid room ID")

        try:
            split_id("@", request.sender)
        except ValueError:
            raise InvalidParamError("Invalid sender ID")

    def _build_response(self, invite: Invite) -> StoreInviteResponse:
        ident = self.settings.ident
        server_public_key = self.key_service.server_public_key

        return StoreInviteResponse(
            token=invite.token.root,
            public_key=server_public_key,
            public_keys=[
                PublicKeyItem(
                    public_key=server_public_key,
                    key_validity_url=ident.pubkey_validity_url,
                ),
                PublicKeyItem(
                    public_key=invite.ephemeral_public_key,
                    key_validity_url=ident.ephemeral_pubkey_validity_url,
                ),
            ],
            display_name=redact_email(invite.address),
        )
