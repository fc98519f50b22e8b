"""Invite domain service."""

import logfire

from ident.domain.error import DuplicateTokenError
from ident.domain.model.invite import Invite
from ident.domain.repository import (
    EphemeralKeyRepository,
    InviteRepository,
    UnitOfWork,
)
from ident.domain.value import InviteToken

from .base import Service


def _redact_token(token: str) -> str:
    return token[:8] + "..."


class InviteService(Service):
    """Domain service for the invite ledger."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        ephemeral_key_repository: EphemeralKeyRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            ephemeral_key_repository: Issued ephemeral public key repository
            unit_of_work: Commits the ledger writes
        """
        self.invite_repository = invite_repository
        self.ephemeral_key_repository = ephemeral_key_repository
        self.unit_of_work = unit_of_work

    async def store_invite(self, invite: Invite) -> Invite:
        """Persist a new invite and record its ephemeral public key.

        Both writes are committed together before this returns, so the token
        and the key are visible to other requests as soon as the caller hears
        of them. On failure neither is stored.

        Args:
            invite: Invite to store

        Returns:
            Stored invite

        Raises:
            DuplicateTokenError: If the token is already used
            DuplicateKeyError: If the ephemeral key was already recorded
            StorageError: On any other storage failure, including the commit
        """
        with logfire.span(
            "invite_service.store_invite",
            token=_redact_token(invite.token.root),
            medium=invite.medium.value,
            room_id=invite.room_id,
            sender=invite.sender,
        ):
            try:
                saved = await self.invite_repository.save(invite)
            except DuplicateTokenError:
                logfire.error(
                    "Invite token collision", token=_redact_token(invite.token.root)
                )
                raise

            await self.ephemeral_key_repository.add(invite.ephemeral_public_key)
            await self.unit_of_work.commit()

            logfire.info(
                "Invite stored",
                token=_redact_token(invite.token.root),
                ephemeral_public_key=invite.ephemeral_public_key,
            )
            return saved

    async def find_invite_by_token(self, token: InviteToken) -> Invite | None:
        """Get invite by token.

        Args:
            token: Invite token

        Returns:
            Invite if found, None otherwise
        """
        with logfire.span(
            "invite_service.find_invite_by_token", token=_redact_token(token.root)
        ):
            invite = await self.invite_repository.find_by_token(token)
            if invite:
                logfire.info(
                    "Invite found", token=_redact_token(token.root), sender=invite.sender
                )
            else:
                logfire.warn("Invite not found", token=_redact_token(token.root))
            return invite

    async def ephemeral_public_key_exists(self, public_key: str) -> bool:
        """Check whether an ephemeral public key was issued by this service.

        Args:
            public_key: Unpadded base64 public key

        Returns:
            True if issued, False otherwise
        """
        with logfire.span("invite_service.ephemeral_public_key_exists"):
            exists = await self.ephemeral_key_repository.exists(public_key)
            logfire.info(
                "Ephemeral key existence check", public_key=public_key, exists=exists
            )
            return exists
