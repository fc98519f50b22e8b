"""Public key validity domain service."""

import logfire

from ident.domain.model import ServerSigningKey

from .base import Service
from .invite_service import InviteService


class PublicKeyService(Service):
    """Answers whether a public key is one this service vouches for.

    All checks are reads; none of them block on ledger writes.
    """

    def __init__(
        self, signing_key: ServerSigningKey, invite_service: InviteService
    ) -> None:
        """Initialize public key service.

        Args:
            signing_key: Long-term signing key of this service
            invite_service: Invite ledger service, for issued ephemeral keys
        """
        self.signing_key = signing_key
        self.invite_service = invite_service

    def is_long_term_key_valid(self, public_key: str) -> bool:
        """Check a key against the current long-term public key."""
        valid = public_key == self.signing_key.public_key_base64
        logfire.info("Long-term key validity check", public_key=public_key, valid=valid)
        return valid

    async def is_ephemeral_key_valid(self, public_key: str) -> bool:
        """Check a key is one of the ephemeral keys issued by this service."""
        return await self.invite_service.ephemeral_public_key_exists(public_key)

    def resolve_key_by_id(self, key_id: str) -> str | None:
        """Look up the long-term public key by its ``algorithm:id`` identifier.

        Args:
            key_id: Key identifier, e.g. "ed25519:0"

        Returns:
            Public key as unpadded base64, or None if the ID is unknown
        """
        algorithm, sep, version = key_id.partition(":")
        if (
            not sep
            or algorithm != self.signing_key.algorithm
            or version != self.signing_key.key_id
        ):
            logfire.info("Unknown public key ID", key_id=key_id)
            return None

        return self.signing_key.public_key_base64
