"""Invite repository interface."""

from abc import ABC, abstractmethod

from ident.domain.model.invite import Invite
from ident.domain.value import InviteToken


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to store

        Returns:
            The stored invite

        Raises:
            DuplicateTokenError: If an invite with the same token exists
            StorageError: On any other storage failure
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> Invite | None:
        """Find an invite by token.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise

        Raises:
            StorageError: On storage failure (never for a missing invite)
        """
        pass
