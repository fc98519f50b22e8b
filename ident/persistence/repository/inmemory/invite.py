"""In-memory invite repository for testing."""

import asyncio
from typing import Optional

from ident.domain.error import DuplicateTokenError
from ident.domain.model.invite import Invite
from ident.domain.repository.invite import InviteRepository
from ident.domain.value import InviteToken


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: dict[str, Invite] = {}
        self._lock = asyncio.Lock()

    async def save(self, invite: Invite) -> Invite:
        """Insert an invite.

        Raises:
            DuplicateTokenError: If an invite with the same token exists
        """
        async with self._lock:
            if invite.token.root in self._invites:
                raise DuplicateTokenError(invite.token.root)
            self._invites[invite.token.root] = invite
        return invite

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token."""
        return self._invites.get(token.root)
