"""SQL implementation of Invite repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ident.domain.error import DuplicateTokenError, StorageError
from ident.domain.model import Invite
from ident.domain.repository import InviteRepository
from ident.domain.value import InviteToken
from ident.persistence.mappers import invite_to_dict, row_to_invite
from ident.persistence.tables import invites_table


class SqlInviteRepository(InviteRepository):
    """SQLAlchemy implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, invite: Invite) -> Invite:
        """Insert an invite.

        The token is the primary key: a collision is rejected by the database
        itself, never by a read-before-write check. A failed insert rolls back
        the whole transaction of the request.

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        stmt = insert(invites_table).values(**invite_to_dict(invite))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateTokenError(invite.token.root) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"Couldn't store invite: {e}") from e
        return invite

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token.

        Args:
            token: Invite token to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.token == token.root)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Couldn't look up invite: {e}") from e
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None
