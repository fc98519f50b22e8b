"""SQL implementation of EphemeralKey repository."""

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ident.domain.error import DuplicateKeyError, StorageError
from ident.domain.repository import EphemeralKeyRepository
from ident.persistence.tables import ephemeral_public_keys_table


class SqlEphemeralKeyRepository(EphemeralKeyRepository):
    """SQLAlchemy implementation of EphemeralKeyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, public_key: str) -> None:
        """Record an issued ephemeral public key.

        A failed insert rolls back the whole transaction of the request, so
        the invite stored alongside the key is discarded too.
        """
        stmt = insert(ephemeral_public_keys_table).values(public_key=public_key)
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateKeyError(public_key) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"Couldn't record ephemeral public key: {e}") from e

    async def exists(self, public_key: str) -> bool:
        """Check whether a public key was issued."""
        stmt = (
            select(func.count())
            .select_from(ephemeral_public_keys_table)
            .where(ephemeral_public_keys_table.c.public_key == public_key)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Couldn't look up ephemeral public key: {e}") from e
        return (result.scalar() or 0) > 0
