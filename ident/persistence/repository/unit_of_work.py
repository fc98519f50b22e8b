"""SQL implementation of the unit of work."""

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ident.domain.error import StorageError
from ident.domain.repository import UnitOfWork


class SqlUnitOfWork(UnitOfWork):
    """Commits the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logfire.error("Commit failed", error=str(e))
            await self.session.rollback()
            raise StorageError(f"Couldn't commit transaction: {e}") from e
