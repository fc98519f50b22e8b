"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Makes the writes of the current request durable.

    Repositories only stage their writes. Nothing they stage is visible to
    other requests until ``commit`` returns.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit the staged writes.

        Raises:
            StorageError: If the writes could not be committed; they are
                discarded
        """
        pass
