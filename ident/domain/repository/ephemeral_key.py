"""Ephemeral public key repository interface."""

from abc import ABC, abstractmethod


class EphemeralKeyRepository(ABC):
    """Append-only set of every ephemeral public key ever issued.

    Validity checks go through this set so they never need the invite token.
    """

    @abstractmethod
    async def add(self, public_key: str) -> None:
        """Record an issued ephemeral public key.

        Args:
            public_key: Unpadded base64 public key

        Raises:
            DuplicateKeyError: If the key was already recorded
            StorageError: On any other storage failure
        """
        pass

    @abstractmethod
    async def exists(self, public_key: str) -> bool:
        """Check whether a public key was issued by this service.

        Args:
            public_key: Unpadded base64 public key

        Returns:
            True if the key was issued, False otherwise
        """
        pass
