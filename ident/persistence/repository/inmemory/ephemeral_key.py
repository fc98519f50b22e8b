"""In-memory ephemeral key repository for testing."""

import asyncio

from ident.domain.error import DuplicateKeyError
from ident.domain.repository.ephemeral_key import EphemeralKeyRepository


class InMemoryEphemeralKeyRepository(EphemeralKeyRepository):
    """In-memory implementation of EphemeralKeyRepository for testing."""

    def __init__(self) -> None:
        self._keys: set[str] = set()
        self._lock = asyncio.Lock()

    async def add(self, public_key: str) -> None:
        """Record an issued ephemeral public key.

        Raises:
            DuplicateKeyError: If the key was already recorded
        """
        async with self._lock:
            if public_key in self._keys:
                raise DuplicateKeyError(public_key)
            self._keys.add(public_key)

    async def exists(self, public_key: str) -> bool:
        """Check whether a public key was issued."""
        return public_key in self._keys
