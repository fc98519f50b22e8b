"""In-memory repository implementations for testing."""

from .ephemeral_key import InMemoryEphemeralKeyRepository
from .invite import InMemoryInviteRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryEphemeralKeyRepository",
    "InMemoryInviteRepository",
    "InMemoryUnitOfWork",
]
