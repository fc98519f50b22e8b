"""Repository interfaces for the ident domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from ident.domain.repository.ephemeral_key import EphemeralKeyRepository
from ident.domain.repository.invite import InviteRepository
from ident.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "EphemeralKeyRepository",
    "InviteRepository",
    "UnitOfWork",
]
