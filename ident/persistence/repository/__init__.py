"""SQL repository implementations."""

from ident.persistence.repository.ephemeral_key import SqlEphemeralKeyRepository
from ident.persistence.repository.invite import SqlInviteRepository
from ident.persistence.repository.unit_of_work import SqlUnitOfWork

__all__ = [
    "SqlEphemeralKeyRepository",
    "SqlInviteRepository",
    "SqlUnitOfWork",
]
