"""Domain model entities for ident."""

from ident.domain.model.invite import Invite
from ident.domain.model.keys import EphemeralKeyPair, ServerSigningKey

__all__ = [
    "EphemeralKeyPair",
    "Invite",
    "ServerSigningKey",
]
