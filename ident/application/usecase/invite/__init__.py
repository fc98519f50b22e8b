"""Invite use cases."""

from ident.application.usecase.invite.sign_ed25519 import (
    SignEd25519Request,
    SignEd25519Response,
    SignEd25519UseCase,
)
from ident.application.usecase.invite.store_invite import (
    StoreInviteRequest,
    StoreInviteResponse,
    StoreInviteUseCase,
)

__all__ = [
    "SignEd25519Request",
    "SignEd25519Response",
    "SignEd25519UseCase",
    "StoreInviteRequest",
    "StoreInviteResponse",
    "StoreInviteUseCase",
]
