"""Public key use cases."""

from ident.application.usecase.pubkey.check_public_key import (
    CheckEphemeralPublicKeyUseCase,
    CheckPublicKeyRequest,
    CheckPublicKeyResponse,
    CheckPublicKeyUseCase,
)
from ident.application.usecase.pubkey.get_public_key import (
    GetPublicKeyRequest,
    GetPublicKeyResponse,
    GetPublicKeyUseCase,
)

__all__ = [
    "CheckEphemeralPublicKeyUseCase",
    "CheckPublicKeyRequest",
    "CheckPublicKeyResponse",
    "CheckPublicKeyUseCase",
    "GetPublicKeyRequest",
    "GetPublicKeyResponse",
    "GetPublicKeyUseCase",
]
