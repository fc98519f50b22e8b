"""Get public key use case."""

from pydantic import BaseModel

from ident.application.usecase.base import BaseUseCase
from ident.domain.error import NotFoundError
from ident.domain.service import PublicKeyService


class GetPublicKeyRequest(BaseModel):
    """Get public key request."""

    key_id: str  # "algorithm:id", e.g. "ed25519:0"


class GetPublicKeyResponse(BaseModel):
    """Get public key response."""

    public_key: str


class GetPublicKeyUseCase(BaseUseCase[GetPublicKeyRequest, GetPublicKeyResponse]):
    """Use case resolving a key ID to this service's public key."""

    def __init__(self, public_key_service: PublicKeyService) -> None:
        """Initialize get public key use case.

        Args:
            public_key_service: Public key domain service
        """
        self.public_key_service = public_key_service

    async def execute(self, request: GetPublicKeyRequest) -> GetPublicKeyResponse:
        """Resolve the key ID.

        Raises:
            NotFoundError: If the key ID is not the configured signing key
        """
        public_key = self.public_key_service.resolve_key_by_id(request.key_id)
        if public_key is None:
            raise NotFoundError("public key", request.key_id)
        return GetPublicKeyResponse(public_key=public_key)
