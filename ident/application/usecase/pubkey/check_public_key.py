"""Public key validity use cases."""

from pydantic import BaseModel

from ident.application.usecase.base import BaseUseCase
from ident.domain.service import PublicKeyService


class CheckPublicKeyRequest(BaseModel):
    """Public key validity request."""

    public_key: str = ""


class CheckPublicKeyResponse(BaseModel):
    """Public key validity response."""

    valid: bool


class CheckPublicKeyUseCase(BaseUseCase[CheckPublicKeyRequest, CheckPublicKeyResponse]):
    """Check a key against this service's long-term public key."""

    def __init__(self, public_key_service: PublicKeyService) -> None:
        self.public_key_service = public_key_service

    async def execute(self, request: CheckPublicKeyRequest) -> CheckPublicKeyResponse:
        return CheckPublicKeyResponse(
            valid=self.public_key_service.is_long_term_key_valid(request.public_key)
        )


class CheckEphemeralPublicKeyUseCase(
    BaseUseCase[CheckPublicKeyRequest, CheckPublicKeyResponse]
):
    """Check a key was issued by this service as an invite's ephemeral key."""

    def __init__(self, public_key_service: PublicKeyService) -> None:
        self.public_key_service = public_key_service

    async def execute(self, request: CheckPublicKeyRequest) -> CheckPublicKeyResponse:
        return CheckPublicKeyResponse(
            valid=await self.public_key_service.is_ephemeral_key_valid(
                request.public_key
            )
        )
