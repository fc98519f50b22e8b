"""Public key routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from ident.application.usecase.pubkey import (
    CheckEphemeralPublicKeyUseCase,
    CheckPublicKeyRequest,
    CheckPublicKeyResponse,
    CheckPublicKeyUseCase,
    GetPublicKeyRequest,
    GetPublicKeyResponse,
    GetPublicKeyUseCase,
)
from ident.config import API_PREFIX

router = APIRouter(
    prefix=f"{API_PREFIX}/pubkey", tags=["pubkey"], route_class=DishkaRoute
)


@router.get("/isvalid", response_model=CheckPublicKeyResponse)
async def is_public_key_valid(
    check_public_key_use_case: FromDishka[CheckPublicKeyUseCase],
    public_key: str = Query(default=""),
) -> CheckPublicKeyResponse:
    """Check whether a key is this service's current long-term public key."""
    return await check_public_key_use_case.execute(
        CheckPublicKeyRequest(public_key=public_key)
    )


@router.get("/ephemeral/isvalid", response_model=CheckPublicKeyResponse)
async def is_ephemeral_public_key_valid(
    check_ephemeral_public_key_use_case: FromDishka[CheckEphemeralPublicKeyUseCase],
    public_key: str = Query(default=""),
) -> CheckPublicKeyResponse:
    """Check whether a key was issued by this service for an invite."""
    return await check_ephemeral_public_key_use_case.execute(
        CheckPublicKeyRequest(public_key=public_key)
    )


# Declared last so the literal paths above take precedence
@router.get("/{key_id}", response_model=GetPublicKeyResponse)
async def get_public_key(
    key_id: str,
    get_public_key_use_case: FromDishka[GetPublicKeyUseCase],
) -> GetPublicKeyResponse:
    """Fetch the long-term public key by its ``algorithm:id`` identifier.

    Raises:
        NotFoundError: If the key ID is unknown
    """
    return await get_public_key_use_case.execute(GetPublicKeyRequest(key_id=key_id))
