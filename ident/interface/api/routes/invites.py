"""Third-party invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from ident.application.usecase.invite import SignEd25519UseCase, StoreInviteUseCase
from ident.application.usecase.invite.sign_ed25519 import (
    SignEd25519Request,
    SignEd25519Response,
)
from ident.application.usecase.invite.store_invite import (
    StoreInviteRequest,
    StoreInviteResponse,
)
from ident.config import API_PREFIX
from ident.interface.api.body import read_json_body

router = APIRouter(prefix=API_PREFIX, tags=["invites"], route_class=DishkaRoute)


@router.post("/store-invite", response_model=StoreInviteResponse)
async def store_invite(
    request: Request,
    store_invite_use_case: FromDishka[StoreInviteUseCase],
) -> StoreInviteResponse:
    """Store a third-party invite and notify the invitee.

    Args:
        request: HTTP request carrying the invite as a JSON body
        store_invite_use_case: Store invite use case from DI

    Returns:
        Token, long-term and ephemeral public keys, redacted display name
    """
    body = await read_json_body(request, StoreInviteRequest)
    return await store_invite_use_case.execute(body)


@router.post("/sign-ed25519", response_model=SignEd25519Response)
async def sign_ed25519(
    request: Request,
    sign_ed25519_use_case: FromDishka[SignEd25519UseCase],
) -> SignEd25519Response:
    """Sign an invite acceptance with the invite's ephemeral private key.

    Args:
        request: HTTP request with mxid, token and private_key as JSON
        sign_ed25519_use_case: Sign ed25519 use case from DI

    Returns:
        The ``{mxid, sender, token}`` assertion with its signature
    """
    body = await read_json_body(request, SignEd25519Request)
    return await sign_ed25519_use_case.execute(body)
