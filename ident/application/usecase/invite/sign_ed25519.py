"""Sign ed25519 use case."""

from typing import Any

import logfire
from pydantic import BaseModel, ValidationError, field_validator

from ident.application.usecase.base import BaseUseCase
from ident.config import Settings
from ident.domain.error import (
    InvalidParamError,
    MissingParamError,
    UnrecognizedTokenError,
)
from ident.domain.service import InviteService
from ident.domain.value import InviteToken
from ident.util.error import SignatureError
from ident.util.signing import (
    PRIVATE_KEY_SIZE,
    decode_base64,
    ed25519_public_key,
    sign_json,
)

# Key ID attached to assertions signed with an ephemeral key. Relying parties
# find the key through the invite, so the ID only has to be stable.
EPHEMERAL_KEY_ID = "ed25519:0"


class SignEd25519Request(BaseModel):
    """Request to countersign an invite acceptance."""

    mxid: str = ""
    token: str = ""
    private_key: str = ""  # Unpadded base64 of the ephemeral private key

    @field_validator("mxid", "token", "private_key", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat JSON null like an absent field."""
        return "" if v is None else v


class SignEd25519Response(BaseModel):
    """Signed acceptance assertion."""

    mxid: str
    sender: str
    token: str
    signatures: dict[str, dict[str, str]]


class SignEd25519UseCase(BaseUseCase[SignEd25519Request, SignEd25519Response]):
    """Use case signing ``{mxid, sender, token}`` with a caller-supplied key.

    The signing key is the invite's ephemeral private key as delivered to the
    invitee, not this service's long-term key. Whether that key was really
    issued for the token is for the relying party to check against the
    ephemeral key validity endpoint.
    """

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite ledger domain service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: SignEd25519Request) -> SignEd25519Response:
        """Execute sign ed25519 use case.

        Args:
            request: Sign request

        Returns:
            The assertion with its signature

        Raises:
            MissingParamError: If mxid, token or private_key is missing
            InvalidParamError: If the private key is not 64 bytes of base64, or
                its public half does not match its seed
            UnrecognizedTokenError: If the token matches no invite
        """
        with logfire.span("sign_ed25519", mxid=request.mxid):
            private_key = self._validate(request)

            try:
                token = InviteToken(root=request.token)
            except ValidationError:
                raise UnrecognizedTokenError()

            invite = await self.invite_service.find_invite_by_token(token)
            if invite is None:
                raise UnrecognizedTokenError()

            assertion: dict[str, Any] = {
                "mxid": request.mxid,
                "sender": invite.sender,
                "token": invite.token.root,
            }
            signed = sign_json(
                assertion,
                self.settings.ident.server_name,
                EPHEMERAL_KEY_ID,
                private_key,
            )

            logfire.info("Invite acceptance signed", mxid=request.mxid, sender=invite.sender)
            return SignEd25519Response(**signed)

    def _validate(self, request: SignEd25519Request) -> bytes:
        """Check required fields and decode the private key."""
        for param in ("mxid", "token", "private_key"):
            if not getattr(request, param):
                raise MissingParamError(param)

        try:
            private_key = decode_base64(request.private_key)
        except SignatureError:
            raise InvalidParamError("The private key is not valid base64")

        if len(private_key) != PRIVATE_KEY_SIZE:
            raise InvalidParamError(
                "Decoded the base64 representation of the private key into "
                f"{len(private_key)} bytes, expected {PRIVATE_KEY_SIZE}"
            )

        try:
            ed25519_public_key(private_key)
        except SignatureError:
            raise InvalidParamError("The private key does not match its public key")

        return private_key
