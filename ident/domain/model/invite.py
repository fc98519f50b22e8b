"""Invite entity.

A pending third-party invite: a room invitation addressed to a 3PID that is
not yet bound to a Matrix account.
"""

from datetime import datetime, timezone

from pydantic import Field

from ident.domain.model.common import DomainModel
from ident.domain.value import InviteToken, Medium


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - The token is unique across all invites
    - Exactly one ephemeral public key is bound to a token, for its whole lifetime
    - Invites are never mutated or deleted once stored
    """

    token: InviteToken
    medium: Medium
    address: str  # Raw 3PID, validated for the medium before storage
    room_id: str
    sender: str  # Inviting user's Matrix ID
    ephemeral_public_key: str  # Unpadded base64
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
