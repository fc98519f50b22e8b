"""Mappers for converting between database rows and domain models."""

from datetime import timezone
from typing import Any, Dict

from ident.domain.model import Invite
from ident.domain.value import InviteToken, Medium


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    created_at = row["created_at"]
    # SQLite hands back naive datetimes
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    return Invite(
        token=InviteToken(row["token"]),
        medium=Medium(row["medium"]),
        address=row["address"],
        room_id=row["room_id"],
        sender=row["sender"],
        ephemeral_public_key=row["ephemeral_public_key"],
        created_at=created_at,
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "token": invite.token.root,
        "medium": invite.medium.value,
        "address": invite.address,
        "room_id": invite.room_id,
        "sender": invite.sender,
        "ephemeral_public_key": invite.ephemeral_public_key,
        "created_at": invite.created_at,
    }
