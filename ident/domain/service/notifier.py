"""Invite notification port."""

from pydantic import BaseModel


class InviteNotification(BaseModel):
    """Everything an invitee needs to accept a third-party invite.

    Carries the ephemeral private key, so it must never be logged or stored.
    """

    medium: str
    address: str
    token: str
    ephemeral_private_key: str  # Unpadded base64
    room_id: str
    sender: str
    base_url: str
    room_alias: str | None = None
    room_avatar_url: str | None = None
    room_join_rules: str | None = None
    room_name: str | None = None
    sender_display_name: str | None = None
    sender_avatar_url: str | None = None

    def __repr__(self) -> str:
        return f"InviteNotification(medium={self.medium!r}, room_id={self.room_id!r})"

    __str__ = __repr__


class InviteNotifier:
    """Generic interface for delivering invites to their 3PID."""

    async def deliver(self, notification: InviteNotification) -> None:
        """Deliver an invite notification.

        Args:
            notification: Invite data to deliver

        Raises:
            NotifierError: If the notification could not be delivered
        """
        raise NotImplementedError
