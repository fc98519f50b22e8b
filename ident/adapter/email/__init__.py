"""Email invite adapter."""

from .smtp import (
    EmailInviteNotifier,
    MockInviteNotifier,
    SmtpInviteNotifier,
)
from .template import InviteEmailRenderer, RenderedEmail

__all__ = [
    "EmailInviteNotifier",
    "InviteEmailRenderer",
    "MockInviteNotifier",
    "RenderedEmail",
    "SmtpInviteNotifier",
]
