"""Domain services."""

from .base import Service
from .invite_service import InviteService
from .key_service import KeyService
from .notifier import InviteNotification, InviteNotifier
from .pubkey_service import PublicKeyService

__all__ = [
    "InviteNotification",
    "InviteNotifier",
    "InviteService",
    "KeyService",
    "PublicKeyService",
    "Service",
]
