"""Domain value objects for ident."""

from ident.domain.value.types import (
    InviteToken,
    Medium,
    is_valid_email_address,
    redact_email,
    split_id,
)

__all__ = [
    "InviteToken",
    "Medium",
    "is_valid_email_address",
    "redact_email",
    "split_id",
]
