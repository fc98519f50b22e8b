"""Domain value objects for ident.

Value objects are immutable and defined by their values, not identity.
They encapsulate the identifier grammars used by the invite protocol.
"""

from enum import Enum

from pydantic import field_validator

from ident.domain.value.common import RootValueObject


class Medium(str, Enum):
    """Third-party identifier kinds."""

    EMAIL = "email"
    MSISDN = "msisdn"


SUPPORTED_MEDIUMS = frozenset({Medium.EMAIL.value})


def split_id(sigil: str, identifier: str) -> tuple[str, str]:
    """Split a Matrix identifier of the form ``<sigil>localpart:domain``.

    Args:
        sigil: Expected leading character ('!' for rooms, '@' for users)
        identifier: Identifier to split

    Returns:
        Tuple of (localpart, domain)

    Raises:
        ValueError: If the identifier does not follow the grammar
    """
    if not identifier or identifier[0] != sigil:
        raise ValueError(f"Identifier must start with {sigil!r}")

    localpart, sep, domain = identifier[1:].partition(":")
    if not sep or not localpart or not domain:
        raise ValueError("Identifier must be of the form localpart:domain")

    return localpart, domain


def is_valid_email_address(address: str) -> bool:
    """Check an email address has exactly one '@' and both parts set.

    Addresses like ``user@domain1@domain2`` are rejected: they were used to
    trick identity servers into binding an address the requester does not own.
    """
    if address.count("@") != 1:
        return False

    localpart, _, domain = address.partition("@")
    return bool(localpart) and bool(domain)


def redact_email(address: str) -> str:
    """Build a display name hiding most of an email address.

    ``alice@example.com`` becomes ``a...@e...``.
    """
    localpart, sep, domain = address.partition("@")
    if not localpart:
        return "..."
    if not sep or not domain:
        return f"{localpart[0]}..."
    return f"{localpart[0]}...@{domain[0]}..."


class InviteToken(RootValueObject[str]):
    """Opaque, high-entropy invite token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v
