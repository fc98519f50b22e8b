"""Signing key domain service."""

import logfire

from ident.config import Settings
from ident.domain.model import EphemeralKeyPair, ServerSigningKey

from .base import Service


class KeyService(Service):
    """Domain service owning the long-term key and minting ephemeral keys.

    The long-term key is immutable after construction, so one instance is
    shared by all requests.
    """

    def __init__(self, signing_key: ServerSigningKey) -> None:
        """Initialize key service.

        Args:
            signing_key: Long-term signing key of this service
        """
        self.signing_key = signing_key

    @classmethod
    def from_settings(cls, settings: Settings) -> "KeyService":
        """Build the key service from configuration.

        Raises:
            UnsupportedAlgorithmError: If the configured algorithm is not ed25519
            ConfigurationError: If the configured seed is invalid
        """
        key_settings = settings.ident.signing_key
        signing_key = ServerSigningKey.from_seed(
            key_settings.seed, key_settings.algo, key_settings.id
        )
        logfire.info(
            "Signing key loaded",
            key_id=signing_key.full_key_id,
            public_key=signing_key.public_key_base64,
        )
        return cls(signing_key)

    @property
    def server_public_key(self) -> str:
        """Long-term public key as unpadded base64."""
        return self.signing_key.public_key_base64

    def generate_ephemeral_key_pair(self) -> EphemeralKeyPair:
        """Mint a fresh single-use key pair for an invite."""
        key_pair = EphemeralKeyPair.generate()
        logfire.debug(
            "Ephemeral key pair generated", public_key=key_pair.public_key_base64
        )
        return key_pair
