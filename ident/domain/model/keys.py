"""Signing key entities.

The service owns one long-term signing key, derived from a configured seed.
Ephemeral key pairs are minted per invite; the service only ever keeps their
public half.
"""

from pydantic import computed_field

from ident.domain.model.common import DomainModel
from ident.util.error import ConfigurationError, SignatureError, UnsupportedAlgorithmError
from ident.util.signing import (
    ED25519,
    ed25519_generate,
    ed25519_key_from_seed,
    encode_base64,
)


class ServerSigningKey(DomainModel):
    """Long-term identity key of this service.

    Built once at startup from configuration and shared read-only by every
    request. ``private_key``/``public_key`` are always derived from ``seed``.
    """

    algorithm: str
    key_id: str
    seed: bytes
    private_key: bytes
    public_key: bytes

    @classmethod
    def from_seed(cls, seed: str | bytes, algorithm: str, key_id: str) -> "ServerSigningKey":
        """Derive the signing key from its seed.

        Args:
            seed: 32-byte seed (str seeds are UTF-8 encoded)
            algorithm: Signature algorithm, must be "ed25519"
            key_id: Version identifier of the key, e.g. "0"

        Returns:
            The derived signing key

        Raises:
            UnsupportedAlgorithmError: If the algorithm is not ed25519
            ConfigurationError: If the seed is not 32 bytes
        """
        if algorithm != ED25519:
            raise UnsupportedAlgorithmError(algorithm)

        seed_bytes = seed.encode("utf-8") if isinstance(seed, str) else seed
        try:
            private_key, public_key = ed25519_key_from_seed(seed_bytes)
        except SignatureError as e:
            raise ConfigurationError(f"Invalid signing key configuration: {e}") from e

        return cls(
            algorithm=algorithm,
            key_id=key_id,
            seed=seed_bytes,
            private_key=private_key,
            public_key=public_key,
        )

    @computed_field
    @property
    def public_key_base64(self) -> str:
        """Public key as unpadded base64."""
        return encode_base64(self.public_key)

    @property
    def full_key_id(self) -> str:
        """Key identifier in ``algorithm:id`` form."""
        return f"{self.algorithm}:{self.key_id}"

    def __repr__(self) -> str:
        return f"ServerSigningKey(key_id={self.full_key_id!r}, public_key={self.public_key_base64!r})"

    __str__ = __repr__


class EphemeralKeyPair(DomainModel):
    """Single-use key pair minted for one invite."""

    private_key: bytes
    public_key: bytes

    @classmethod
    def generate(cls) -> "EphemeralKeyPair":
        """Generate a key pair from the OS CSPRNG."""
        private_key, public_key = ed25519_generate()
        return cls(private_key=private_key, public_key=public_key)

    @property
    def private_key_base64(self) -> str:
        """Private key (seed followed by public key) as unpadded base64."""
        return encode_base64(self.private_key)

    @property
    def public_key_base64(self) -> str:
        """Public key as unpadded base64."""
        return encode_base64(self.public_key)

    def __repr__(self) -> str:
        return f"EphemeralKeyPair(public_key={self.public_key_base64!r})"

    __str__ = __repr__
