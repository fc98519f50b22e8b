"""Ed25519 and signed JSON utilities.

Keys travel as unpadded standard base64. A private key on the wire is 64
bytes: the 32-byte seed followed by the 32-byte public key.

Signed JSON follows the Matrix convention: the object minus its
``signatures`` and ``unsigned`` members is serialised as canonical JSON and
the signature is stored at ``signatures[<signing name>][<key id>]``.
"""

import base64
import binascii
import copy
import json
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ident.util.error import SignatureError

ED25519 = "ed25519"
SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = SEED_SIZE + PUBLIC_KEY_SIZE


def encode_base64(data: bytes) -> str:
    """Encode bytes as unpadded standard base64."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def decode_base64(data: str) -> bytes:
    """Decode base64 with or without padding, standard or URL-safe alphabet.

    Raises:
        SignatureError: If the input is not base64
    """
    padded = data + "=" * (-len(data) % 4)
    try:
        if "-" in data or "_" in data:
            return base64.b64decode(
                padded.encode("ascii"), altchars=b"-_", validate=True
            )
        return base64.b64decode(padded.encode("ascii"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise SignatureError(f"Invalid base64: {e}") from e


def canonical_json(value: Any) -> bytes:
    """Serialise a JSON value canonically: sorted keys, no spaces, UTF-8."""
    return json.dumps(
        value,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
        allow_nan=False,
    ).encode("utf-8")


def ed25519_key_from_seed(seed: bytes) -> tuple[bytes, bytes]:
    """Derive an Ed25519 key pair from a 32-byte seed.

    Args:
        seed: 32 bytes of seed material

    Returns:
        Tuple of (64-byte private key, 32-byte public key)

    Raises:
        SignatureError: If the seed has the wrong size
    """
    if len(seed) != SEED_SIZE:
        raise SignatureError(f"Seed must be {SEED_SIZE} bytes, got {len(seed)}")

    public_key = (
        Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes_raw()
    )
    return seed + public_key, public_key


def ed25519_generate() -> tuple[bytes, bytes]:
    """Generate a fresh Ed25519 key pair from the OS CSPRNG.

    Returns:
        Tuple of (64-byte private key, 32-byte public key)
    """
    private_key = Ed25519PrivateKey.generate()
    seed = private_key.private_bytes_raw()
    public_key = private_key.public_key().public_bytes_raw()
    return seed + public_key, public_key


def ed25519_public_key(private_key: bytes) -> bytes:
    """Get the public key of a 64-byte private key.

    Raises:
        SignatureError: If the key has the wrong size, or its public half is
            not the one derived from its seed
    """
    _check_private_key(private_key)
    public_key = (
        Ed25519PrivateKey.from_private_bytes(private_key[:SEED_SIZE])
        .public_key()
        .public_bytes_raw()
    )
    if public_key != private_key[SEED_SIZE:]:
        raise SignatureError("Private key does not match its public key")
    return public_key


def sign_json(
    json_object: dict[str, Any], signing_name: str, key_id: str, private_key: bytes
) -> dict[str, Any]:
    """Sign a JSON object.

    Args:
        json_object: Object to sign; left untouched
        signing_name: Entity the signature is attributed to (server name)
        key_id: Key identifier, e.g. "ed25519:0"
        private_key: 64-byte Ed25519 private key

    Returns:
        Copy of the object with the signature added under ``signatures``

    Raises:
        SignatureError: If the private key has the wrong size or is
            inconsistent
    """
    ed25519_public_key(private_key)

    signed = copy.deepcopy(json_object)
    signatures = signed.pop("signatures", {})
    unsigned = signed.pop("unsigned", None)

    signing_key = Ed25519PrivateKey.from_private_bytes(private_key[:SEED_SIZE])
    signature = signing_key.sign(canonical_json(signed))

    signatures.setdefault(signing_name, {})[key_id] = encode_base64(signature)
    signed["signatures"] = signatures
    if unsigned is not None:
        signed["unsigned"] = unsigned

    return signed


def verify_json(
    json_object: dict[str, Any], signing_name: str, key_id: str, public_key: bytes
) -> None:
    """Check the signature of a signed JSON object.

    Raises:
        SignatureError: If the signature is missing or does not verify
    """
    try:
        signature_b64 = json_object["signatures"][signing_name][key_id]
    except (KeyError, TypeError):
        raise SignatureError(f"Missing signature for {signing_name}/{key_id}")

    signature = decode_base64(signature_b64)

    unsigned_object = {
        k: v for k, v in json_object.items() if k not in ("signatures", "unsigned")
    }

    try:
        Ed25519PublicKey.from_public_bytes(public_key).verify(
            signature, canonical_json(unsigned_object)
        )
    except (InvalidSignature, ValueError) as e:
        raise SignatureError(
            f"Unable to verify signature for {signing_name}/{key_id}"
        ) from e


def _check_private_key(private_key: bytes) -> None:
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise SignatureError(
            f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
        )
