"""Unit tests for Ed25519 and signed JSON utilities."""

import pytest

from ident.util.error import SignatureError
from ident.util.signing import (
    canonical_json,
    decode_base64,
    ed25519_generate,
    ed25519_key_from_seed,
    ed25519_public_key,
    encode_base64,
    sign_json,
    verify_json,
)
from tests.constants import TEST_PRIVATE_KEY, TEST_SEED


class TestBase64:
    """Tests for unpadded base64 handling."""

    def test_encode_is_unpadded(self):
        assert encode_base64(b"\x00") == "AA"
        assert encode_base64(b"\x00" * 32).endswith("A")
        assert "=" not in encode_base64(b"\x00" * 32)

    def test_decode_accepts_padding_and_urlsafe(self):
        data = b"\xfb\xff\xfe"
        assert decode_base64("+//+") == data
        assert decode_base64("-__-") == data
        assert decode_base64("AA==") == b"\x00"
        assert decode_base64("AA") == b"\x00"

    def test_decode_rejects_garbage(self):
        with pytest.raises(SignatureError):
            decode_base64("!!!notbase64")

    @pytest.mark.parametrize("data", ["-!!!!AAA", "AA_@", "ab-c d"])
    def test_decode_urlsafe_rejects_garbage(self, data):
        with pytest.raises(SignatureError):
            decode_base64(data)

    def test_fixture_private_key_decodes_to_64_bytes(self):
        private_key = decode_base64(TEST_PRIVATE_KEY)
        assert len(private_key) == 64
        assert private_key[:32] == b"Hoh6gei6go2Gohphei3reixowuo8shoi"


class TestCanonicalJson:
    """Tests for canonical JSON serialisation."""

    def test_sorted_and_compact(self):
        assert canonical_json({"b": 1, "a": [1, 2], "c": {"z": None, "y": True}}) == (
            b'{"a":[1,2],"b":1,"c":{"y":true,"z":null}}'
        )

    def test_unicode_is_not_escaped(self):
        assert canonical_json({"name": "café"}) == '{"name":"café"}'.encode()


class TestKeys:
    """Tests for key derivation."""

    def test_key_from_seed_is_deterministic(self):
        private_a, public_a = ed25519_key_from_seed(TEST_SEED.encode())
        private_b, public_b = ed25519_key_from_seed(TEST_SEED.encode())

        assert public_a == public_b
        assert len(public_a) == 32
        assert private_a == TEST_SEED.encode() + public_a
        assert private_a == private_b

    def test_key_from_seed_rejects_wrong_size(self):
        with pytest.raises(SignatureError):
            ed25519_key_from_seed(b"too short")

    def test_generated_keys_are_distinct(self):
        keys = {ed25519_generate()[1] for _ in range(50)}
        assert len(keys) == 50

    def test_public_key_from_private_key(self):
        private_key, public_key = ed25519_generate()
        assert ed25519_public_key(private_key) == public_key
        assert private_key[32:] == public_key


class TestSignedJson:
    """Tests for signing and verifying JSON objects."""

    def test_sign_and_verify(self):
        private_key, public_key = ed25519_generate()
        assertion = {"mxid": "@bob:example.com", "sender": "@alice:example.com", "token": "abc"}

        signed = sign_json(assertion, "test", "ed25519:0", private_key)

        assert "signatures" not in assertion
        assert set(signed["signatures"]["test"]) == {"ed25519:0"}
        verify_json(signed, "test", "ed25519:0", public_key)

    def test_signature_is_deterministic(self):
        private_key, _ = ed25519_generate()
        obj = {"b": 2, "a": 1}

        first = sign_json(obj, "test", "ed25519:0", private_key)
        second = sign_json({"a": 1, "b": 2}, "test", "ed25519:0", private_key)

        assert first == second

    def test_tampered_object_fails(self):
        private_key, public_key = ed25519_generate()
        signed = sign_json({"mxid": "@bob:example.com"}, "test", "ed25519:0", private_key)

        signed["mxid"] = "@mallory:example.com"

        with pytest.raises(SignatureError):
            verify_json(signed, "test", "ed25519:0", public_key)

    def test_other_public_key_fails(self):
        private_key, _ = ed25519_generate()
        _, other_public_key = ed25519_generate()
        signed = sign_json({"a": 1}, "test", "ed25519:0", private_key)

        with pytest.raises(SignatureError):
            verify_json(signed, "test", "ed25519:0", other_public_key)

    def test_missing_signature_fails(self):
        _, public_key = ed25519_generate()
        with pytest.raises(SignatureError, match="Missing signature"):
            verify_json({"a": 1}, "test", "ed25519:0", public_key)

    def test_existing_signatures_and_unsigned_are_kept_out_of_signed_bytes(self):
        private_key, public_key = ed25519_generate()
        obj = {
            "a": 1,
            "signatures": {"other": {"ed25519:1": "sig"}},
            "unsigned": {"age": 5},
        }

        signed = sign_json(obj, "test", "ed25519:0", private_key)

        assert signed["signatures"]["other"] == {"ed25519:1": "sig"}
        assert signed["unsigned"] == {"age": 5}
        signed["unsigned"]["age"] = 10
        verify_json(signed, "test", "ed25519:0", public_key)

    def test_sign_with_fixture_private_key(self):
        private_key = decode_base64(TEST_PRIVATE_KEY)
        signed = sign_json({"token": "abc"}, "test", "ed25519:0", private_key)

        verify_json(signed, "test", "ed25519:0", ed25519_public_key(private_key))

    def test_public_key_rejects_mismatched_halves(self):
        private_key, _ = ed25519_generate()
        _, other_public_key = ed25519_generate()

        with pytest.raises(SignatureError):
            ed25519_public_key(private_key[:32] + other_public_key)

    def test_sign_rejects_mismatched_halves(self):
        private_key, _ = ed25519_generate()

        with pytest.raises(SignatureError):
            sign_json({"a": 1}, "test", "ed25519:0", private_key[:32] + b"\x00" * 32)

    def test_sign_rejects_wrong_private_key_size(self):
        with pytest.raises(SignatureError):
            sign_json({"a": 1}, "test", "ed25519:0", b"\x00" * 32)
