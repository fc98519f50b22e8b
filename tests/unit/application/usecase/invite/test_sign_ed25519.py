"""Unit tests for SignEd25519UseCase."""

import pytest

from ident.application.usecase.invite import SignEd25519UseCase, StoreInviteUseCase
from ident.application.usecase.invite.sign_ed25519 import (
    EPHEMERAL_KEY_ID,
    SignEd25519Request,
)
from ident.application.usecase.invite.store_invite import StoreInviteRequest
from ident.domain.error import (
    InvalidParamError,
    MissingParamError,
    UnrecognizedTokenError,
)
from ident.domain.service import InviteNotifier
from ident.util.error import SignatureError
from ident.util.signing import decode_base64, encode_base64, verify_json
from tests.constants import (
    TEST_ADDRESS,
    TEST_MXID,
    TEST_PRIVATE_KEY,
    TEST_ROOM_ID,
    TEST_SENDER,
    TEST_SERVER_NAME,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def store_invite(env) -> tuple[str, str, str]:
    """Store an invite and return (token, ephemeral public key, private key)."""
    store_use_case = await env.get(StoreInviteUseCase)
    notifier = await env.get(InviteNotifier)

    response = await store_use_case.execute(
        StoreInviteRequest(
            medium="email",
            address=TEST_ADDRESS,
            room_id=TEST_ROOM_ID,
            sender=TEST_SENDER,
        )
    )
    private_key = notifier.delivered[-1].ephemeral_private_key
    return response.token, response.public_keys[1].public_key, private_key


class TestSignEd25519:
    """Tests for countersigning invite acceptances."""

    @pytest.mark.asyncio
    async def test_sign_success(self, unit_env):
        """The assertion verifies against the invite's ephemeral public key."""
        # Arrange
        use_case = await unit_env.get(SignEd25519UseCase)
        token, public_key, private_key = await store_invite(unit_env)

        # Act
        response = await use_case.execute(
            SignEd25519Request(mxid=TEST_MXID, token=token, private_key=private_key)
        )

        # Assert
        assert response.mxid == TEST_MXID
        assert response.sender == TEST_SENDER
        assert response.token == token
        assert set(response.signatures) == {TEST_SERVER_NAME}
        assert set(response.signatures[TEST_SERVER_NAME]) == {EPHEMERAL_KEY_ID}
        verify_json(
            response.model_dump(),
            TEST_SERVER_NAME,
            EPHEMERAL_KEY_ID,
            decode_base64(public_key),
        )

    @pytest.mark.asyncio
    async def test_sign_with_other_key_does_not_verify(self, unit_env):
        """Any well-formed key is used as given; verification exposes a wrong one."""
        # Arrange
        use_case = await unit_env.get(SignEd25519UseCase)
        token, public_key, _ = await store_invite(unit_env)

        # Act
        response = await use_case.execute(
            SignEd25519Request(mxid=TEST_MXID, token=token, private_key=TEST_PRIVATE_KEY)
        )

        # Assert
        with pytest.raises(SignatureError):
            verify_json(
                response.model_dump(),
                TEST_SERVER_NAME,
                EPHEMERAL_KEY_ID,
                decode_base64(public_key),
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fields,missing",
        [
            ({}, "mxid"),
            ({"token": "abc", "private_key": TEST_PRIVATE_KEY}, "mxid"),
            ({"mxid": TEST_MXID, "private_key": TEST_PRIVATE_KEY}, "token"),
            ({"mxid": TEST_MXID, "token": "abc"}, "private_key"),
        ],
    )
    async def test_missing_params(self, unit_env, fields, missing):
        use_case = await unit_env.get(SignEd25519UseCase)

        with pytest.raises(MissingParamError) as exc_info:
            await use_case.execute(SignEd25519Request(**fields))

        assert exc_info.value.errcode == "M_MISSING_PARAMS"
        assert exc_info.value.message == f"Missing params: {missing}"

    @pytest.mark.asyncio
    async def test_private_key_wrong_length(self, unit_env):
        use_case = await unit_env.get(SignEd25519UseCase)

        with pytest.raises(InvalidParamError) as exc_info:
            await use_case.execute(
                SignEd25519Request(
                    mxid=TEST_MXID, token="abc", private_key=encode_base64(b"\x01" * 32)
                )
            )

        assert exc_info.value.message == (
            "Decoded the base64 representation of the private key into 32 bytes, expected 64"
        )

    @pytest.mark.asyncio
    async def test_private_key_not_base64(self, unit_env):
        use_case = await unit_env.get(SignEd25519UseCase)
        with pytest.raises(InvalidParamError, match="not valid base64"):
            await use_case.execute(
                SignEd25519Request(mxid=TEST_MXID, token="abc", private_key="!!!notbase64")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["unknown", "a" * 128, "a" * 1000])
    async def test_unknown_token(self, unit_env, token):
        use_case = await unit_env.get(SignEd25519UseCase)

        with pytest.raises(UnrecognizedTokenError) as exc_info:
            await use_case.execute(
                SignEd25519Request(mxid=TEST_MXID, token=token, private_key=TEST_PRIVATE_KEY)
            )

        assert exc_info.value.errcode == "M_UNRECOGNIZED"
        assert exc_info.value.http_status == 404
