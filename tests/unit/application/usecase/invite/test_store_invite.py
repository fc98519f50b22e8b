"""Unit tests for StoreInviteUseCase."""

import pytest

from ident.adapter.error import NotifierError
from ident.application.usecase.invite import StoreInviteUseCase
from ident.application.usecase.invite.store_invite import (
    TOKEN_LENGTH,
    StoreInviteRequest,
    generate_invite_token,
)
from ident.domain.error import (
    InvalidEmailError,
    InvalidParamError,
    UnsupportedMediumError,
)
from ident.domain.model import ServerSigningKey
from ident.domain.repository import EphemeralKeyRepository, InviteRepository
from ident.domain.service import InviteNotifier, InviteService
from ident.domain.value import InviteToken, Medium
from ident.util.signing import decode_base64, ed25519_public_key, encode_base64
from tests.constants import (
    TEST_ADDRESS,
    TEST_BASE_URL,
    TEST_ROOM_ID,
    TEST_SEED,
    TEST_SENDER,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

API = f"{TEST_BASE_URL}/_matrix/identity/api/v1"


def make_request(**overrides) -> StoreInviteRequest:
    data = {
        "medium": "email",
        "address": TEST_ADDRESS,
        "room_id": TEST_ROOM_ID,
        "sender": TEST_SENDER,
    }
    data.update(overrides)
    return StoreInviteRequest(**data)


class TestGenerateInviteToken:
    """Tests for invite token generation."""

    def test_token_format(self):
        token = generate_invite_token()
        assert len(token.root) == TOKEN_LENGTH
        assert token.root.isascii() and token.root.isalnum()

    def test_tokens_are_unique(self):
        tokens = {generate_invite_token().root for _ in range(1000)}
        assert len(tokens) == 1000


class TestStoreInvite:
    """Tests for the store invite flow."""

    @pytest.mark.asyncio
    async def test_store_invite_success(self, unit_env):
        """The response carries the token and both keys with their URLs."""
        # Arrange
        use_case = await unit_env.get(StoreInviteUseCase)
        invite_service = await unit_env.get(InviteService)
        server_key = ServerSigningKey.from_seed(TEST_SEED, "ed25519", "0")

        # Act
        response = await use_case.execute(make_request())

        # Assert
        assert len(response.token) == TOKEN_LENGTH
        assert response.display_name == "b...@e..."
        assert response.public_key == server_key.public_key_base64

        long_term, ephemeral = response.public_keys
        assert long_term.public_key == server_key.public_key_base64
        assert long_term.key_validity_url == f"{API}/pubkey/isvalid"
        assert ephemeral.key_validity_url == f"{API}/pubkey/ephemeral/isvalid"
        assert ephemeral.public_key != server_key.public_key_base64

        invite = await invite_service.find_invite_by_token(InviteToken(root=response.token))
        assert invite is not None
        assert invite.medium == Medium.EMAIL
        assert invite.address == TEST_ADDRESS
        assert invite.room_id == TEST_ROOM_ID
        assert invite.sender == TEST_SENDER
        assert invite.ephemeral_public_key == ephemeral.public_key
        assert await invite_service.ephemeral_public_key_exists(ephemeral.public_key)

    @pytest.mark.asyncio
    async def test_notification_carries_matching_private_key(self, unit_env):
        """The invitee gets the private half of the returned ephemeral key."""
        # Arrange
        use_case = await unit_env.get(StoreInviteUseCase)
        notifier = await unit_env.get(InviteNotifier)

        # Act
        response = await use_case.execute(
            make_request(sender_display_name="Alice", room_name="Science")
        )

        # Assert
        assert len(notifier.delivered) == 1
        notification = notifier.delivered[0]
        assert notification.token == response.token
        assert notification.address == TEST_ADDRESS
        assert notification.base_url == TEST_BASE_URL
        assert notification.sender_display_name == "Alice"
        assert notification.room_name == "Science"

        private_key = decode_base64(notification.ephemeral_private_key)
        assert encode_base64(ed25519_public_key(private_key)) == (
            response.public_keys[1].public_key
        )

    @pytest.mark.asyncio
    async def test_each_invite_gets_fresh_token_and_key(self, unit_env):
        use_case = await unit_env.get(StoreInviteUseCase)

        first = await use_case.execute(make_request())
        second = await use_case.execute(make_request())

        assert first.token != second.token
        assert first.public_keys[1].public_key != second.public_keys[1].public_key
        assert first.public_key == second.public_key

    @pytest.mark.asyncio
    async def test_delivery_failure_stores_nothing(self, unit_env):
        """If the invitee cannot be told, no invite or key is persisted."""
        # Arrange
        use_case = await unit_env.get(StoreInviteUseCase)
        notifier = await unit_env.get(InviteNotifier)
        invite_repo = await unit_env.get(InviteRepository)
        key_repo = await unit_env.get(EphemeralKeyRepository)
        notifier.fail = True

        # Act & Assert
        with pytest.raises(NotifierError):
            await use_case.execute(make_request())

        assert invite_repo._invites == {}
        assert key_repo._keys == set()


class TestValidation:
    """Tests for request validation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("medium", ["msisdn", "", "EMAIL", "phone"])
    async def test_unsupported_medium(self, unit_env, medium):
        use_case = await unit_env.get(StoreInviteUseCase)

        with pytest.raises(UnsupportedMediumError) as exc_info:
            await use_case.execute(make_request(medium=medium))

        assert exc_info.value.errcode == "M_INVALID_PARAM"
        assert exc_info.value.message == f"Unsupported medium: {medium}"

    @pytest.mark.asyncio
    async def test_medium_checked_before_address(self, unit_env):
        use_case = await unit_env.get(StoreInviteUseCase)
        with pytest.raises(UnsupportedMediumError):
            await use_case.execute(make_request(medium="msisdn", address="not-an-email"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "address", ["", "bob", "bob@", "@example.com", "bob@example.com@evil.com"]
    )
    async def test_invalid_email(self, unit_env, address):
        use_case = await unit_env.get(StoreInviteUseCase)

        with pytest.raises(InvalidEmailError) as exc_info:
            await use_case.execute(make_request(address=address))

        assert exc_info.value.errcode == "M_INVALID_EMAIL"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("room_id", ["", "someroom:example.com", "!someroom", "#alias:example.com"])
    async def test_invalid_room_id(self, unit_env, room_id):
        use_case = await unit_env.get(StoreInviteUseCase)
        with pytest.raises(InvalidParamError, match="Invalid room ID"):
            await use_case.execute(make_request(room_id=room_id))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sender", ["", "alice:example.com", "@alice", "!alice:example.com"])
    async def test_invalid_sender(self, unit_env, sender):
        use_case = await unit_env.get(StoreInviteUseCase)
        with pytest.raises(InvalidParamError, match="Invalid sender ID"):
            await use_case.execute(make_request(sender=sender))

    @pytest.mark.asyncio
    async def test_rejected_request_sends_nothing(self, unit_env):
        use_case = await unit_env.get(StoreInviteUseCase)
        notifier = await unit_env.get(InviteNotifier)

        with pytest.raises(InvalidEmailError):
            await use_case.execute(make_request(address="bob"))

        assert notifier.delivered == []
