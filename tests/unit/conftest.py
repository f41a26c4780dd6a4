from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from codevault.app.services.auth_settings import AuthSettings
from codevault.app.services.password_hasher import PasswordHasher
from codevault.app.services.reset_token_generator import ResetTokenGenerator
from codevault.app.services.token_codec import TokenCodec
from codevault.domain.entities import Account
from tests.utils.clock import FIXED_NOW


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_username = AsyncMock(return_value=None)
    uow.accounts.get_by_reset_token = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.set_reset_token = AsyncMock(return_value=True)
    uow.accounts.clear_reset_token = AsyncMock(return_value=True)
    uow.accounts.complete_password_reset = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def settings():
    return AuthSettings(
        access_token_secret="unit-access-secret",
        refresh_token_secret="unit-refresh-secret",
        access_token_ttl=timedelta(hours=1),
        refresh_token_ttl=timedelta(days=7),
        bcrypt_rounds=4,
        reset_token_ttl=timedelta(minutes=15),
        frontend_url="https://codevault.test",
    )


@pytest.fixture
def password_hasher(settings):
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@pytest.fixture
def token_codec(settings):
    return TokenCodec(settings, clock=lambda: FIXED_NOW)


@pytest.fixture
def reset_token_generator():
    return ResetTokenGenerator()


@pytest.fixture
def make_account(password_hasher):
    def _make(password: str = "secret123", **overrides) -> Account:
        fields = {
            "id": uuid4(),
            "username": "ada",
            "email": "ada@example.com",
            "password_hash": password_hasher.hash(password),
            "created_at": FIXED_NOW,
            "updated_at": FIXED_NOW,
        }
        fields.update(overrides)
        return Account(**fields)

    return _make
