from datetime import timedelta

import pytest

from codevault.adapter.repositories.account_repository import AccountRepository
from codevault.domain.entities import Account
from codevault.domain.exceptions import DuplicateAccountError
from tests.utils.clock import FIXED_NOW


def _account(username="ada", email="ada@example.com"):
    return Account(username=username, email=email, password_hash="$2b$04$" + "x" * 53)


@pytest.mark.asyncio
async def test_create_and_lookup(db_session):
    repo = AccountRepository(db_session)
    created = await repo.create(_account())
    await db_session.commit()

    assert (await repo.get_by_id(created.id)).username == "ada"
    assert (await repo.get_by_email("ada@example.com")).id == created.id
    assert (await repo.get_by_username("ada")).id == created.id
    assert await repo.get_by_email("grace@example.com") is None


@pytest.mark.asyncio
async def test_create_duplicate_username_raises(db_session):
    repo = AccountRepository(db_session)
    await repo.create(_account())
    await db_session.commit()

    with pytest.raises(DuplicateAccountError):
        await repo.create(_account(email="other@example.com"))


@pytest.mark.asyncio
async def test_reset_token_lookup_respects_expiry(db_session):
    repo = AccountRepository(db_session)
    account = await repo.create(_account())
    await repo.set_reset_token(account.id, "a" * 64, FIXED_NOW + timedelta(minutes=15))
    await db_session.commit()

    assert await repo.get_by_reset_token("a" * 64, FIXED_NOW) is not None
    assert await repo.get_by_reset_token("a" * 64, FIXED_NOW + timedelta(minutes=16)) is None
    assert await repo.get_by_reset_token("b" * 64, FIXED_NOW) is None


@pytest.mark.asyncio
async def test_complete_password_reset_is_conditional(db_session):
    repo = AccountRepository(db_session)
    account = await repo.create(_account())
    await repo.set_reset_token(account.id, "a" * 64, FIXED_NOW + timedelta(minutes=15))
    await db_session.commit()

    assert await repo.complete_password_reset(account.id, "a" * 64, "new-hash", FIXED_NOW)
    assert not await repo.complete_password_reset(account.id, "a" * 64, "again", FIXED_NOW)
    await db_session.commit()

    stored = await repo.get_by_email("ada@example.com")
    await db_session.refresh(stored)
    assert stored.password_hash == "new-hash"
    assert stored.reset_token is None
    assert stored.reset_token_expires_at is None


@pytest.mark.asyncio
async def test_clear_reset_token_only_clears_matching_digest(db_session):
    repo = AccountRepository(db_session)
    account = await repo.create(_account())
    await repo.set_reset_token(account.id, "a" * 64, FIXED_NOW + timedelta(minutes=15))

    assert not await repo.clear_reset_token(account.id, "b" * 64)
    assert await repo.clear_reset_token(account.id, "a" * 64)
