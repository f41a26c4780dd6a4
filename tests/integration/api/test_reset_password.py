"""
POST /auth/reset-password

Reset tokens are single use and expire 15 minutes after the request.
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import update

from codevault.domain.entities import Account
from codevault.domain.time import utc_now


async def _request_reset(client: AsyncClient, email_sender) -> str:
    response = await client.post("/auth/forgot-password", json={"email": "ada@example.com"})
    assert response.status_code == 200
    return email_sender.last_reset_token()


@pytest.mark.asyncio
async def test_reset_password_flow(
    client: AsyncClient, registered, email_sender, load_account
):
    token = await _request_reset(client, email_sender)

    response = await client.post("/auth/reset-password", json={
        "token": token,
        "new_password": "newpassword123",
    })

    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": "Password reset successful"}

    account = await load_account("ada@example.com")
    assert account.reset_token is None
    assert account.reset_token_expires_at is None

    old_login = await client.post("/auth/login", json={
        "identity": "ada@example.com",
        "password": "secret123",
    })
    assert old_login.status_code == 401

    new_login = await client.post("/auth/login", json={
        "identity": "ada@example.com",
        "password": "newpassword123",
    })
    assert new_login.status_code == 200


@pytest.mark.asyncio
async def test_reset_token_is_single_use(client: AsyncClient, registered, email_sender):
    token = await _request_reset(client, email_sender)

    first = await client.post("/auth/reset-password", json={
        "token": token,
        "new_password": "newpassword123",
    })
    second = await client.post("/auth/reset-password", json={
        "token": token,
        "new_password": "anotherpassword456",
    })

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"


@pytest.mark.asyncio
async def test_expired_token_is_rejected(
    client: AsyncClient, registered, email_sender, session_factory, load_account
):
    token = await _request_reset(client, email_sender)

    async with session_factory() as session:
        await session.execute(
            update(Account)
            .where(Account.email == "ada@example.com")
            .values(reset_token_expires_at=utc_now() - timedelta(minutes=1))
        )
        await session.commit()

    response = await client.post("/auth/reset-password", json={
        "token": token,
        "new_password": "newpassword123",
    })

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"

    account = await load_account("ada@example.com")
    assert account.reset_token is not None


@pytest.mark.asyncio
async def test_unknown_token_is_rejected(client: AsyncClient, registered):
    response = await client.post("/auth/reset-password", json={
        "token": "0" * 64,
        "new_password": "newpassword123",
    })

    assert response.status_code == 400
    assert response.json() == {
        "error": {
            "code": "INVALID_OR_EXPIRED_TOKEN",
            "message": "Invalid or expired password reset token",
        }
    }


@pytest.mark.asyncio
async def test_reset_rejects_short_password(client: AsyncClient, registered, email_sender):
    token = await _request_reset(client, email_sender)

    response = await client.post("/auth/reset-password", json={
        "token": token,
        "new_password": "short",
    })

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"
