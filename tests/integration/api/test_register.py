import pytest
from httpx import AsyncClient
from sqlmodel import select

from codevault.domain.entities import Account
from tests.utils.json_compare import assert_no_secret_fields


@pytest.mark.asyncio
async def test_successful_register(client: AsyncClient, test_data, db_session):
    """Registering a new account returns 201 with both tokens"""
    response = await client.post("/auth/register", json=test_data.account("ada"))

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["account"]["username"] == "ada"
    assert data["account"]["email"] == "ada@example.com"
    assert "id" in data["account"]
    assert isinstance(data["access_token"], str) and len(data["access_token"]) > 0
    assert isinstance(data["refresh_token"], str) and len(data["refresh_token"]) > 0
    assert_no_secret_fields(data["account"])

    accounts = (await db_session.exec(select(Account))).all()
    assert len(accounts) == 1
    assert accounts[0].password_hash != "secret123"
    assert accounts[0].reset_token is None


@pytest.mark.asyncio
async def test_register_sends_welcome_email(client: AsyncClient, test_data, email_sender):
    response = await client.post("/auth/register", json=test_data.account("ada"))

    assert response.status_code == 201
    assert [m.subject for m in email_sender.sent] == ["Welcome to CodeVault"]


@pytest.mark.asyncio
async def test_register_succeeds_when_welcome_email_fails(
    client: AsyncClient, test_data, email_sender
):
    email_sender.fail = True

    response = await client.post("/auth/register", json=test_data.account("ada"))

    assert response.status_code == 201
    assert response.json()["access_token"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, test_data):
    await client.post("/auth/register", json=test_data.account("ada"))

    payload = test_data.account("ada")
    payload["username"] = "ada2"
    payload["email"] = "ADA@example.com"
    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ACCOUNT_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, test_data):
    await client.post("/auth/register", json=test_data.account("ada"))

    payload = test_data.account("grace")
    payload["username"] = "Ada"
    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ACCOUNT_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_invalid_input(client: AsyncClient):
    response = await client.post("/auth/register", json={
        "username": "ada",
        "email": "not-an-email",
        "password": "short",
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_register_rejects_username_with_at_sign(client: AsyncClient):
    response = await client.post("/auth/register", json={
        "username": "bob@home",
        "email": "bob@example.com",
        "password": "secret123",
    })

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_USERNAME"


@pytest.mark.asyncio
async def test_register_short_password_is_invalid_password(client: AsyncClient):
    response = await client.post("/auth/register", json={
        "username": "ada",
        "email": "ada@example.com",
        "password": "short",
    })

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"
