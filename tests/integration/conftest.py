import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from codevault.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from codevault.app.services.password_hasher import PasswordHasher
from codevault.depends import get_email_sender, get_password_hasher, get_unit_of_work
from codevault.domain.entities import Account
from tests.fixtures.email_sender import RecordingEmailSender
from tests.fixtures.json_loader import AccountDataLoader


@pytest.fixture
def test_data():
    return AccountDataLoader()


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, email_sender):
    from codevault.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    fast_hasher = PasswordHasher(rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def registered(client, test_data):
    """Register ada and return the 201 response body"""
    response = await client.post("/auth/register", json=test_data.account("ada"))
    assert response.status_code == 201
    client.cookies.clear()
    return response.json()


@pytest.fixture
def load_account(session_factory):
    """Read an account through a fresh session, bypassing the client's identity map"""

    async def _load(email: str):
        async with session_factory() as session:
            result = await session.exec(select(Account).where(Account.email == email))
            return result.one_or_none()

    return _load
