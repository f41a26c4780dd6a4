from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from codevault.adapter.repositories.account_repository import AccountRepository
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.domain.exceptions import DuplicateAccountError


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.accounts = AccountRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as exc:
            # Unique indexes on accounts are the only constraints checked at commit
            await self.session.rollback()
            raise DuplicateAccountError() from exc

    async def rollback(self):
        await self.session.rollback()
