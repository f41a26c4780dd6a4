from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from codevault.app.repositories.account_repository import IAccountRepository
from codevault.domain.entities import Account
from codevault.domain.exceptions import DuplicateAccountError
from codevault.domain.time import utc_now


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by normalized username"""
        stmt = select(Account).where(Account.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token(self, token_digest: str, now: datetime) -> Optional[Account]:
        """Get account holding this reset token digest with an expiry after now"""
        stmt = select(Account).where(
            Account.reset_token == token_digest,
            Account.reset_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateAccountError() from exc
        await self.session.refresh(account)
        return account

    async def _update_fields(self, account_id: UUID, values: dict[str, Any], *conditions) -> bool:
        """Apply values to one account in a single UPDATE statement"""
        values.setdefault("updated_at", utc_now())
        stmt = (
            update(Account)
            .where(Account.id == account_id, *conditions)
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def set_reset_token(
        self, account_id: UUID, token_digest: str, expires_at: datetime
    ) -> bool:
        """Store a reset token digest and its expiry in one update"""
        return await self._update_fields(
            account_id,
            {"reset_token": token_digest, "reset_token_expires_at": expires_at},
        )

    async def clear_reset_token(
        self, account_id: UUID, token_digest: Optional[str] = None
    ) -> bool:
        """Clear the reset token digest and its expiry in one update"""
        conditions = []
        if token_digest is not None:
            conditions.append(Account.reset_token == token_digest)
        return await self._update_fields(
            account_id,
            {"reset_token": None, "reset_token_expires_at": None},
            *conditions,
        )

    async def complete_password_reset(
        self, account_id: UUID, token_digest: str, password_hash: str, now: datetime
    ) -> bool:
        """Set the new password hash and clear the reset fields in one conditional update"""
        return await self._update_fields(
            account_id,
            {
                "password_hash": password_hash,
                "reset_token": None,
                "reset_token_expires_at": None,
                "updated_at": now,
            },
            Account.reset_token == token_digest,
            Account.reset_token_expires_at > now,
        )
