from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from codevault.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by normalized username"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token_digest: str, now: datetime) -> Optional[Account]:
        """Get account holding this reset token digest with an expiry after now"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """
        Create a new account

        Raises:
            DuplicateAccountError: username or email already taken
        """
        pass

    @abstractmethod
    async def set_reset_token(
        self, account_id: UUID, token_digest: str, expires_at: datetime
    ) -> bool:
        """Store a reset token digest and its expiry in one update"""
        pass

    @abstractmethod
    async def clear_reset_token(
        self, account_id: UUID, token_digest: Optional[str] = None
    ) -> bool:
        """
        Clear the reset token digest and its expiry in one update.

        When token_digest is given, only clears if that digest is still the
        stored one.
        """
        pass

    @abstractmethod
    async def complete_password_reset(
        self, account_id: UUID, token_digest: str, password_hash: str, now: datetime
    ) -> bool:
        """
        Set a new password hash and clear the reset fields in one update,
        only while the given digest is still stored and unexpired.

        Returns False if the token was consumed or expired in the meantime.
        """
        pass
