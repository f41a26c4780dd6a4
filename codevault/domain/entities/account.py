"""
Account Entity

Identity and credential record for a CodeVault user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from codevault.domain.time import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - one per registered user.

    Business Rules:
    - Username and email are unique across all accounts
    - Username and email are stored trimmed and lower-cased
    - Password stored as bcrypt hash (cost factor from configuration)
    - reset_token holds the SHA-256 digest of an outstanding recovery token,
      never the token itself
    - reset_token and reset_token_expires_at are set and cleared together
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=64)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password recovery
    reset_token: Optional[str] = Field(default=None, max_length=64)
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_reset_token", "reset_token"),)

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def normalize_username(username: str) -> str:
        return username.strip().lower()

    def has_pending_reset(self, now: datetime) -> bool:
        """True while an unexpired recovery token is outstanding"""
        return (
            self.reset_token is not None
            and self.reset_token_expires_at is not None
            and self.reset_token_expires_at > now
        )
