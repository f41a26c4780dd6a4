"""
User Use Case DTOs

Read models of an Account that are safe to hand out.
"""

from datetime import datetime

from pydantic import BaseModel

from codevault.domain.entities import Account


class ProfileView(BaseModel):
    """
    Public view of an account.

    Never carries password_hash, reset_token or reset_token_expires_at.
    """

    id: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "ProfileView":
        return cls(
            id=str(account.id),
            username=account.username,
            email=account.email,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
