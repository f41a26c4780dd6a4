"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- RegisterResponse: Output from use case (structured result)
"""

from pydantic import BaseModel

from codevault.domain.entities import Account


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    username: str
    email: str
    password: str


class AccountInfo(BaseModel):
    """Account information in authentication responses"""

    id: str
    username: str
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountInfo":
        return cls(id=str(account.id), username=account.username, email=account.email)


class RegisterResponse(BaseModel):
    """
    Register response - structured output from use case

    Decoupled from HTTP response format.
    """

    message: str
    account: AccountInfo
    access_token: str
    refresh_token: str
