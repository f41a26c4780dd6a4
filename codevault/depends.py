from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from codevault.adapter.services.email_sender import LoggingEmailSender, SmtpEmailSender
from codevault.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from codevault.api.error import ClientError
from codevault.app.services.auth_settings import AuthSettings
from codevault.app.services.email_sender import IEmailSender
from codevault.app.services.notifications import AccountNotifier
from codevault.app.services.password_hasher import PasswordHasher
from codevault.app.services.reset_token_generator import ResetTokenGenerator
from codevault.app.services.session_guard import SessionGuard
from codevault.app.services.token_codec import TokenCodec
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.app.use_cases.users.dtos import ProfileView

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Built once at startup; components only ever see these objects
auth_settings = AuthSettings.from_config(ApplicationConfig)
password_hasher = PasswordHasher(rounds=auth_settings.bcrypt_rounds)
token_codec = TokenCodec(auth_settings)
reset_token_generator = ResetTokenGenerator()

if ApplicationConfig.SMTP_ENABLED:
    email_sender: IEmailSender = SmtpEmailSender.from_config(ApplicationConfig)
else:
    email_sender = LoggingEmailSender()

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_auth_settings() -> AuthSettings:
    return auth_settings


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_token_codec() -> TokenCodec:
    return token_codec


def get_reset_token_generator() -> ResetTokenGenerator:
    return reset_token_generator


def get_email_sender() -> IEmailSender:
    return email_sender


def get_account_notifier(
    sender: IEmailSender = Depends(get_email_sender),
) -> AccountNotifier:
    return AccountNotifier(sender)


async def get_current_account(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
    codec: TokenCodec = Depends(get_token_codec),
    settings: AuthSettings = Depends(get_auth_settings),
) -> ProfileView:
    """
    Dependency that resolves the authenticated account.

    The access token cookie takes precedence over the Authorization header;
    see SessionGuard.

    Returns:
        ProfileView of the current account (no password or reset fields)

    Raises:
        ClientError: 401 UNAUTHENTICATED for a missing, invalid or expired
        token, or an account deleted since the token was issued
    """
    cookie_token = request.cookies.get(settings.access_token_cookie_name)
    authorization = (
        f"{credentials.scheme} {credentials.credentials}" if credentials else None
    )

    guard = SessionGuard(uow, codec)
    result = await guard.authenticate(cookie_token, authorization)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
