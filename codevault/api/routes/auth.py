from fastapi import APIRouter, BackgroundTasks, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from codevault.api.error import ClientError, ServerError
from codevault.app.services.auth_settings import AuthSettings
from codevault.app.services.email_sender import IEmailSender
from codevault.app.services.notifications import AccountNotifier
from codevault.app.services.password_hasher import PasswordHasher
from codevault.app.services.reset_token_generator import ResetTokenGenerator
from codevault.app.services.token_codec import TokenCodec
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    LoginResponse,
    LogoutResponse,
    RefreshTokenResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)
from codevault.depends import (
    get_account_notifier,
    get_auth_settings,
    get_email_sender,
    get_password_hasher,
    get_reset_token_generator,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _set_access_cookie(response: Response, token: str, settings: AuthSettings) -> None:
    response.set_cookie(
        key=settings.access_token_cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=int(settings.access_token_ttl.total_seconds()),
    )


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    username: str = Field(..., min_length=1, max_length=64, description="Unique username")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password (8 chars minimum, 72 bytes maximum)")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_codec: TokenCodec = Depends(get_token_codec),
    notifier: AccountNotifier = Depends(get_account_notifier),
):
    """
    Register a new account

    Creates the account and returns an access token and a refresh token.
    A welcome email is sent after the response, best effort.

    Raises:
        - 409 Conflict: Username or email already exists
        - 400 Bad Request: Password or username rejected
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, password_hasher, token_codec)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code in ("INVALID_PASSWORD", "INVALID_USERNAME"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    response = result.value
    background_tasks.add_task(
        notifier.send_welcome, response.account.email, response.account.username
    )
    return response


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    identity is an email address or a username.
    """

    identity: str = Field(..., min_length=1, description="Email or username")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_codec: TokenCodec = Depends(get_token_codec),
    notifier: AccountNotifier = Depends(get_account_notifier),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Login

    Returns a fresh access/refresh token pair and sets the access token as an
    HttpOnly cookie. A sign-in notification is sent after the response,
    best effort.

    Raises:
        - 401 Unauthorized: Invalid credentials (same for unknown account
          and wrong password)
    """
    use_case = LoginUseCase(uow, password_hasher, token_codec)
    result = await use_case.execute(request.identity, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    login_response = result.value
    _set_access_cookie(response, login_response.access_token, settings)
    background_tasks.add_task(
        notifier.send_login_alert,
        login_response.account.email,
        login_response.account.username,
    )
    return login_response


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(
    request: RefreshRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: TokenCodec = Depends(get_token_codec),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Refresh tokens

    Raises:
        - 401 Unauthorized: Invalid or expired refresh token, or account gone
    """
    use_case = RefreshTokenUseCase(uow, token_codec)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    _set_access_cookie(response, result.value.access_token, settings)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(response: Response, settings: AuthSettings = Depends(get_auth_settings)):
    """
    Logout

    Clears the access token cookie. Tokens are stateless, so nothing is
    revoked server-side; clients must discard the tokens they hold.
    """
    result = await LogoutUseCase().execute()

    response.delete_cookie(
        key=settings.access_token_cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=ForgotPasswordResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    reset_token_generator: ResetTokenGenerator = Depends(get_reset_token_generator),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Forgot Password

    Emails a single-use reset link valid for 15 minutes.

    Security:
        - No email enumeration (same response for known and unknown emails)
        - Only the SHA-256 digest of the token is stored

    Raises:
        - 503 Service Unavailable: The reset email could not be sent; retry later
    """
    use_case = ForgotPasswordUseCase(uow, email_sender, reset_token_generator, settings)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_DELIVERY_FAILED":
            raise ServerError(
                error,
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                expose_message=True,
            )
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Password reset token from email")
    new_password: str = Field(..., description="New password (8 chars minimum, 72 bytes maximum)")


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    reset_token_generator: ResetTokenGenerator = Depends(get_reset_token_generator),
):
    """
    Reset Password

    Sets a new password and invalidates the reset token in the same update.

    Raises:
        - 400 Bad Request: Invalid or expired token (indistinguishable),
          or password rejected
    """
    use_case = ResetPasswordUseCase(uow, password_hasher, reset_token_generator)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_OR_EXPIRED_TOKEN", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
