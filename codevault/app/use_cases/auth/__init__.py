"""
Authentication Use Cases

Registration, login, token refresh, logout and password recovery.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, RegisterResponse, AccountInfo
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    LoginResponse,
    LogoutResponse,
    RefreshTokenResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "LogoutResponse",
    "RefreshTokenResponse",
    "ForgotPasswordResponse",
    "ResetPasswordResponse",
    # DTOs - Nested Models
    "AccountInfo",
]
