"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, token refresh, logout, password recovery
- users/: Profile
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    RegisterResponse,
    LoginUseCase,
    RefreshTokenUseCase,
    LogoutUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .users import (
    GetProfileUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "RegisterResponse",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Users
    "GetProfileUseCase",
]
