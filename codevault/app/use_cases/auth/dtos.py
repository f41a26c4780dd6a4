"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
"""

from pydantic import BaseModel

from .register_dto import AccountInfo


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for login use case"""

    message: str
    account: AccountInfo
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    status: str
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str
