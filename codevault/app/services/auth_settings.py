"""
Immutable authentication settings.

Built once from ApplicationConfig at startup and handed to every component
constructor. Business logic never reads ApplicationConfig directly.
"""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AuthSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token_secret: str = Field(..., min_length=1)
    refresh_token_secret: str = Field(..., min_length=1)
    access_token_ttl: timedelta = timedelta(hours=1)
    refresh_token_ttl: timedelta = timedelta(days=7)
    token_leeway: timedelta = timedelta(0)

    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    reset_token_ttl: timedelta = timedelta(minutes=15)
    frontend_url: str = "http://localhost:5173"

    access_token_cookie_name: str = "accessToken"
    cookie_secure: bool = False

    @model_validator(mode="after")
    def _independent_secrets(self) -> "AuthSettings":
        if self.access_token_secret == self.refresh_token_secret:
            raise ValueError("Access and refresh token secrets must differ")
        return self

    @classmethod
    def from_config(cls, config) -> "AuthSettings":
        if config is None:
            raise ValueError("Application configuration is required")
        return cls(
            access_token_secret=config.ACCESS_TOKEN_SECRET,
            refresh_token_secret=config.REFRESH_TOKEN_SECRET,
            access_token_ttl=timedelta(minutes=config.ACCESS_TOKEN_TTL_MINUTES),
            refresh_token_ttl=timedelta(days=config.REFRESH_TOKEN_TTL_DAYS),
            token_leeway=timedelta(seconds=config.TOKEN_LEEWAY_SECONDS),
            bcrypt_rounds=config.BCRYPT_ROUNDS,
            reset_token_ttl=timedelta(minutes=config.RESET_TOKEN_TTL_MINUTES),
            frontend_url=config.FRONTEND_URL,
            access_token_cookie_name=config.ACCESS_TOKEN_COOKIE_NAME,
            cookie_secure=config.COOKIE_SECURE,
        )
