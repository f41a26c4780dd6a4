"""
Session token codec

Access and refresh tokens are HS256 JWTs carrying:
    sub   - account id
    iat   - issued at (unix seconds)
    exp   - iat + ttl
    type  - "access" or "refresh"
    email - only on tokens issued at login

Each token type is signed with its own secret.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, Callable, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt
from pydantic import BaseModel

from codevault.app.services.auth_settings import AuthSettings
from codevault.domain.time import utc_now

ALGORITHM = "HS256"
ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class TokenClaims(BaseModel):
    """Verified token payload"""

    account_id: UUID
    token_type: str
    issued_at: datetime
    expires_at: datetime
    email: Optional[str] = None


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str


def _timestamp(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return int(moment.timestamp())


def _from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value, UTC).replace(tzinfo=None)


class TokenCodec:
    def __init__(self, settings: AuthSettings, clock: Callable[[], datetime] = utc_now):
        if settings is None:
            raise ValueError("AuthSettings is required")
        self._settings = settings
        self._clock = clock

    def issue(
        self,
        claims: Dict[str, Any],
        secret: str,
        ttl: timedelta,
        now: Optional[datetime] = None,
    ) -> str:
        issued_at = _timestamp(now or self._clock())
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + int(ttl.total_seconds())
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    def verify(
        self,
        token: str,
        secret: str,
        token_type: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[TokenClaims]:
        """
        Verify signature, structure and expiry.

        Returns None for a malformed token, a bad signature, missing claims,
        an unexpected token type, or when now is past exp (plus the configured
        leeway, zero by default).
        """
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={
                    # Expiry is checked below against the injected clock.
                    # require_exp would switch verify_exp back on, so exp and
                    # iat presence is checked after decoding.
                    "verify_exp": False,
                    "require_sub": True,
                },
            )
        except JWTError:
            return None

        exp = payload.get("exp")
        iat = payload.get("iat")
        if not isinstance(exp, int) or not isinstance(iat, int):
            return None

        now_ts = _timestamp(now or self._clock())
        if now_ts > exp + int(self._settings.token_leeway.total_seconds()):
            return None

        if token_type is not None and payload.get("type") != token_type:
            return None

        try:
            account_id = UUID(payload["sub"])
        except (ValueError, TypeError):
            return None

        return TokenClaims(
            account_id=account_id,
            token_type=payload.get("type", ""),
            issued_at=_from_timestamp(iat),
            expires_at=_from_timestamp(exp),
            email=payload.get("email"),
        )

    def issue_pair(
        self,
        account_id: UUID,
        email: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> TokenPair:
        now = now or self._clock()
        access_claims: Dict[str, Any] = {"sub": str(account_id), "type": ACCESS_TOKEN_TYPE}
        if email is not None:
            access_claims["email"] = email
        access_token = self.issue(
            access_claims,
            self._settings.access_token_secret,
            self._settings.access_token_ttl,
            now=now,
        )
        refresh_token = self.issue(
            {"sub": str(account_id), "type": REFRESH_TOKEN_TYPE},
            self._settings.refresh_token_secret,
            self._settings.refresh_token_ttl,
            now=now,
        )
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def verify_access(self, token: str, now: Optional[datetime] = None) -> Optional[TokenClaims]:
        return self.verify(
            token, self._settings.access_token_secret, ACCESS_TOKEN_TYPE, now=now
        )

    def verify_refresh(self, token: str, now: Optional[datetime] = None) -> Optional[TokenClaims]:
        return self.verify(
            token, self._settings.refresh_token_secret, REFRESH_TOKEN_TYPE, now=now
        )
