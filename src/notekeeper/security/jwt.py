"""JWT token utilities.

Access tokens are short-lived and verified by signature and expiry alone.
Refresh tokens are signed with a separate secret and are only honoured
while they sit in the revocation ledger (see AuthService).
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import Settings, get_settings
from ..core.errors import InvalidTokenError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class TokenService:
    """Issues and verifies access and refresh tokens."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def access_token_ttl(self) -> int:
        """Access token lifetime in seconds."""
        return self.settings.access_token_expire_seconds

    def issue_access_token(self, user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
        """Create signed access token carrying the user id."""
        expires_delta = expires_delta or timedelta(seconds=self.access_token_ttl)
        return self._encode(
            user_id,
            ACCESS_TOKEN_TYPE,
            self.settings.access_token_secret_key,
            expires_delta,
        )

    def issue_refresh_token(self, user_id: UUID) -> str:
        """Create signed refresh token; the caller must record it in the ledger."""
        expires_delta = None
        if self.settings.refresh_token_expire_days:
            expires_delta = timedelta(days=self.settings.refresh_token_expire_days)
        return self._encode(
            user_id,
            REFRESH_TOKEN_TYPE,
            self.settings.refresh_token_secret_key,
            expires_delta,
        )

    def verify_access_token(self, token: str) -> UUID:
        """Return the user id of a valid access token."""
        return self._decode(token, ACCESS_TOKEN_TYPE, self.settings.access_token_secret_key)

    def verify_refresh_token(self, token: str) -> UUID:
        """Return the user id of a validly signed refresh token."""
        return self._decode(token, REFRESH_TOKEN_TYPE, self.settings.refresh_token_secret_key)

    def _encode(
        self,
        user_id: UUID,
        token_type: str,
        secret: str,
        expires_delta: Optional[timedelta],
    ) -> str:
        now = datetime.now(timezone.utc)
        # jti keeps tokens issued in the same second distinct
        to_encode: Dict[str, Any] = {
            "sub": str(user_id),
            "type": token_type,
            "iat": now,
            "jti": str(uuid.uuid4()),
        }
        if expires_delta is not None:
            to_encode["exp"] = now + expires_delta
        return jwt.encode(to_encode, secret, algorithm=self.settings.algorithm)

    def _decode(self, token: str, expected_type: str, secret: str) -> UUID:
        try:
            payload = jwt.decode(token, secret, algorithms=[self.settings.algorithm])
        except JWTError as exc:
            raise InvalidTokenError() from exc

        if payload.get("type") != expected_type:
            raise InvalidTokenError()

        subject = payload.get("sub")
        if not isinstance(subject, str):
            raise InvalidTokenError()
        try:
            return UUID(subject)
        except ValueError as exc:
            raise InvalidTokenError() from exc
