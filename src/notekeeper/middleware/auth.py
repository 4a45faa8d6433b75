"""Authentication middleware."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..dependencies import get_tokens
from ..core.errors import AuthenticationError
from ..security import TokenService


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication resolving the caller's user id."""

    def __init__(self):
        # missing credentials are reported through AuthenticationError, not HTTPBearer's own error
        super().__init__(auto_error=False)

    async def __call__(
        self, request: Request, tokens: TokenService = Depends(get_tokens)
    ) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise AuthenticationError("Not authenticated")

        # raises InvalidTokenError on bad signature, wrong type or expiry
        return tokens.verify_access_token(credentials.credentials)


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: UUID = Depends(JWTBearer())) -> UUID:
    """Get current authenticated user ID."""
    return user_id
