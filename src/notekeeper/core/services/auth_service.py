"""Authentication service implementation.

Session lifecycle: login issues an access/refresh pair and records the
refresh token in the ledger; refresh trades a ledgered refresh token for a
new access token (the refresh token is not rotated); logout removes the
refresh token so it can never be exchanged again.
"""

import logging
from typing import Optional
from uuid import UUID

from ...security import TokenService, dummy_verify, hash_password, verify_password
from ..errors import REFRESH_TOKEN_NOT_RECOGNIZED, AuthenticationError, InvariantError, NotFoundError
from ..schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..storage import Stores
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

# same message for unknown user and wrong password
INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, stores: Stores, tokens: Optional[TokenService] = None):
        self.stores = stores
        self.tokens = tokens or TokenService()

    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user.

        Uniqueness is left to the store's insert so two concurrent
        registrations of one username cannot both succeed.
        """
        user = await self.stores.users.create_user(
            {
                "username": request.username,
                "password_hash": hash_password(request.password),
                "full_name": request.full_name,
            }
        )
        logger.info(f"Registered user {user.id}")
        return UserResponse.model_validate(user)

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Login user and return JWT tokens."""
        user = await self.stores.users.get_by_username(request.username)
        if user is None:
            dummy_verify()
            logger.warning("Login failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(request.password, user.password_hash):
            logger.warning("Login failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        access_token = self.tokens.issue_access_token(user.id)
        refresh_token = self.tokens.issue_refresh_token(user.id)
        await self.stores.refresh_tokens.add(refresh_token)

        logger.info(f"User {user.id} logged in")
        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            token_type="bearer",
            expires_in=self.tokens.access_token_ttl,
            user=UserResponse.model_validate(user),
        )

    async def refresh(self, request: RefreshTokenRequest) -> AccessTokenResponse:
        """Issue a new access token for a refresh token still in the ledger."""
        user_id = self.tokens.verify_refresh_token(request.refresh_token)

        if not await self.stores.refresh_tokens.contains(request.refresh_token):
            logger.warning(f"Refresh with unrecognized token for user {user_id}")
            raise InvariantError(REFRESH_TOKEN_NOT_RECOGNIZED)

        logger.info(f"Issued new access token for user {user_id}")
        return AccessTokenResponse(
            access_token=self.tokens.issue_access_token(user_id),
            token_type="bearer",
            expires_in=self.tokens.access_token_ttl,
        )

    async def logout(self, request: RefreshTokenRequest) -> None:
        """Revoke refresh token; a second logout with the same token fails."""
        await self.stores.refresh_tokens.remove(request.refresh_token)
        logger.info("Refresh token revoked")

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.stores.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)
