"""Authentication API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from ..core.schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..core.schemas.common import MessageResponse
from ..core.services import AuthService
from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user."""
    return await auth_service.register_user(request)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and get JWT tokens."""
    return await auth_service.login(request)


@router.post("/refresh", response_model=AccessTokenResponse)
async def refresh_token(
    request: RefreshTokenRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """Get a new access token using a refresh token."""
    return await auth_service.refresh(request)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: RefreshTokenRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """Revoke a refresh token."""
    await auth_service.logout(request)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    current_user_id: UUID = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Get current user profile."""
    return await auth_service.get_current_user(current_user_id)
