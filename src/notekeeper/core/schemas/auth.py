"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
access/refresh token lifecycle.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=50, description="Unique username")
    password: str = Field(min_length=8, max_length=128, description="User password")
    full_name: str = Field(min_length=1, max_length=100, description="Display name")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        if not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "new_user",
                "password": "securepassword123",
                "full_name": "New User",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema.

    No format rules beyond presence: a malformed username must fail the
    same way as a wrong password.
    """

    username: str = Field(min_length=1, max_length=128, description="Username")
    password: str = Field(min_length=1, max_length=128, description="User password")


class RefreshTokenRequest(BaseModel):
    """Body for refresh and logout: the refresh token issued at login."""

    refresh_token: str = Field(min_length=1, description="JWT refresh token")

    model_config = ConfigDict(
        json_schema_extra={"example": {"refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}}
    )


class UserResponse(BaseModel):
    """User information response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    full_name: str = Field(description="Full name")
    created_at: datetime = Field(description="Account creation timestamp")


class AccessTokenResponse(BaseModel):
    """New access token returned by refresh."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Access token lifetime in seconds")


class TokenResponse(AccessTokenResponse):
    """Token pair returned by login."""

    refresh_token: str = Field(description="JWT refresh token")
    user: UserResponse = Field(description="User information")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 1800,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "user123",
                    "full_name": "User Name",
                    "created_at": "2025-09-13T10:30:00Z",
                },
            }
        }
    )
