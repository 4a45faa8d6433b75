"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from .collaboration import CollaboratorRequest, CollaboratorResponse, NoteAccessResponse
from .common import ErrorResponse, HealthCheckResponse, MessageResponse, PaginationResponse
from .notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "RefreshTokenRequest",
    "TokenResponse",
    "AccessTokenResponse",
    "UserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListResponse",
    # Collaboration schemas
    "CollaboratorRequest",
    "CollaboratorResponse",
    "NoteAccessResponse",
    # Common schemas
    "PaginationResponse",
    "ErrorResponse",
    "MessageResponse",
    "HealthCheckResponse",
]
