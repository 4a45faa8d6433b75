"""
Service interfaces for NoteKeeper.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..schemas.collaboration import CollaboratorRequest, CollaboratorResponse, NoteAccessResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Registration and session lifecycle."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and issue an access/refresh token pair."""
        pass

    @abstractmethod
    async def refresh(self, request: RefreshTokenRequest) -> AccessTokenResponse:
        """Exchange a ledgered refresh token for a new access token."""
        pass

    @abstractmethod
    async def logout(self, request: RefreshTokenRequest) -> None:
        """Revoke a refresh token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Delete note."""
        pass

    @abstractmethod
    async def list_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 20,
        tag: Optional[str] = None,
    ) -> NoteListResponse:
        """List owned and shared notes with pagination."""
        pass

    @abstractmethod
    async def check_note_access(self, note_id: UUID, user_id: UUID) -> NoteAccessResponse:
        """Check user note permissions."""
        pass


class ICollaborationService(ABC):
    """Note collaboration service."""

    @abstractmethod
    async def add_collaborator(
        self, user_id: UUID, note_id: UUID, request: CollaboratorRequest
    ) -> CollaboratorResponse:
        """Grant a user access to a note."""
        pass

    @abstractmethod
    async def remove_collaborator(
        self, user_id: UUID, note_id: UUID, collaborator_id: UUID
    ) -> None:
        """Revoke a user's access to a note."""
        pass

    @abstractmethod
    async def list_collaborators(self, user_id: UUID, note_id: UUID) -> List[CollaboratorResponse]:
        """List collaborators of a note."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
