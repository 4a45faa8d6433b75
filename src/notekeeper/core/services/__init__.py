"""
Service layer interfaces and implementations.
"""

from .access_control import AccessGuard, Permission
from .auth_service import AuthService
from .collaboration_service import CollaborationService
from .health_service import HealthService
from .interfaces import IAuthService, ICollaborationService, IHealthService, INoteService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ICollaborationService",
    "IHealthService",
    # Implementations
    "AccessGuard",
    "Permission",
    "AuthService",
    "NoteService",
    "CollaborationService",
    "HealthService",
]
