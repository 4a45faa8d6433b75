"""Collaborator API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ..core.schemas.collaboration import CollaboratorRequest, CollaboratorResponse
from ..core.services import CollaborationService
from ..dependencies import get_collaboration_service
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes/{note_id}/collaborators", tags=["collaborators"])


@router.get("/", response_model=List[CollaboratorResponse])
async def list_collaborators(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    service: CollaborationService = Depends(get_collaboration_service),
):
    """List collaborators of a note."""
    return await service.list_collaborators(current_user_id, note_id)


@router.post("/", response_model=CollaboratorResponse, status_code=status.HTTP_201_CREATED)
async def add_collaborator(
    note_id: UUID,
    request: CollaboratorRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    service: CollaborationService = Depends(get_collaboration_service),
):
    """Give another user read/update access to a note."""
    return await service.add_collaborator(current_user_id, note_id, request)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_collaborator(
    note_id: UUID,
    user_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    service: CollaborationService = Depends(get_collaboration_service),
):
    """Revoke a collaborator's access."""
    await service.remove_collaborator(current_user_id, note_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
