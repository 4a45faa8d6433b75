"""Notes API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from ..core.schemas.collaboration import NoteAccessResponse
from ..core.schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..dependencies import get_note_service
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    return await note_service.create_note(current_user_id, request)


@router.get("/", response_model=NoteListResponse)
async def list_notes(
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    tag: Optional[str] = Query(None, max_length=50),
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """List owned and shared notes, optionally filtered by tag."""
    return await note_service.list_notes(
        user_id=current_user_id, page=page, per_page=per_page, tag=tag
    )


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Get a specific note."""
    return await note_service.get_note(note_id, current_user_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Update a note."""
    return await note_service.update_note(note_id, current_user_id, request)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete a note."""
    await note_service.delete_note(note_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{note_id}/access", response_model=NoteAccessResponse)
async def check_note_access(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Show what the current user may do with a note."""
    return await note_service.check_note_access(note_id, current_user_id)
