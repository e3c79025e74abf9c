# ============================================================================
# FILE: openmusic/api/endpoints/collaborations.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from openmusic.api.dependencies import (
    get_collaboration_service,
    get_playlist_service,
    require_current_user,
)
from openmusic.schemas.collaboration import CollaborationPayload
from openmusic.services.collaboration_service import CollaborationService
from openmusic.services.playlist_service import PlaylistService

router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
def post_collaboration(
    payload: CollaborationPayload,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    collaboration_service: CollaborationService = Depends(get_collaboration_service)
):
    """
    Add a collaborator to a playlist
    Only the playlist owner may do this
    """
    playlist_service.verify_playlist_owner(payload.playlist_id, user_id)
    collaboration_id = collaboration_service.add_collaboration(payload.playlist_id, payload.user_id)
    return {
        "status": "success",
        "message": "Collaboration added",
        "data": {"collaborationId": collaboration_id},
    }

@router.delete("")
def delete_collaboration(
    payload: CollaborationPayload,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    collaboration_service: CollaborationService = Depends(get_collaboration_service)
):
    """
    Remove a collaborator from a playlist
    Only the playlist owner may do this
    """
    playlist_service.verify_playlist_owner(payload.playlist_id, user_id)
    collaboration_service.delete_collaboration(payload.playlist_id, payload.user_id)
    return {"status": "success", "message": "Collaboration deleted"}
