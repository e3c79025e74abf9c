# ============================================================================
# FILE: openmusic/api/endpoints/exports.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from openmusic.api.dependencies import get_context, get_playlist_service, require_current_user
from openmusic.context import AppContext
from openmusic.schemas.export import ExportPlaylistPayload
from openmusic.services.playlist_service import PlaylistService

router = APIRouter()

@router.post("/playlists/{playlist_id}", status_code=status.HTTP_201_CREATED)
def post_export_playlist(
    playlist_id: str,
    payload: ExportPlaylistPayload,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    context: AppContext = Depends(get_context)
):
    """
    Queue an export of the playlist to be emailed to targetEmail
    Requires ownership
    """
    playlist_service.verify_playlist_owner(playlist_id, user_id)

    message = {
        "playlistId": playlist_id,
        "targetEmail": payload.target_email,
    }
    context.producer.send_message(context.settings.EXPORT_QUEUE, message)

    return {"status": "success", "message": "Your request is being processed"}
