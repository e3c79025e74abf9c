# ============================================================================
# FILE: openmusic/api/endpoints/playlists.py
# ============================================================================
from fastapi import APIRouter, Depends, Response, status
from openmusic.api.dependencies import (
    get_activity_service,
    get_playlist_service,
    get_playlist_song_service,
    require_current_user,
)
from openmusic.core.cache import CACHE_HEADER, CACHE_HEADER_VALUE
from openmusic.schemas.playlist import PlaylistCreate, PlaylistSongPayload
from openmusic.services.activity_service import ACTION_ADD, ACTION_DELETE, ActivityService
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.playlist_song_service import PlaylistSongService

router = APIRouter()

def mark_cached(response: Response, from_cache: bool) -> None:
    if from_cache:
        response.headers[CACHE_HEADER] = CACHE_HEADER_VALUE

@router.post("", status_code=status.HTTP_201_CREATED)
def post_playlist(
    playlist_data: PlaylistCreate,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service)
):
    """
    Create a new playlist owned by the caller
    """
    playlist_id = playlist_service.add_playlist(playlist_data.name, user_id)
    return {
        "status": "success",
        "message": "Playlist added",
        "data": {"playlistId": playlist_id},
    }

@router.get("")
def get_playlists(
    response: Response,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service)
):
    """
    Get playlists the caller owns or collaborates on
    """
    playlists, from_cache = playlist_service.get_playlists(user_id)
    mark_cached(response, from_cache)
    return {"status": "success", "data": {"playlists": playlists}}

@router.delete("/{playlist_id}")
def delete_playlist(
    playlist_id: str,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service)
):
    """
    Delete a playlist
    Requires ownership
    """
    playlist_service.verify_playlist_owner(playlist_id, user_id)
    playlist_service.delete_playlist_by_id(playlist_id)
    return {"status": "success", "message": "Playlist deleted"}

@router.post("/{playlist_id}/songs", status_code=status.HTTP_201_CREATED)
def post_song_to_playlist(
    playlist_id: str,
    payload: PlaylistSongPayload,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    playlist_song_service: PlaylistSongService = Depends(get_playlist_song_service),
    activity_service: ActivityService = Depends(get_activity_service)
):
    """
    Add a song to a playlist
    Requires ownership or collaboration
    """
    playlist_service.verify_playlist_access(playlist_id, user_id)
    playlist_song_service.add_song_to_playlist(playlist_id, payload.song_id)
    activity_service.record(playlist_id, payload.song_id, user_id, ACTION_ADD)
    return {"status": "success", "message": "Song added to playlist"}

@router.get("/{playlist_id}/songs")
def get_songs_from_playlist(
    playlist_id: str,
    response: Response,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    playlist_song_service: PlaylistSongService = Depends(get_playlist_song_service)
):
    """
    Get a playlist with its songs
    Access is checked on every request, cached or not
    """
    playlist_service.verify_playlist_access(playlist_id, user_id)
    playlist, from_cache = playlist_song_service.get_playlist_with_songs(playlist_id)
    mark_cached(response, from_cache)
    return {"status": "success", "data": {"playlist": playlist}}

@router.delete("/{playlist_id}/songs")
def delete_song_from_playlist(
    playlist_id: str,
    payload: PlaylistSongPayload,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    playlist_song_service: PlaylistSongService = Depends(get_playlist_song_service),
    activity_service: ActivityService = Depends(get_activity_service)
):
    """
    Remove a song from a playlist
    Requires ownership or collaboration
    """
    playlist_service.verify_playlist_access(playlist_id, user_id)
    playlist_song_service.delete_song_from_playlist(playlist_id, payload.song_id)
    activity_service.record(playlist_id, payload.song_id, user_id, ACTION_DELETE)
    return {"status": "success", "message": "Song removed from playlist"}

@router.get("/{playlist_id}/activities")
def get_playlist_activities(
    playlist_id: str,
    response: Response,
    user_id: str = Depends(require_current_user),
    playlist_service: PlaylistService = Depends(get_playlist_service),
    activity_service: ActivityService = Depends(get_activity_service)
):
    """
    Get the add/delete history of a playlist
    """
    playlist_service.verify_playlist_access(playlist_id, user_id)
    activities, from_cache = activity_service.get_activities(playlist_id)
    mark_cached(response, from_cache)
    return {
        "status": "success",
        "data": {"playlistId": playlist_id, "activities": activities},
    }
