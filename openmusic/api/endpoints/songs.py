# ============================================================================
# FILE: openmusic/api/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from openmusic.api.dependencies import get_song_service
from openmusic.schemas.song import SongPayload
from openmusic.services.song_service import SongService

router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
def post_song(
    payload: SongPayload,
    song_service: SongService = Depends(get_song_service)
):
    song_id = song_service.add_song(payload)
    return {
        "status": "success",
        "message": "Song added",
        "data": {"songId": song_id},
    }

@router.get("")
def get_songs(
    title: Optional[str] = Query(None, description="Case-insensitive title filter"),
    performer: Optional[str] = Query(None, description="Case-insensitive performer filter"),
    song_service: SongService = Depends(get_song_service)
):
    songs = song_service.get_songs(title=title, performer=performer)
    return {"status": "success", "data": {"songs": songs}}

@router.get("/{song_id}")
def get_song(
    song_id: str,
    song_service: SongService = Depends(get_song_service)
):
    song = song_service.get_song_by_id(song_id)
    return {"status": "success", "data": {"song": song}}

@router.put("/{song_id}")
def put_song(
    song_id: str,
    payload: SongPayload,
    song_service: SongService = Depends(get_song_service)
):
    song_service.edit_song_by_id(song_id, payload)
    return {"status": "success", "message": "Song updated"}

@router.delete("/{song_id}")
def delete_song(
    song_id: str,
    song_service: SongService = Depends(get_song_service)
):
    song_service.delete_song_by_id(song_id)
    return {"status": "success", "message": "Song deleted"}
