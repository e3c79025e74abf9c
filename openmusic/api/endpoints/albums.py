# ============================================================================
# FILE: openmusic/api/endpoints/albums.py
# ============================================================================
from fastapi import APIRouter, Depends, File, Request, Response, UploadFile, status
from openmusic.api.dependencies import (
    get_album_like_service,
    get_album_service,
    get_context,
    require_current_user,
)
from openmusic.context import AppContext
from openmusic.core.cache import CACHE_HEADER, CACHE_HEADER_VALUE
from openmusic.core.exceptions import PayloadTooLargeError, ValidationError
from openmusic.schemas.album import IMAGE_CONTENT_TYPES, AlbumPayload
from openmusic.services.album_like_service import AlbumLikeService
from openmusic.services.album_service import AlbumService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
def post_album(
    payload: AlbumPayload,
    album_service: AlbumService = Depends(get_album_service)
):
    album_id = album_service.add_album(payload)
    return {
        "status": "success",
        "message": "Album added",
        "data": {"albumId": album_id},
    }

@router.get("")
def get_albums(album_service: AlbumService = Depends(get_album_service)):
    return {"status": "success", "data": {"albums": album_service.get_albums()}}

@router.get("/{album_id}")
def get_album(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service)
):
    """
    Get an album with the songs that belong to it
    """
    album = album_service.get_album_by_id(album_id)
    return {"status": "success", "data": {"album": album}}

@router.put("/{album_id}")
def put_album(
    album_id: str,
    payload: AlbumPayload,
    album_service: AlbumService = Depends(get_album_service)
):
    album_service.edit_album_by_id(album_id, payload)
    return {"status": "success", "message": "Album updated"}

@router.delete("/{album_id}")
def delete_album(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service)
):
    album_service.delete_album_by_id(album_id)
    return {"status": "success", "message": "Album deleted"}

@router.post("/{album_id}/covers", status_code=status.HTTP_201_CREATED)
def post_album_cover(
    album_id: str,
    request: Request,
    cover: UploadFile = File(...),
    album_service: AlbumService = Depends(get_album_service),
    context: AppContext = Depends(get_context)
):
    """
    Upload a cover image for an album (multipart field "cover")
    """
    if cover.content_type not in IMAGE_CONTENT_TYPES:
        raise ValidationError("Cover must be an image")

    album_service.verify_album_exists(album_id)

    max_bytes = context.settings.MAX_COVER_BYTES
    content = cover.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise PayloadTooLargeError(f"Cover must not exceed {max_bytes} bytes")

    filename = context.storage.write_file(content, cover.filename)
    cover_url = str(request.url_for("covers", path=filename))
    previous_url = album_service.add_cover_url(album_id, cover_url)
    if previous_url:
        context.storage.delete_file(previous_url.rsplit("/", 1)[-1])

    return {"status": "success", "message": "Cover uploaded"}

@router.post("/{album_id}/likes", status_code=status.HTTP_201_CREATED)
def post_album_like(
    album_id: str,
    user_id: str = Depends(require_current_user),
    album_service: AlbumService = Depends(get_album_service),
    album_like_service: AlbumLikeService = Depends(get_album_like_service)
):
    album_service.verify_album_exists(album_id)
    album_like_service.add_like(user_id, album_id)
    return {"status": "success", "message": "Album liked"}

@router.get("/{album_id}/likes")
def get_album_likes(
    album_id: str,
    response: Response,
    album_like_service: AlbumLikeService = Depends(get_album_like_service)
):
    likes, from_cache = album_like_service.get_likes_count(album_id)
    if from_cache:
        response.headers[CACHE_HEADER] = CACHE_HEADER_VALUE
    return {"status": "success", "data": {"likes": likes}}

@router.delete("/{album_id}/likes")
def delete_album_like(
    album_id: str,
    user_id: str = Depends(require_current_user),
    album_like_service: AlbumLikeService = Depends(get_album_like_service)
):
    album_like_service.delete_like(user_id, album_id)
    return {"status": "success", "message": "Album unliked"}
