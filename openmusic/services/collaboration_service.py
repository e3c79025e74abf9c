# ============================================================================
# FILE: openmusic/services/collaboration_service.py
# ============================================================================
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.playlist import Collaboration
from openmusic.services.user_service import UserService
from openmusic.core.cache import CacheService, playlists_key
from openmusic.core.exceptions import AuthorizationError, InvariantError
import logging

logger = logging.getLogger(__name__)

class CollaborationService:
    """Grants, revokes and verifies collaborator access to playlists"""

    def __init__(self, db: Session, user_service: UserService, cache: CacheService):
        self.db = db
        self.user_service = user_service
        self.cache = cache

    def add_collaboration(self, playlist_id: str, user_id: str) -> str:
        """
        Make a user a collaborator of a playlist

        Raises NotFoundError when the user does not exist and InvariantError
        when the user already collaborates on the playlist.
        """
        self.user_service.get_user_by_id(user_id)

        existing = self.db.query(Collaboration.id).filter(
            Collaboration.playlist_id == playlist_id,
            Collaboration.user_id == user_id
        ).first()
        if existing:
            raise InvariantError("Failed to add collaboration. User is already a collaborator")

        collaboration = Collaboration(
            id=generate_id("collab"),
            playlist_id=playlist_id,
            user_id=user_id,
        )
        try:
            self.db.add(collaboration)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Error adding collaboration on {playlist_id}: {e}")
            raise InvariantError("Failed to add collaboration")

        self.cache.delete(playlists_key(user_id))
        logger.info(f"Collaboration added: {user_id} on {playlist_id}")
        return collaboration.id

    def delete_collaboration(self, playlist_id: str, user_id: str) -> None:
        deleted = self.db.query(Collaboration).filter(
            Collaboration.playlist_id == playlist_id,
            Collaboration.user_id == user_id
        ).delete()
        if not deleted:
            raise InvariantError("Failed to delete collaboration")

        self.db.commit()
        self.cache.delete(playlists_key(user_id))
        logger.info(f"Collaboration removed: {user_id} from {playlist_id}")

    def verify_collaborator(self, playlist_id: str, user_id: str) -> None:
        found = self.db.query(Collaboration.id).filter(
            Collaboration.playlist_id == playlist_id,
            Collaboration.user_id == user_id
        ).first()
        if not found:
            raise AuthorizationError("Access denied")
