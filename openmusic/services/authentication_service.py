# ============================================================================
# FILE: openmusic/services/authentication_service.py
# ============================================================================
from sqlalchemy.orm import Session
from openmusic.db.models.user import Authentication
from openmusic.core.exceptions import InvariantError
import logging

logger = logging.getLogger(__name__)

class AuthenticationService:
    """Persists the refresh tokens that are currently valid"""

    def __init__(self, db: Session):
        self.db = db

    def add_refresh_token(self, token: str) -> None:
        self.db.add(Authentication(token=token))
        self.db.commit()

    def verify_refresh_token(self, token: str) -> None:
        found = self.db.query(Authentication).filter(Authentication.token == token).first()
        if not found:
            raise InvariantError("Invalid refresh token")

    def delete_refresh_token(self, token: str) -> None:
        self.db.query(Authentication).filter(Authentication.token == token).delete()
        self.db.commit()
        logger.info("Refresh token revoked")
