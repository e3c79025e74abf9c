# ============================================================================
# FILE: openmusic/services/user_service.py
# ============================================================================
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.user import User
from openmusic.schemas.user import UserCreate
from openmusic.core.exceptions import AuthenticationError, InvariantError, NotFoundError
from openmusic.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def __init__(self, db: Session):
        self.db = db

    def add_user(self, user_data: UserCreate) -> str:
        """Create a new user account and return its id"""
        self.verify_new_username(user_data.username)

        user = User(
            id=generate_id("user"),
            username=user_data.username,
            password=get_password_hash(user_data.password),
            fullname=user_data.fullname,
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Error creating user {user_data.username}: {e}")
            raise InvariantError("Failed to add user. Username is already taken")

        logger.info(f"User created: {user.username}")
        return user.id

    def verify_new_username(self, username: str) -> None:
        """Raise InvariantError if the username is already in use"""
        existing = self.db.query(User.id).filter(User.username == username).first()
        if existing:
            raise InvariantError("Failed to add user. Username is already taken")

    def get_user_by_id(self, user_id: str) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User not found")
        return user

    def verify_user_credential(self, username: str, password: str) -> str:
        """
        Check a username/password pair

        Returns:
            The id of the authenticated user
        """
        user = self.db.query(User).filter(User.username == username).first()
        if not user or not verify_password(password, user.password):
            raise AuthenticationError("The credentials you provided are wrong")
        return user.id
