# ============================================================================
# FILE: openmusic/core/security.py
# Password hashing and JWT access/refresh tokens
# ============================================================================
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import secrets
import bcrypt
import jwt
from openmusic.config import Settings
from openmusic.core.exceptions import AuthenticationError, InvariantError

BCRYPT_ROUNDS = 10

def get_password_hash(password: str) -> str:
    """Hash a plain password with bcrypt"""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


class TokenManager:
    """Issues and verifies signed access/refresh tokens"""

    def __init__(self, settings: Settings):
        self.access_key = settings.ACCESS_TOKEN_KEY
        self.refresh_key = settings.REFRESH_TOKEN_KEY
        self.algorithm = settings.ALGORITHM
        self.access_token_age = settings.ACCESS_TOKEN_AGE

    def generate_access_token(self, payload: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """Create a short-lived access token carrying the given claims"""
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(seconds=self.access_token_age))
        to_encode = {**payload, "iat": now, "exp": expire}
        return jwt.encode(to_encode, self.access_key, algorithm=self.algorithm)

    def generate_refresh_token(self, payload: Dict[str, Any]) -> str:
        """
        Create a refresh token

        Refresh tokens do not expire on their own; they stay valid until
        deleted from the authentications table. A random jti keeps two tokens
        issued in the same second distinct.
        """
        to_encode = {
            **payload,
            "iat": datetime.now(timezone.utc),
            "jti": secrets.token_hex(8),
        }
        return jwt.encode(to_encode, self.refresh_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.access_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Access token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid access token")

    def verify_refresh_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.refresh_key, algorithms=[self.algorithm])
        except jwt.InvalidTokenError:
            raise InvariantError("Invalid refresh token")
