# ============================================================================
# FILE: openmusic/db/models/user.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from openmusic.db.base import Base

class User(Base):
    """User model for authentication and playlist ownership"""
    __tablename__ = "users"

    id = Column(String(50), primary_key=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    fullname = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    playlists = relationship("Playlist", back_populates="owner_user", cascade="all, delete-orphan")
    album_likes = relationship("AlbumLike", back_populates="user", cascade="all, delete-orphan")

class Authentication(Base):
    """Refresh tokens that are currently valid"""
    __tablename__ = "authentications"

    token = Column(Text, primary_key=True)
