# ============================================================================
# FILE: openmusic/db/models/album.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from openmusic.db.base import Base

class Album(Base):
    __tablename__ = "albums"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    cover = Column(Text, nullable=True)  # public URL of the uploaded cover
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    songs = relationship("Song", back_populates="album", cascade="all, delete-orphan")
    likes = relationship("AlbumLike", back_populates="album", cascade="all, delete-orphan")

class AlbumLike(Base):
    """Junction table for users liking albums"""
    __tablename__ = "user_album_likes"
    __table_args__ = (UniqueConstraint("user_id", "album_id", name="unique_user_album_like"),)

    id = Column(String(50), primary_key=True)
    user_id = Column(String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    album_id = Column(String(50), ForeignKey("albums.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="album_likes")
    album = relationship("Album", back_populates="likes")
