# ============================================================================
# FILE: openmusic/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from openmusic.db.base import Base

class Song(Base):
    __tablename__ = "songs"

    id = Column(String(50), primary_key=True)
    title = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    genre = Column(String(50), nullable=False)
    performer = Column(String(100), nullable=False)
    duration = Column(Integer, nullable=True)  # seconds
    album_id = Column(String(50), ForeignKey("albums.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    album = relationship("Album", back_populates="songs")
    playlist_entries = relationship("PlaylistSong", back_populates="song", cascade="all, delete-orphan")
