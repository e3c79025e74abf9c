# ============================================================================
# FILE: openmusic/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from openmusic.db.base import Base

class Playlist(Base):
    """Playlist model for user-created playlists"""
    __tablename__ = "playlists"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    owner = Column(String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    owner_user = relationship("User", back_populates="playlists")
    songs = relationship("PlaylistSong", back_populates="playlist", cascade="all, delete-orphan")
    collaborations = relationship("Collaboration", back_populates="playlist", cascade="all, delete-orphan")
    activities = relationship("PlaylistSongActivity", back_populates="playlist", cascade="all, delete-orphan")

class PlaylistSong(Base):
    """Junction table for playlist songs"""
    __tablename__ = "playlist_songs"
    __table_args__ = (UniqueConstraint("playlist_id", "song_id", name="unique_playlist_song"),)

    id = Column(String(50), primary_key=True)
    playlist_id = Column(String(50), ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(String(50), ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    added_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    playlist = relationship("Playlist", back_populates="songs")
    song = relationship("Song", back_populates="playlist_entries")

class Collaboration(Base):
    """Grants a non-owner user access to a playlist"""
    __tablename__ = "collaborations"
    __table_args__ = (UniqueConstraint("playlist_id", "user_id", name="unique_playlist_user"),)

    id = Column(String(50), primary_key=True)
    playlist_id = Column(String(50), ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    playlist = relationship("Playlist", back_populates="collaborations")

class PlaylistSongActivity(Base):
    """Append-only log of songs added to or removed from a playlist

    song_id and user_id carry no foreign keys so that history survives the
    deletion of the song.
    """
    __tablename__ = "playlist_song_activities"

    id = Column(String(50), primary_key=True)
    playlist_id = Column(String(50), ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(String(50), nullable=False)
    user_id = Column(String(50), nullable=False)
    action = Column(String(10), nullable=False)  # "add" | "delete"
    time = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    playlist = relationship("Playlist", back_populates="activities")
