from sqlalchemy import Column, String, ForeignKey, DateTime, Integer
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.model.user import UserModel
from app.utility.identifier import new_id
from app.utility.time import utc_now


class PlaylistModel(Base):
    __tablename__ = "playlists"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    owner = relationship(UserModel, lazy="joined")


class PlaylistVideoModel(Base):
    """Ordered membership of a video in a playlist, one row per (playlist, video)"""
    __tablename__ = "playlist_videos"

    playlist_id = Column(String(32), ForeignKey("playlists.id"), primary_key=True)
    video_id = Column(String(32), ForeignKey("videos.id"), primary_key=True, index=True)
    position = Column(Integer, nullable=False)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
