from sqlalchemy import Column, String, ForeignKey, DateTime, Float, Integer, Boolean, text
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.model.user import UserModel
from app.utility.identifier import new_id
from app.utility.time import utc_now


class VideoModel(Base):
    __tablename__ = "videos"

    id = Column(String(32), primary_key=True, default=new_id)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    video_file = Column(String, nullable=False)
    thumbnail = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    duration = Column(Float, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0, server_default=text("0"))
    is_published = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    owner = relationship(UserModel, lazy="joined")
