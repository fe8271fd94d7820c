from sqlalchemy import Column, String, ForeignKey, DateTime
from app.db.database import Base
from app.utility.time import utc_now


class WatchHistoryModel(Base):
    __tablename__ = "watch_history"

    user_id = Column(String(32), ForeignKey("users.id"), primary_key=True)
    video_id = Column(String(32), ForeignKey("videos.id"), primary_key=True, index=True)
    watched_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
