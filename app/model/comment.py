from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.model.user import UserModel
from app.utility.identifier import new_id
from app.utility.time import utc_now


class CommentModel(Base):
    __tablename__ = "comments"

    id = Column(String(32), primary_key=True, default=new_id)
    content = Column(String, nullable=False)
    video_id = Column(String(32), ForeignKey("videos.id"), nullable=False, index=True)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    owner = relationship(UserModel, lazy="joined")
