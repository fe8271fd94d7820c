from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.model.user import UserModel
from app.utility.identifier import new_id
from app.utility.time import utc_now

TWEET_MAX_LENGTH = 400


class TweetModel(Base):
    __tablename__ = "tweets"

    id = Column(String(32), primary_key=True, default=new_id)
    content = Column(String(TWEET_MAX_LENGTH), nullable=False)
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    owner = relationship(UserModel, lazy="joined")
