from sqlalchemy import Column, String, ForeignKey, DateTime, UniqueConstraint, CheckConstraint
from app.db.database import Base
from app.utility.identifier import new_id
from app.utility.time import utc_now


class LikeModel(Base):
    """A like on exactly one of a video, a comment or a tweet"""
    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("liked_by", "video_id", name="uq_like_video"),
        UniqueConstraint("liked_by", "comment_id", name="uq_like_comment"),
        UniqueConstraint("liked_by", "tweet_id", name="uq_like_tweet"),
        CheckConstraint(
            "(CASE WHEN video_id IS NULL THEN 0 ELSE 1 END)"
            " + (CASE WHEN comment_id IS NULL THEN 0 ELSE 1 END)"
            " + (CASE WHEN tweet_id IS NULL THEN 0 ELSE 1 END) = 1",
            name="ck_like_single_target"
        ),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    liked_by = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    video_id = Column(String(32), ForeignKey("videos.id"), nullable=True, index=True)
    comment_id = Column(String(32), ForeignKey("comments.id"), nullable=True, index=True)
    tweet_id = Column(String(32), ForeignKey("tweets.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
