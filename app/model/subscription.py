from sqlalchemy import Column, String, ForeignKey, DateTime, UniqueConstraint, CheckConstraint
from app.db.database import Base
from app.utility.identifier import new_id
from app.utility.time import utc_now


class SubscriptionModel(Base):
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("subscriber_id", "channel_id", name="uq_subscription"),
        CheckConstraint("subscriber_id <> channel_id", name="ck_subscription_not_self"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    subscriber_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    channel_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
