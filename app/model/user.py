from sqlalchemy import Column, String, DateTime
from app.db.database import Base
from app.utility.identifier import new_id
from app.utility.time import utc_now


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    full_name = Column(String, nullable=False, index=True)
    avatar = Column(String, nullable=False)
    cover_image = Column(String, nullable=False, default="")
    password = Column(String, nullable=False)
    refresh_token = Column(String, nullable=True)  # single active refresh token
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
