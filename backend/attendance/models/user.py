"""AdminUser ORM model — accounts allowed into the back office."""
import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from attendance.database import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    user_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
