"""EventSession ORM model — one dated occurrence of the event."""
import uuid
from sqlalchemy import Column, String, Date, Boolean, DateTime
from sqlalchemy.sql import func
from attendance.database import Base


class EventSession(Base):
    __tablename__ = "sessions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    is_active = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
