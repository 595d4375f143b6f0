"""Attendee ORM model."""
import uuid
import enum
from sqlalchemy import Column, String, DateTime, Enum as SAEnum
from sqlalchemy.sql import func
from attendance.database import Base


class AttendeeCategory(str, enum.Enum):
    team = "Team"
    student = "Student"
    guest = "Guest"


class Attendee(Base):
    __tablename__ = "attendees"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    category = Column(
        SAEnum(AttendeeCategory, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    student_id = Column(String(50), nullable=True)
    organization = Column(String(200), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
