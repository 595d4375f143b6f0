"""AttendanceLog ORM model — presence of one attendee at one session."""
import uuid
import enum
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, Enum as SAEnum
from sqlalchemy.sql import func
from attendance.database import Base


class AttendanceStatus(str, enum.Enum):
    present = "present"
    # Declared for the schema; only "present" is ever written.
    late = "late"
    early = "early"


class AttendanceLog(Base):
    __tablename__ = "attendance_logs"
    __table_args__ = (
        UniqueConstraint("attendee_id", "session_id", name="uq_attendance_logs_attendee_session"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    attendee_id = Column(String(36), ForeignKey("attendees.id"), nullable=False, index=True)
    session_id = Column(String(36), ForeignKey("sessions.id"), nullable=False, index=True)
    scanned_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    status = Column(SAEnum(AttendanceStatus), nullable=False, default=AttendanceStatus.present)
