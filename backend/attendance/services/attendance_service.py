"""Attendance recorder — presence is the existence of a log row."""
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from attendance.models.attendance_log import AttendanceLog, AttendanceStatus
from attendance.services.attendee_service import get_attendee
from attendance.services.session_service import get_session

logger = logging.getLogger(__name__)


def find_log(db: Session, attendee_id: str, session_id: str) -> Optional[AttendanceLog]:
    return (
        db.query(AttendanceLog)
        .filter(AttendanceLog.attendee_id == attendee_id, AttendanceLog.session_id == session_id)
        .first()
    )


def list_logs(db: Session, session_ids: Optional[Iterable[str]] = None) -> list[AttendanceLog]:
    query = db.query(AttendanceLog)
    if session_ids is not None:
        query = query.filter(AttendanceLog.session_id.in_(list(session_ids)))
    return query.order_by(AttendanceLog.scanned_at).all()


def record_presence(db: Session, attendee_id: str, session_id: str) -> tuple[AttendanceLog, bool]:
    """Insert a ``present`` log unless one exists. Returns ``(log, created)``.

    The existence check and the insert are separate statements. When a
    concurrent insert wins the race the unique constraint rejects ours and the
    winner's row is returned instead.
    """
    existing = find_log(db, attendee_id, session_id)
    if existing:
        return existing, False

    log = AttendanceLog(
        attendee_id=attendee_id,
        session_id=session_id,
        scanned_at=datetime.now(timezone.utc),
        status=AttendanceStatus.present,
    )
    db.add(log)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = find_log(db, attendee_id, session_id)
        if existing is None:
            raise
        logger.warning("Concurrent check-in for attendee %s at session %s", attendee_id, session_id)
        return existing, False
    db.refresh(log)
    logger.info("Marked attendee %s present at session %s", attendee_id, session_id)
    return log, True


def mark_present(db: Session, attendee_id: str, session_id: str) -> tuple[AttendanceLog, bool]:
    get_attendee(db, attendee_id)
    get_session(db, session_id)
    return record_presence(db, attendee_id, session_id)


def mark_absent(db: Session, attendee_id: str, session_id: str) -> int:
    """Delete any log for the pair; returns how many rows went."""
    removed = (
        db.query(AttendanceLog)
        .filter(AttendanceLog.attendee_id == attendee_id, AttendanceLog.session_id == session_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Marked attendee %s absent at session %s (%d row(s) removed)", attendee_id, session_id, removed)
    return removed
