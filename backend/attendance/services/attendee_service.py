"""Attendee registry — create, update, delete and list registered people."""
import logging
from typing import Iterable, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from attendance.models.attendance_log import AttendanceLog
from attendance.models.attendee import Attendee, AttendeeCategory
from attendance.schemas.attendee import AttendeeCreate, AttendeeUpdate

logger = logging.getLogger(__name__)


def get_attendee(db: Session, attendee_id: str) -> Attendee:
    attendee = db.query(Attendee).filter(Attendee.id == attendee_id).first()
    if not attendee:
        raise HTTPException(status_code=404, detail="Attendee not found")
    return attendee


def list_attendees(db: Session, categories: Optional[Iterable[AttendeeCategory]] = None) -> list[Attendee]:
    """Attendees in any of ``categories`` (everyone when none given), by name."""
    query = db.query(Attendee)
    categories = list(categories or [])
    if categories:
        query = query.filter(Attendee.category.in_(categories))
    return query.order_by(Attendee.full_name).all()


def create_attendee(db: Session, payload: AttendeeCreate) -> Attendee:
    attendee = Attendee(**payload.model_dump())
    db.add(attendee)
    db.commit()
    db.refresh(attendee)
    logger.info("Created attendee %s (%s, %s)", attendee.id, attendee.full_name, attendee.category.value)
    return attendee


def update_attendee(db: Session, attendee_id: str, payload: AttendeeUpdate) -> Attendee:
    attendee = get_attendee(db, attendee_id)
    for field, value in payload.model_dump().items():
        setattr(attendee, field, value)
    db.commit()
    db.refresh(attendee)
    logger.info("Updated attendee %s", attendee_id)
    return attendee


def delete_attendee(db: Session, attendee_id: str) -> None:
    """Remove the attendee's attendance logs, then the attendee.

    The two deletes are committed separately; a failure on the second leaves
    the attendee without history.
    """
    attendee = get_attendee(db, attendee_id)
    removed = (
        db.query(AttendanceLog)
        .filter(AttendanceLog.attendee_id == attendee_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    db.delete(attendee)
    db.commit()
    logger.info("Deleted attendee %s and %d attendance log(s)", attendee_id, removed)
