"""Session registry — event days and the single active session.

Activation is two sequenced writes: every session is deactivated, then the
target one is activated. Nothing makes the pair atomic, so two concurrent
activations can interleave and leave two sessions active.
"""
import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from attendance.models.attendance_log import AttendanceLog
from attendance.models.attendee import Attendee
from attendance.models.event_session import EventSession
from attendance.services import stats_service

logger = logging.getLogger(__name__)


def get_session(db: Session, session_id: str) -> EventSession:
    session = db.query(EventSession).filter(EventSession.id == session_id).first()
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def get_active_session(db: Session) -> Optional[EventSession]:
    return (
        db.query(EventSession)
        .filter(EventSession.is_active.is_(True))
        .order_by(EventSession.date.desc())
        .first()
    )


def deactivate_all_sessions(db: Session) -> int:
    """First activation step: clear the active flag everywhere."""
    count = (
        db.query(EventSession)
        .filter(EventSession.is_active.is_(True))
        .update({EventSession.is_active: False}, synchronize_session=False)
    )
    db.commit()
    return count


def activate_session(db: Session, session_id: str) -> EventSession:
    """Second activation step: flag one session as active."""
    session = get_session(db, session_id)
    session.is_active = True
    db.commit()
    db.refresh(session)
    return session


def create_session(db: Session, title: str, day: date, set_active: bool = False) -> EventSession:
    if set_active:
        deactivate_all_sessions(db)

    session = EventSession(title=title, date=day, is_active=set_active)
    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info("Created session '%s' on %s (%s, active=%s)", title, day, session.id, set_active)
    return session


def update_session(db: Session, session_id: str, title: str, day: date) -> EventSession:
    """Change title and date; the active flag is left alone."""
    session = get_session(db, session_id)
    session.title = title
    session.date = day
    db.commit()
    db.refresh(session)
    logger.info("Updated session %s", session_id)
    return session


def toggle_active(db: Session, session_id: str, is_active: bool) -> EventSession:
    session = get_session(db, session_id)
    if is_active:
        deactivate_all_sessions(db)
        session = activate_session(db, session_id)
    else:
        session.is_active = False
        db.commit()
        db.refresh(session)
    logger.info("Session %s is_active=%s", session_id, is_active)
    return session


def delete_session(db: Session, session_id: str) -> None:
    """Remove the session's attendance logs, then the session itself."""
    session = get_session(db, session_id)
    removed = (
        db.query(AttendanceLog)
        .filter(AttendanceLog.session_id == session_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    db.delete(session)
    db.commit()
    logger.info("Deleted session %s and %d attendance log(s)", session_id, removed)


def list_sessions_with_counts(db: Session) -> list[dict]:
    """All sessions, newest first, each with its present count."""
    counts = dict(
        db.query(AttendanceLog.session_id, func.count(func.distinct(AttendanceLog.attendee_id)))
        .group_by(AttendanceLog.session_id)
        .all()
    )
    sessions = db.query(EventSession).order_by(EventSession.date.desc(), EventSession.created_at.desc()).all()
    return [
        {
            "id": s.id,
            "title": s.title,
            "date": s.date,
            "is_active": s.is_active,
            "created_at": s.created_at,
            "present_count": counts.get(s.id, 0),
        }
        for s in sessions
    ]


def session_roster(db: Session, session_id: str) -> dict:
    """Session detail: who is present and absent, split into team and participants."""
    session = get_session(db, session_id)
    attendees = db.query(Attendee).order_by(Attendee.full_name).all()
    logs = db.query(AttendanceLog).filter(AttendanceLog.session_id == session_id).all()
    roster = stats_service.split_roster(attendees, logs, session_id)
    roster["session"] = session
    return roster
