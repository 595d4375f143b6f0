"""Manual attendance routes used by the session roster."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.schemas.attendance import AttendanceLogOut, AttendanceMark, MarkResult
from attendance.services import attendance_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=list[AttendanceLogOut])
def list_logs(session_id: Optional[list[str]] = Query(None), db: Session = Depends(get_db)):
    """Raw attendance logs, optionally restricted to some sessions."""
    return attendance_service.list_logs(db, session_id)


@router.post("/present", response_model=MarkResult)
def mark_present(payload: AttendanceMark, db: Session = Depends(get_db)):
    log, created = attendance_service.mark_present(db, payload.attendee_id, payload.session_id)
    if not created:
        return {"already_marked": True, "message": "Already marked present", "log": log}
    return {"message": "Marked present", "log": log}


@router.post("/absent", response_model=MarkResult)
def mark_absent(payload: AttendanceMark, db: Session = Depends(get_db)):
    attendance_service.mark_absent(db, payload.attendee_id, payload.session_id)
    return {"message": "Marked absent"}
