"""Presence-matrix export routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.models.event_session import EventSession
from attendance.schemas.report import PresenceMatrixOut, ReportRequest
from attendance.services import attendance_service, attendee_service, report_service

logger = logging.getLogger(__name__)
router = APIRouter()


def _matrix(db: Session, payload: ReportRequest) -> report_service.PresenceMatrix:
    if not payload.session_ids:
        raise HTTPException(status_code=400, detail="Please select at least one session")
    sessions = db.query(EventSession).filter(EventSession.id.in_(payload.session_ids)).all()
    missing = sorted(set(payload.session_ids) - {s.id for s in sessions})
    if missing:
        raise HTTPException(status_code=404, detail=f"Session not found: {', '.join(missing)}")
    return report_service.build_presence_matrix(
        sessions,
        attendee_service.list_attendees(db),
        attendance_service.list_logs(db, payload.session_ids),
        payload.session_ids,
        payload.audience,
    )


@router.post("/matrix", response_model=PresenceMatrixOut)
def presence_matrix(payload: ReportRequest, db: Session = Depends(get_db)):
    """JSON rendition of the report table."""
    matrix = _matrix(db, payload)
    return {
        "audience": matrix.audience,
        "columns": [{"session_id": s.id, "title": s.title, "date": s.date} for s in matrix.sessions],
        "rows": [
            {
                "attendee_id": row.attendee.id,
                "full_name": row.attendee.full_name,
                "category": row.attendee.category,
                "presence": row.presence,
                "absences": row.absences,
            }
            for row in matrix.rows
        ],
    }


@router.post("/pdf")
def presence_pdf(payload: ReportRequest, db: Session = Depends(get_db)):
    """Download the attendance report as a PDF."""
    pdf = report_service.render_report_pdf(_matrix(db, payload))
    filename = report_service.report_filename()
    logger.info("Exported %s (%d bytes)", filename, len(pdf))
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
