"""Dashboard, leaderboard and chart data routes."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.models.attendee import Attendee
from attendance.models.event_session import EventSession
from attendance.schemas.stats import CategoryCount, DashboardStats, Leaderboard, TrendPoint
from attendance.services import attendance_service, session_service, stats_service

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(db: Session = Depends(get_db)):
    attendees = db.query(Attendee).all()
    active = session_service.get_active_session(db)
    logs = attendance_service.list_logs(db, [active.id]) if active else []
    return stats_service.dashboard_summary(attendees, logs, active)


@router.get("/leaderboard", response_model=Leaderboard)
def leaderboard(session_id: Optional[list[str]] = Query(None), db: Session = Depends(get_db)):
    """Top attendees and early birds, optionally over a subset of sessions."""
    attendees = db.query(Attendee).all()
    logs = attendance_service.list_logs(db)
    return stats_service.build_leaderboard(logs, attendees, session_id)


@router.get("/trend", response_model=list[TrendPoint])
def trend(db: Session = Depends(get_db)):
    sessions = db.query(EventSession).all()
    return stats_service.attendance_trend(sessions, attendance_service.list_logs(db))


@router.get("/categories", response_model=list[CategoryCount])
def categories(db: Session = Depends(get_db)):
    return stats_service.category_distribution(db.query(Attendee).all())
