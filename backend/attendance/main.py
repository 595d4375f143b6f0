"""FastAPI application entry point."""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from attendance.config import settings
from attendance.database import Base, engine
from attendance.logging_config import configure_logging
from attendance.services.auth_service import get_current_admin

# Import routers
from attendance.routers import auth, attendees, sessions, scan, stats, reports, tickets
from attendance.routers import attendance as attendance_marks

# Import all models so Base.metadata knows about them
from attendance.models.user import AdminUser                   # noqa: F401
from attendance.models.attendee import Attendee                # noqa: F401
from attendance.models.event_session import EventSession       # noqa: F401
from attendance.models.attendance_log import AttendanceLog     # noqa: F401

configure_logging()

app = FastAPI(
    title="Event Attendance Tracker",
    description="Sessions, attendees and QR check-in with attendance statistics and PDF reports",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY, same_site="lax")

admin_only = [Depends(get_current_admin)]

# Register routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(attendees.router, prefix="/api/attendees", tags=["Attendees"], dependencies=admin_only)
app.include_router(sessions.router, prefix="/api/sessions", tags=["Sessions"], dependencies=admin_only)
app.include_router(attendance_marks.router, prefix="/api/attendance", tags=["Attendance"], dependencies=admin_only)
app.include_router(scan.router, prefix="/api/scan", tags=["Scan"], dependencies=admin_only)
app.include_router(stats.router, prefix="/api/stats", tags=["Stats"], dependencies=admin_only)
app.include_router(reports.router, prefix="/api/reports", tags=["Reports"], dependencies=admin_only)
app.include_router(tickets.router, prefix="/api/tickets", tags=["Tickets"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
