"""Session API routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.schemas.event_session import (
    SessionActivePayload,
    SessionCreate,
    SessionOut,
    SessionRoster,
    SessionUpdate,
    SessionWithStats,
)
from attendance.services import session_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreate, db: Session = Depends(get_db)):
    """Create a session, optionally making it the active one."""
    return session_service.create_session(db, payload.title, payload.date, payload.set_active)


@router.get("/", response_model=list[SessionWithStats])
def list_sessions(db: Session = Depends(get_db)):
    """All sessions, newest first, with present counts."""
    return session_service.list_sessions_with_counts(db)


@router.get("/active", response_model=Optional[SessionOut])
def get_active_session(db: Session = Depends(get_db)):
    """The session currently accepting scans, or null."""
    return session_service.get_active_session(db)


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str, db: Session = Depends(get_db)):
    return session_service.get_session(db, session_id)


@router.get("/{session_id}/roster", response_model=SessionRoster)
def get_roster(session_id: str, db: Session = Depends(get_db)):
    """Present/absent lists for the session detail page."""
    return session_service.session_roster(db, session_id)


@router.put("/{session_id}", response_model=SessionOut)
def update_session(session_id: str, payload: SessionUpdate, db: Session = Depends(get_db)):
    return session_service.update_session(db, session_id, payload.title, payload.date)


@router.post("/{session_id}/active", response_model=SessionOut)
def set_active(session_id: str, payload: SessionActivePayload, db: Session = Depends(get_db)):
    """Turn a session on (deactivating every other) or off."""
    return session_service.toggle_active(db, session_id, payload.is_active)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: str, db: Session = Depends(get_db)):
    session_service.delete_session(db, session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
