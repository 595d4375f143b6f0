"""Attendee API routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.models.attendee import AttendeeCategory
from attendance.schemas.attendee import AttendeeCreate, AttendeeUpdate, AttendeeOut
from attendance.services import attendee_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=AttendeeOut, status_code=status.HTTP_201_CREATED)
def create_attendee(payload: AttendeeCreate, db: Session = Depends(get_db)):
    """Register a new attendee."""
    return attendee_service.create_attendee(db, payload)


@router.get("/", response_model=list[AttendeeOut])
def list_attendees(
    category: Optional[list[AttendeeCategory]] = Query(None),
    db: Session = Depends(get_db),
):
    """List attendees ordered by name, optionally restricted to some categories."""
    return attendee_service.list_attendees(db, category)


@router.get("/{attendee_id}", response_model=AttendeeOut)
def get_attendee(attendee_id: str, db: Session = Depends(get_db)):
    return attendee_service.get_attendee(db, attendee_id)


@router.put("/{attendee_id}", response_model=AttendeeOut)
def update_attendee(attendee_id: str, payload: AttendeeUpdate, db: Session = Depends(get_db)):
    """Replace an attendee's details."""
    return attendee_service.update_attendee(db, attendee_id, payload)


@router.delete("/{attendee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attendee(attendee_id: str, db: Session = Depends(get_db)):
    """Delete an attendee together with their attendance history."""
    attendee_service.delete_attendee(db, attendee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
