"""Public ticket routes — no login needed."""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.schemas.attendee import TicketOut
from attendance.services import attendee_service, ticket_service

router = APIRouter()


@router.get("/{attendee_id}", response_model=TicketOut)
def get_ticket(attendee_id: str, db: Session = Depends(get_db)):
    return attendee_service.get_attendee(db, attendee_id)


@router.get("/{attendee_id}/qr.png")
def get_ticket_qr(attendee_id: str, db: Session = Depends(get_db)):
    """QR code the scan desk reads; it encodes the attendee id."""
    attendee = attendee_service.get_attendee(db, attendee_id)
    return Response(content=ticket_service.render_qr_png(attendee.id), media_type="image/png")
