"""QR scanning route."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.schemas.attendance import ScanRequest, ScanResult
from attendance.services.scan_service import ScanDesk, get_scan_desk

router = APIRouter()


@router.post("/", response_model=ScanResult)
def scan(payload: ScanRequest, db: Session = Depends(get_db), desk: ScanDesk = Depends(get_scan_desk)):
    """Check in the attendee whose QR code was scanned, at the active session."""
    return desk.scan(db, payload.code)
