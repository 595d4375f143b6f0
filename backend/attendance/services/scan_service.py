"""QR scan desk: resolves a scanned code and checks the attendee in."""
import logging
import threading
import time
from typing import Callable

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from attendance.config import settings
from attendance.models.attendee import Attendee
from attendance.services.attendance_service import record_presence
from attendance.services.session_service import get_active_session

logger = logging.getLogger(__name__)


class ScanDesk:
    """Check-in front desk with a per-code cool-down.

    A code read again within ``cooldown_seconds`` of its previous read is
    rejected before any database work. The memory is local to the process.
    """

    def __init__(self, cooldown_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.cooldown_seconds = cooldown_seconds
        self._clock = clock
        self._last_seen: dict[str, float] = {}
        self._lock = threading.Lock()

    def _in_cooldown(self, code: str) -> bool:
        now = self._clock()
        with self._lock:
            self._last_seen = {
                c: seen for c, seen in self._last_seen.items() if now - seen < self.cooldown_seconds
            }
            if code in self._last_seen:
                return True
            self._last_seen[code] = now
            return False

    def reset(self) -> None:
        with self._lock:
            self._last_seen.clear()

    def scan(self, db: Session, code: str) -> dict:
        code = code.strip()
        if self._in_cooldown(code):
            raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Code was just scanned")

        session = get_active_session(db)
        if not session:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No active session")

        attendee = db.query(Attendee).filter(Attendee.id == code).first()
        if not attendee:
            logger.info("Rejected unknown QR code %r", code)
            raise HTTPException(status_code=404, detail="QR code is not registered")

        _, created = record_presence(db, attendee.id, session.id)
        if created:
            outcome, message = "checked_in", f"{attendee.full_name} checked in!"
        else:
            outcome, message = "already_checked_in", f"{attendee.full_name} is already checked in"
        logger.info("Scan %s for attendee %s at session %s", outcome, attendee.id, session.id)
        return {
            "outcome": outcome,
            "message": message,
            "attendee_id": attendee.id,
            "full_name": attendee.full_name,
            "category": attendee.category,
            "session_id": session.id,
            "session_title": session.title,
        }


scan_desk = ScanDesk(settings.SCAN_COOLDOWN_SECONDS)


def get_scan_desk() -> ScanDesk:
    return scan_desk
