"""Pydantic schemas for attendance marking and QR scanning."""
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel

from attendance.models.attendance_log import AttendanceStatus
from attendance.models.attendee import AttendeeCategory


class AttendanceMark(BaseModel):
    attendee_id: str
    session_id: str


class AttendanceLogOut(BaseModel):
    id: str
    attendee_id: str
    session_id: str
    scanned_at: datetime
    status: AttendanceStatus

    model_config = {"from_attributes": True}


class MarkResult(BaseModel):
    status: Literal["ok"] = "ok"
    already_marked: bool = False
    message: str
    log: Optional[AttendanceLogOut] = None


class ScanRequest(BaseModel):
    code: str


class ScanResult(BaseModel):
    outcome: Literal["checked_in", "already_checked_in"]
    message: str
    attendee_id: str
    full_name: str
    category: AttendeeCategory
    session_id: str
    session_title: str
