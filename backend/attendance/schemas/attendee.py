"""Pydantic schemas for Attendees."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from attendance.models.attendee import AttendeeCategory


class AttendeeCreate(BaseModel):
    full_name: str
    email: str
    category: AttendeeCategory
    phone: Optional[str] = None
    student_id: Optional[str] = None
    organization: Optional[str] = None

    @field_validator("full_name", "email")
    @classmethod
    def _required_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name, email, and category are required")
        return value

    @field_validator("phone", "student_id", "organization")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


# Updates replace every field, same rules as creation.
AttendeeUpdate = AttendeeCreate


class AttendeeOut(BaseModel):
    id: str
    full_name: str
    email: str
    phone: Optional[str] = None
    category: AttendeeCategory
    student_id: Optional[str] = None
    organization: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class TicketOut(BaseModel):
    """Public view of an attendee, rendered on the ticket page."""
    id: str
    full_name: str
    category: AttendeeCategory
    organization: Optional[str] = None

    model_config = {"from_attributes": True}
