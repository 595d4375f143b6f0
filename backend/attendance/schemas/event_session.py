"""Pydantic schemas for Sessions."""
import datetime as dt
from typing import Annotated

from pydantic import AfterValidator, BaseModel

from attendance.schemas.attendee import AttendeeOut


def _title_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Title and date are required")
    return value


SessionTitle = Annotated[str, AfterValidator(_title_required)]


class SessionCreate(BaseModel):
    title: SessionTitle
    date: dt.date
    set_active: bool = False


class SessionUpdate(BaseModel):
    title: SessionTitle
    date: dt.date


class SessionActivePayload(BaseModel):
    is_active: bool


class SessionOut(BaseModel):
    id: str
    title: str
    date: dt.date
    is_active: bool
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class SessionWithStats(SessionOut):
    present_count: int = 0


class RosterGroup(BaseModel):
    present: list[AttendeeOut] = []
    absent: list[AttendeeOut] = []
    total: int
    present_count: int
    attendance_rate: int


class SessionRoster(BaseModel):
    session: SessionOut
    team: RosterGroup
    participants: RosterGroup
