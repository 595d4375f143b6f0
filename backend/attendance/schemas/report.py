"""Pydantic schemas for the presence-matrix report."""
import datetime as dt
from typing import Literal
from pydantic import BaseModel, Field

from attendance.models.attendee import AttendeeCategory

Audience = Literal["all", "team", "participants"]


class ReportRequest(BaseModel):
    session_ids: list[str] = Field(default_factory=list)
    audience: Audience = "all"


class ReportColumn(BaseModel):
    session_id: str
    title: str
    date: dt.date


class ReportRow(BaseModel):
    attendee_id: str
    full_name: str
    category: AttendeeCategory
    presence: list[bool]
    absences: int


class PresenceMatrixOut(BaseModel):
    audience: Audience
    columns: list[ReportColumn]
    rows: list[ReportRow]
