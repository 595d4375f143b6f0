"""Pydantic schemas for dashboard statistics and leaderboards."""
import datetime as dt
from typing import Optional
from pydantic import BaseModel

from attendance.models.attendee import AttendeeCategory
from attendance.schemas.event_session import SessionOut


class DashboardStats(BaseModel):
    total_attendees: int
    present_today: int
    absence_rate: int
    active_session: Optional[SessionOut] = None


class LeaderboardEntry(BaseModel):
    attendee_id: str
    full_name: str
    category: AttendeeCategory
    total_attendance: int
    # Average minutes behind the first check-in of each attended session.
    earliness: int


class Leaderboard(BaseModel):
    top_team_members: list[LeaderboardEntry]
    top_participants: list[LeaderboardEntry]
    early_birds: list[LeaderboardEntry]


class TrendPoint(BaseModel):
    session_id: str
    title: str
    date: dt.date
    present_count: int


class CategoryCount(BaseModel):
    category: AttendeeCategory
    count: int
