"""Pydantic schemas for administrator authentication."""
from datetime import datetime
from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str
    password: str


class AdminOut(BaseModel):
    user_id: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
