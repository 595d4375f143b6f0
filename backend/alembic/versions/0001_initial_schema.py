"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Creates all tables for the attendance tracker:
admin_users, attendees, sessions, attendance_logs.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- admin_users ---
    op.create_table(
        "admin_users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- attendees ---
    op.create_table(
        "attendees",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("category", sa.String(10), nullable=False),
        sa.Column("student_id", sa.String(50), nullable=True),
        sa.Column("organization", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_attendees_category", "attendees", ["category"])

    # --- sessions ---
    op.create_table(
        "sessions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- attendance_logs ---
    op.create_table(
        "attendance_logs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("attendee_id", sa.String(36), sa.ForeignKey("attendees.id"), nullable=False),
        sa.Column("session_id", sa.String(36), sa.ForeignKey("sessions.id"), nullable=False),
        sa.Column("scanned_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("status", sa.String(10), nullable=False, server_default="present"),
        sa.UniqueConstraint("attendee_id", "session_id", name="uq_attendance_logs_attendee_session"),
    )
    op.create_index("ix_attendance_logs_attendee_id", "attendance_logs", ["attendee_id"])
    op.create_index("ix_attendance_logs_session_id", "attendance_logs", ["session_id"])


def downgrade() -> None:
    op.drop_table("attendance_logs")
    op.drop_table("sessions")
    op.drop_table("attendees")
    op.drop_table("admin_users")
