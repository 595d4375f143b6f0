"""In-memory aggregation over fetched attendance rows.

Every function here is pure: callers fetch the attendees, sessions and
attendance logs they need and pass them in. Rates and earliness scores are
rounded half-up to whole numbers.
"""
import math
from collections import Counter
from typing import Any, Iterable, Optional

from attendance.models.attendee import AttendeeCategory

LEADERBOARD_SIZE = 5


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Rounded share of ``part`` in ``whole``; 0 when ``whole`` is empty."""
    if whole <= 0:
        return 0
    return round_half_up(100 * part / whole)


def present_count(logs: Iterable[Any], session_id: str) -> int:
    """Number of distinct attendees with a log row for the session."""
    return len({log.attendee_id for log in logs if log.session_id == session_id})


def absence_rate(total_attendees: int, present: int) -> int:
    return percentage(total_attendees - present, total_attendees)


def dashboard_summary(attendees: list[Any], logs: list[Any], active_session: Optional[Any]) -> dict:
    """Headline numbers for the dashboard cards."""
    total = len(attendees)
    present = present_count(logs, active_session.id) if active_session is not None else 0
    return {
        "total_attendees": total,
        "present_today": present,
        "absence_rate": absence_rate(total, present),
        "active_session": active_session,
    }


def _earliest_check_ins(logs: list[Any]) -> dict[str, Any]:
    earliest: dict[str, Any] = {}
    for log in logs:
        first = earliest.get(log.session_id)
        if first is None or log.scanned_at < first:
            earliest[log.session_id] = log.scanned_at
    return earliest


def leaderboard_entries(
    logs: Iterable[Any],
    attendees: Iterable[Any],
    session_ids: Optional[Iterable[str]] = None,
) -> list[dict]:
    """Per-attendee attendance totals and earliness scores.

    The earliness score is the average, over the sessions an attendee
    attended, of minutes between their check-in and the first check-in of
    that session. Logs pointing at unknown attendees still count towards a
    session's first check-in but produce no entry.
    """
    logs = list(logs)
    if session_ids is not None:
        wanted = set(session_ids)
        logs = [log for log in logs if log.session_id in wanted]

    earliest = _earliest_check_ins(logs)
    by_id = {attendee.id: attendee for attendee in attendees}

    tallies: dict[str, dict] = {}
    for log in logs:
        attendee = by_id.get(log.attendee_id)
        if attendee is None:
            continue
        tally = tallies.setdefault(attendee.id, {"attendee": attendee, "count": 0, "delay": 0.0})
        tally["count"] += 1
        tally["delay"] += (log.scanned_at - earliest[log.session_id]).total_seconds() / 60

    entries = []
    for tally in tallies.values():
        attendee = tally["attendee"]
        entries.append({
            "attendee_id": attendee.id,
            "full_name": attendee.full_name,
            "category": attendee.category,
            "total_attendance": tally["count"],
            "earliness": round_half_up(tally["delay"] / tally["count"]),
        })
    return entries


def build_leaderboard(
    logs: Iterable[Any],
    attendees: Iterable[Any],
    session_ids: Optional[Iterable[str]] = None,
    limit: int = LEADERBOARD_SIZE,
) -> dict[str, list[dict]]:
    """Top team members, top participants and early birds.

    Early birds only consider attendees seen at more than one session, so a
    single early arrival cannot top the board. Ties keep first-seen order.
    """
    entries = leaderboard_entries(logs, attendees, session_ids)

    by_attendance = sorted(entries, key=lambda e: e["total_attendance"], reverse=True)
    team = [e for e in by_attendance if e["category"] == AttendeeCategory.team]
    participants = [e for e in by_attendance if e["category"] != AttendeeCategory.team]

    regulars = [e for e in entries if e["total_attendance"] > 1]
    early_birds = sorted(regulars, key=lambda e: e["earliness"])

    return {
        "top_team_members": team[:limit],
        "top_participants": participants[:limit],
        "early_birds": early_birds[:limit],
    }


def attendance_trend(sessions: Iterable[Any], logs: Iterable[Any]) -> list[dict]:
    """Present count per session, oldest session first."""
    attendees_by_session: dict[str, set] = {}
    for log in logs:
        attendees_by_session.setdefault(log.session_id, set()).add(log.attendee_id)

    return [
        {
            "session_id": session.id,
            "title": session.title,
            "date": session.date,
            "present_count": len(attendees_by_session.get(session.id, ())),
        }
        for session in sorted(sessions, key=lambda s: s.date)
    ]


def category_distribution(attendees: Iterable[Any]) -> list[dict]:
    counts = Counter(AttendeeCategory(attendee.category) for attendee in attendees)
    return [{"category": category, "count": counts.get(category, 0)} for category in AttendeeCategory]


def split_roster(attendees: Iterable[Any], logs: Iterable[Any], session_id: str) -> dict:
    """Present/absent split of team members and participants for one session."""
    present_ids = {log.attendee_id for log in logs if log.session_id == session_id}
    groups = {"team": [], "participants": []}
    for attendee in attendees:
        key = "team" if attendee.category == AttendeeCategory.team else "participants"
        groups[key].append(attendee)

    roster = {}
    for key, members in groups.items():
        present = [a for a in members if a.id in present_ids]
        absent = [a for a in members if a.id not in present_ids]
        roster[key] = {
            "present": present,
            "absent": absent,
            "total": len(members),
            "present_count": len(present),
            "attendance_rate": percentage(len(present), len(members)),
        }
    return roster
