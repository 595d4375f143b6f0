"""Tests for manual presence toggling from the session roster."""
import pytest
from sqlalchemy.exc import IntegrityError

from attendance.models.attendance_log import AttendanceLog, AttendanceStatus
from attendance.services import attendance_service
from tests.conftest import create_test_attendee, create_test_session, mark_present


class TestMarkPresent:

    def test_mark_present_creates_log(self, client, db):
        attendee = create_test_attendee(client)
        session = create_test_session(client)
        data = mark_present(client, attendee["id"], session["id"])
        assert data["already_marked"] is False
        assert data["log"]["status"] == "present"

        log = db.query(AttendanceLog).one()
        assert log.attendee_id == attendee["id"]
        assert log.status == AttendanceStatus.present
        assert log.scanned_at is not None

    def test_mark_present_twice_does_not_duplicate(self, client, db):
        attendee = create_test_attendee(client)
        session = create_test_session(client)
        first = mark_present(client, attendee["id"], session["id"])
        second = mark_present(client, attendee["id"], session["id"])
        assert second["already_marked"] is True
        assert second["message"] == "Already marked present"
        assert second["log"]["id"] == first["log"]["id"]
        assert db.query(AttendanceLog).count() == 1

    def test_mark_present_unknown_attendee(self, client):
        session = create_test_session(client)
        resp = client.post("/api/attendance/present", json={"attendee_id": "nobody", "session_id": session["id"]})
        assert resp.status_code == 404

    def test_mark_present_unknown_session(self, client):
        attendee = create_test_attendee(client)
        resp = client.post("/api/attendance/present", json={"attendee_id": attendee["id"], "session_id": "nowhere"})
        assert resp.status_code == 404


class TestMarkAbsent:

    def test_mark_absent_deletes_log(self, client, db):
        attendee = create_test_attendee(client)
        session = create_test_session(client)
        mark_present(client, attendee["id"], session["id"])

        resp = client.post("/api/attendance/absent", json={"attendee_id": attendee["id"], "session_id": session["id"]})
        assert resp.status_code == 200
        assert db.query(AttendanceLog).count() == 0

    def test_mark_absent_without_log_is_noop(self, client):
        attendee = create_test_attendee(client)
        session = create_test_session(client)
        resp = client.post("/api/attendance/absent", json={"attendee_id": attendee["id"], "session_id": session["id"]})
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestConcurrentCheckIn:
    """Two handlers both pass the existence check before either inserts."""

    def test_losing_insert_reports_existing_log(self, client, db, session_factory, monkeypatch):
        attendee = create_test_attendee(client)
        session = create_test_session(client)

        winner = session_factory()
        try:
            winning_log, created = attendance_service.record_presence(winner, attendee["id"], session["id"])
            assert created is True
            winning_id = winning_log.id
        finally:
            winner.close()

        # The loser already ran its check before the winner committed.
        real_find = attendance_service.find_log
        calls = []

        def stale_then_real(db_, attendee_id, session_id):
            calls.append(attendee_id)
            if len(calls) == 1:
                return None
            return real_find(db_, attendee_id, session_id)

        monkeypatch.setattr(attendance_service, "find_log", stale_then_real)
        log, created = attendance_service.record_presence(db, attendee["id"], session["id"])
        assert created is False
        assert log.id == winning_id
        assert db.query(AttendanceLog).count() == 1


    def test_other_integrity_errors_propagate(self, client, db, monkeypatch):
        attendee = create_test_attendee(client)
        session = create_test_session(client)
        mark_present(client, attendee["id"], session["id"])

        # Neither the check nor the recovery lookup finds a row, so the
        # constraint failure cannot be explained by a concurrent check-in.
        monkeypatch.setattr(attendance_service, "find_log", lambda *args: None)
        with pytest.raises(IntegrityError):
            attendance_service.record_presence(db, attendee["id"], session["id"])

class TestListLogs:

    def test_filter_by_session(self, client):
        a = create_test_attendee(client, name="A")
        s1 = create_test_session(client, title="S1", date="2025-01-01")
        s2 = create_test_session(client, title="S2", date="2025-01-02")
        mark_present(client, a["id"], s1["id"])
        mark_present(client, a["id"], s2["id"])

        assert len(client.get("/api/attendance/").json()) == 2
        only_s2 = client.get("/api/attendance/", params={"session_id": s2["id"]}).json()
        assert [log["session_id"] for log in only_s2] == [s2["id"]]
