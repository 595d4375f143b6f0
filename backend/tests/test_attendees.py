"""Tests for the attendee registry endpoints."""
from attendance.models.attendance_log import AttendanceLog
from tests.conftest import create_test_attendee, create_test_session, mark_present


class TestAttendeeCRUD:
    """Attendee create / get / update / list / delete."""

    def test_create_attendee(self, client):
        data = create_test_attendee(client, name="Alice", category="Team", phone="555-0100")
        assert data["full_name"] == "Alice"
        assert data["category"] == "Team"
        assert data["phone"] == "555-0100"
        assert data["student_id"] is None
        assert "id" in data

    def test_blank_optional_fields_stored_as_null(self, client):
        data = create_test_attendee(client, name="Bob", organization="  ", student_id="")
        assert data["organization"] is None
        assert data["student_id"] is None

    def test_create_requires_name_and_email(self, client):
        resp = client.post("/api/attendees/", json={"full_name": "  ", "email": "x@example.org", "category": "Guest"})
        assert resp.status_code == 422
        resp = client.post("/api/attendees/", json={"full_name": "Carol", "email": "", "category": "Guest"})
        assert resp.status_code == 422

    def test_create_rejects_unknown_category(self, client):
        resp = client.post("/api/attendees/", json={"full_name": "Dan", "email": "d@example.org", "category": "VIP"})
        assert resp.status_code == 422

    def test_create_requires_category(self, client):
        resp = client.post("/api/attendees/", json={"full_name": "Dan", "email": "d@example.org"})
        assert resp.status_code == 422

    def test_get_attendee_not_found(self, client):
        resp = client.get("/api/attendees/00000000-0000-0000-0000-000000000000")
        assert resp.status_code == 404

    def test_update_attendee(self, client):
        attendee = create_test_attendee(client, name="Eve")
        resp = client.put(f"/api/attendees/{attendee['id']}", json={
            "full_name": "Eve Updated",
            "email": "eve@example.org",
            "category": "Guest",
            "organization": "ACME",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["full_name"] == "Eve Updated"
        assert data["category"] == "Guest"
        assert data["organization"] == "ACME"

    def test_update_unknown_attendee(self, client):
        resp = client.put("/api/attendees/missing", json={
            "full_name": "Ghost", "email": "g@example.org", "category": "Guest",
        })
        assert resp.status_code == 404

    def test_list_ordered_by_name(self, client):
        create_test_attendee(client, name="Zed")
        create_test_attendee(client, name="Amy")
        create_test_attendee(client, name="Mia")
        names = [a["full_name"] for a in client.get("/api/attendees/").json()]
        assert names == ["Amy", "Mia", "Zed"]

    def test_list_filtered_by_categories(self, client):
        create_test_attendee(client, name="Tina", category="Team")
        create_test_attendee(client, name="Sam", category="Student")
        create_test_attendee(client, name="Gus", category="Guest")

        team = client.get("/api/attendees/", params={"category": "Team"}).json()
        assert [a["full_name"] for a in team] == ["Tina"]

        participants = client.get("/api/attendees/", params=[("category", "Student"), ("category", "Guest")]).json()
        assert [a["full_name"] for a in participants] == ["Gus", "Sam"]


class TestAttendeeDelete:
    """Deleting an attendee removes their attendance logs first."""

    def test_delete_removes_logs(self, client, db):
        attendee = create_test_attendee(client, name="Leaver")
        other = create_test_attendee(client, name="Stayer")
        s1 = create_test_session(client, title="Day 1", date="2025-01-01")
        s2 = create_test_session(client, title="Day 2", date="2025-01-02")
        for session in (s1, s2):
            mark_present(client, attendee["id"], session["id"])
        mark_present(client, other["id"], s1["id"])

        resp = client.delete(f"/api/attendees/{attendee['id']}")
        assert resp.status_code == 204

        assert db.query(AttendanceLog).filter(AttendanceLog.attendee_id == attendee["id"]).count() == 0
        assert db.query(AttendanceLog).filter(AttendanceLog.attendee_id == other["id"]).count() == 1
        assert client.get(f"/api/attendees/{attendee['id']}").status_code == 404

    def test_delete_unknown_attendee(self, client):
        assert client.delete("/api/attendees/missing").status_code == 404
