"""Tests for administrator login and the back-office guard."""
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD


class TestAuth:

    def test_routes_require_login(self, anon_client):
        for path in ("/api/attendees/", "/api/sessions/", "/api/stats/dashboard", "/api/attendance/"):
            assert anon_client.get(path).status_code == 401

    def test_health_is_public(self, anon_client):
        assert anon_client.get("/api/health").json() == {"status": "ok"}

    def test_login_and_me(self, client):
        resp = client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.json()["email"] == ADMIN_EMAIL
        assert client.get("/api/attendees/").status_code == 200

    def test_bad_password(self, client):
        client.post("/api/auth/logout")
        resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"})
        assert resp.status_code == 401
        assert client.get("/api/auth/me").status_code == 401

    def test_email_is_case_insensitive(self, client):
        client.post("/api/auth/logout")
        resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})
        assert resp.status_code == 200

    def test_logout(self, client):
        assert client.post("/api/auth/logout").json() == {"status": "ok"}
        assert client.get("/api/sessions/").status_code == 401

    def test_password_is_hashed(self, client, db):
        from attendance.models.user import AdminUser
        admin = db.query(AdminUser).one()
        assert admin.password_hash != ADMIN_PASSWORD
