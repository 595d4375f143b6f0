"""Tests for the public ticket endpoints."""
from tests.conftest import create_test_attendee

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestTickets:

    def test_ticket_is_public(self, client, anon_client):
        attendee = create_test_attendee(client, name="Ticket Holder", category="Guest", organization="ACME")
        client.post("/api/auth/logout")

        resp = anon_client.get(f"/api/tickets/{attendee['id']}")
        assert resp.status_code == 200
        data = resp.json()
        assert data == {
            "id": attendee["id"],
            "full_name": "Ticket Holder",
            "category": "Guest",
            "organization": "ACME",
        }
        assert "email" not in data

    def test_ticket_qr_png(self, client):
        attendee = create_test_attendee(client)
        resp = client.get(f"/api/tickets/{attendee['id']}/qr.png")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.content.startswith(PNG_SIGNATURE)

    def test_unknown_ticket(self, anon_client):
        assert anon_client.get("/api/tickets/missing").status_code == 404
        assert anon_client.get("/api/tickets/missing/qr.png").status_code == 404
