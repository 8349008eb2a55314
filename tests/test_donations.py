"""
Tests for donations, Midtrans transactions, the webhook and reviews
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from rasya_api.app.core.config import settings
from rasya_api.app.services.donation_service import parse_gross_amount


@pytest.fixture
def midtrans_configured(monkeypatch):
    """Configure sandbox Midtrans keys"""
    monkeypatch.setattr(settings, "midtrans_server_key", "SB-Mid-server-test")
    monkeypatch.setattr(settings, "midtrans_client_key", "SB-Mid-client-test")


def _snap_response(body, status_code=201):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestDonate:

    def test_small_donation_with_bank_details(self, client):
        response = client.post("/api/donate", json={"amount": 20000, "comment": "Mantap!", "name": "Budi"})
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["bank_name"] == "BCA"
        assert data["bank_number"] == "1234567890"
        assert data["bank_account"] == "Rasya Production"
        assert data["highlighted"] is False

    def test_large_donation_is_highlighted(self, client):
        response = client.post("/api/donate", json={"amount": 50000})
        assert response.json()["highlighted"] is True

    def test_negative_amount(self, client):
        response = client.post("/api/donate", json={"amount": -5})
        assert response.status_code == 400
        assert response.json() == {"ok": False, "message": "amount must be >= 0"}

    def test_missing_amount_is_invalid_json(self, client):
        response = client.post("/api/donate", json={"comment": "tanpa jumlah"})
        assert response.status_code == 400
        assert response.json()["message"] == "invalid JSON"


class TestReviews:

    def test_only_small_commented_donations(self, client):
        client.post("/api/donate", json={"amount": 10000, "comment": "Keren"})
        client.post("/api/donate", json={"amount": 10000, "comment": "   "})
        client.post("/api/donate", json={"amount": 100000, "comment": "Sukses!"})
        reviews = client.get("/api/reviews").json()["reviews"]
        assert [review["comment"] for review in reviews] == ["Keren"]

    def test_newest_first(self, client):
        client.post("/api/donate", json={"amount": 1000, "comment": "pertama"})
        client.post("/api/donate", json={"amount": 1000, "comment": "kedua"})
        reviews = client.get("/api/reviews").json()["reviews"]
        assert [review["comment"] for review in reviews] == ["kedua", "pertama"]


class TestCreateTransaction:

    def test_amount_below_minimum(self, client):
        response = client.post("/api/donate/create-transaction", json={"amount": 999})
        assert response.status_code == 400
        assert response.json()["message"] == "amount minimal 1000"

    def test_gateway_not_configured(self, client):
        response = client.post("/api/donate/create-transaction", json={"amount": 10000})
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert "MIDTRANS_SERVER_KEY" in data["message"]

    def test_snap_token_returned(self, client, midtrans_configured):
        with patch("rasya_api.app.services.donation_service.httpx.post") as mock_post:
            mock_post.return_value = _snap_response({"token": "snap-123", "redirect_url": "https://x"})
            response = client.post(
                "/api/donate/create-transaction",
                json={"amount": 25000, "name": "Sari", "email": "sari@example.com", "comment": "Semangat"},
            )
        assert response.status_code == 200
        data = response.json()
        assert data["snap_token"] == "snap-123"
        assert data["client_key"] == "SB-Mid-client-test"
        assert data["order_id"].startswith("donate-")

        payload = mock_post.call_args.kwargs["json"]
        assert payload["enabled_payments"] == ["gopay"]
        assert payload["transaction_details"]["gross_amount"] == 25000
        assert payload["custom_field1"] == "Sari"
        assert payload["custom_field3"] == "Semangat"
        assert mock_post.call_args.kwargs["auth"] == ("SB-Mid-server-test", "")
        assert mock_post.call_args.args[0] == settings.midtrans_snap_url()

    def test_anonymous_donor_name(self, client, midtrans_configured):
        with patch("rasya_api.app.services.donation_service.httpx.post") as mock_post:
            mock_post.return_value = _snap_response({"token": "snap-123"})
            client.post("/api/donate/create-transaction", json={"amount": 5000})
        assert mock_post.call_args.kwargs["json"]["customer_details"]["first_name"] == "Donatur"

    def test_gateway_without_token(self, client, midtrans_configured):
        with patch("rasya_api.app.services.donation_service.httpx.post") as mock_post:
            mock_post.return_value = _snap_response({"error_messages": ["bad"]}, status_code=400)
            response = client.post("/api/donate/create-transaction", json={"amount": 5000})
        assert response.status_code == 400
        assert response.json()["ok"] is False

    def test_gateway_unreachable(self, client, midtrans_configured):
        with patch(
            "rasya_api.app.services.donation_service.httpx.post",
            side_effect=httpx.ConnectError("connection refused"),
        ):
            response = client.post("/api/donate/create-transaction", json={"amount": 5000})
        assert response.status_code == 500
        assert response.json()["ok"] is False


class TestWebhook:

    def _notify(self, client, **overrides):
        body = {
            "transaction_status": "settlement",
            "order_id": "donate-1-abc",
            "gross_amount": "25000.00",
            "custom_field1": "Sari",
            "custom_field2": "sari@example.com",
            "custom_field3": "Lanjutkan",
        }
        body.update(overrides)
        return client.post("/api/donate/webhook", json=body)

    def _donations(self, client, admin_headers):
        return client.get("/api/admin/donations", headers=admin_headers).json()["donations"]

    def test_settlement_recorded(self, client, admin_headers):
        assert self._notify(client).json() == {"ok": True}
        donations = self._donations(client, admin_headers)
        assert len(donations) == 1
        assert donations[0]["amount"] == 25000
        assert donations[0]["order_id"] == "donate-1-abc"
        assert donations[0]["name"] == "Sari"
        assert donations[0]["comment"] == "Lanjutkan"

    def test_duplicate_notification_ignored(self, client, admin_headers):
        self._notify(client)
        self._notify(client, transaction_status="pending")
        assert len(self._donations(client, admin_headers)) == 1

    def test_other_status_ignored(self, client, admin_headers):
        assert self._notify(client, transaction_status="expire").status_code == 200
        assert self._donations(client, admin_headers) == []

    def test_numeric_gross_amount(self, client, admin_headers):
        self._notify(client, gross_amount=75000)
        donation = self._donations(client, admin_headers)[0]
        assert donation["amount"] == 75000
        assert donation["highlighted"] is True

    def test_zero_amount_ignored(self, client, admin_headers):
        self._notify(client, gross_amount="0.00")
        assert self._donations(client, admin_headers) == []

    def test_null_fields_accepted(self, client, admin_headers):
        response = self._notify(client, custom_field1=None, custom_field2=None, custom_field3=None)
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        donation = self._donations(client, admin_headers)[0]
        assert donation["name"] == ""
        assert donation["comment"] == ""

    def test_null_status_ignored(self, client, admin_headers):
        response = self._notify(client, transaction_status=None, order_id=None)
        assert response.json() == {"ok": True}
        assert self._donations(client, admin_headers) == []


@pytest.mark.parametrize(
    "value,expected",
    [("50000.00", 50000), ("12000", 12000), (3000, 3000), (2500.0, 2500), (None, 0), ("abc", 0), (True, 0)],
)
def test_parse_gross_amount(value, expected):
    assert parse_gross_amount(value) == expected
