"""
Tests for orders, the public queue and revision tickets
"""

import re
from datetime import datetime, timezone

import pytest

from rasya_api.app.services.order_service import sisa_waktu
from rasya_api.app.services.revision_service import generate_code, normalize_code

TICKET_CODE = re.compile(r"^RV-[0-9A-F]{10}$")


@pytest.fixture
def order(client, admin_headers):
    """An order in progress"""
    response = client.post(
        "/api/admin/orders",
        json={
            "layanan": "Frontend Developer",
            "pemesan": "PT Maju",
            "deskripsi_pekerjaan": "Landing page",
            "deadline": "2099-12-31",
            "kesepakatan_brief_uang": "1,2 jt",
        },
        headers=admin_headers,
    )
    return response.json()["order"]


@pytest.fixture
def completed(client, admin_headers, order):
    """The order above after completion (order, tickets)"""
    body = client.patch("/api/admin/orders", json={"id": order["id"]}, headers=admin_headers).json()
    return body["order"], body["tickets"]


class TestOrders:

    def test_add(self, order):
        assert order["layanan"] == "Frontend Developer"
        assert order["completed"] is False
        assert order["revision_tickets"] == []
        assert order["sisa_waktu"].endswith("detik")

    def test_add_requires_layanan(self, client, admin_headers):
        response = client.post("/api/admin/orders", json={"pemesan": "X"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "layanan required"

    def test_list_newest_first(self, client, admin_headers, order):
        client.post("/api/admin/orders", json={"layanan": "UI Designer"}, headers=admin_headers)
        orders = client.get("/api/admin/orders", headers=admin_headers).json()["orders"]
        assert [o["layanan"] for o in orders] == ["UI Designer", "Frontend Developer"]

    def test_antrian_lists_open_orders_only(self, client, admin_headers, order):
        client.post("/api/admin/orders", json={"layanan": "UI Designer"}, headers=admin_headers)
        assert client.get("/api/orders/antrian").json() == {
            "ok": True,
            "antrian": ["UI Designer", "Frontend Developer"],
        }
        client.patch("/api/admin/orders", json={"id": order["id"]}, headers=admin_headers)
        assert client.get("/api/orders/antrian").json()["antrian"] == ["UI Designer"]

    def test_complete_issues_two_tickets(self, completed):
        order, tickets = completed
        assert order["completed"] is True
        assert order["completed_at"] is not None
        assert order["sisa_waktu"] == "selesai"
        assert [ticket["sequence"] for ticket in tickets] == [1, 2]
        assert all(TICKET_CODE.match(ticket["code"]) for ticket in tickets)
        assert all(ticket["status"] == "unused" for ticket in tickets)
        assert len(order["revision_tickets"]) == 2

    def test_complete_is_idempotent(self, client, admin_headers, completed):
        order, tickets = completed
        again = client.patch("/api/admin/orders", json={"id": order["id"]}, headers=admin_headers).json()
        assert [t["code"] for t in again["tickets"]] == [t["code"] for t in tickets]
        assert again["order"]["completed_at"] == order["completed_at"]

    def test_complete_unknown(self, client, admin_headers):
        response = client.patch("/api/admin/orders", json={"id": "missing"}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete_cascades_tickets(self, client, admin_headers, completed):
        order, tickets = completed
        response = client.delete(f"/api/admin/orders?id={order['id']}", headers=admin_headers)
        assert response.json() == {"ok": True}
        assert client.get("/api/admin/orders", headers=admin_headers).json()["orders"] == []
        claim = client.post("/api/revisi/klaim", json={"code": tickets[0]["code"]})
        assert claim.status_code == 404


class TestSisaWaktu:

    def test_completed(self):
        assert sisa_waktu("2000-01-01", True) == "selesai"

    def test_not_a_date(self):
        assert sisa_waktu("minggu depan", False) is None

    def test_countdown(self):
        now = datetime(2025, 4, 29, 0, 0, 0, tzinfo=timezone.utc)
        assert sisa_waktu("2025-04-30", False, now) == "1 hari 0 jam 0 menit 0 detik"


class TestRevisiKlaim:

    def test_codes(self):
        assert TICKET_CODE.match(generate_code())
        assert normalize_code("  rv-3fa9 c0b12e ") == "RV-3FA9C0B12E"

    def test_redeem(self, client, completed):
        order, tickets = completed
        response = client.post("/api/revisi/klaim", json={"code": tickets[0]["code"], "note": "ganti warna"})
        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "message": "Klaim revisi berhasil.",
            "order_id": order["id"],
            "revisi_ke": 1,
            "sisa_revisi": 1,
        }

    def test_redeem_normalizes_code(self, client, completed):
        _, tickets = completed
        code = tickets[1]["code"].lower()
        response = client.post("/api/revisi/klaim", json={"code": f" {code[:5]} {code[5:]} "})
        assert response.status_code == 200
        assert response.json()["revisi_ke"] == 2

    def test_redeem_twice(self, client, completed):
        _, tickets = completed
        client.post("/api/revisi/klaim", json={"code": tickets[0]["code"]})
        response = client.post("/api/revisi/klaim", json={"code": tickets[0]["code"]})
        assert response.status_code == 409
        assert response.json() == {"ok": False, "message": "kode sudah digunakan"}

    def test_all_tickets_used(self, client, admin_headers, completed):
        order, tickets = completed
        for ticket in tickets:
            last = client.post("/api/revisi/klaim", json={"code": ticket["code"], "note": "revisi"})
        assert last.json()["sisa_revisi"] == 0
        stored = client.get("/api/admin/orders", headers=admin_headers).json()["orders"][0]["revision_tickets"]
        assert all(ticket["status"] == "used" and ticket["used_at"] for ticket in stored)
        assert stored[0]["note"] == "revisi"

    def test_unknown_code(self, client):
        response = client.post("/api/revisi/klaim", json={"code": "RV-0000000000"})
        assert response.status_code == 404
        assert response.json()["message"] == "kode tidak ditemukan"

    def test_empty_code(self, client):
        response = client.post("/api/revisi/klaim", json={"code": "  "})
        assert response.status_code == 400
        assert response.json()["message"] == "kode wajib diisi"
