"""
Tests for the services (layanan) catalogue
"""

from rasya_api.app.core.catalog import SEED_SERVICES
from rasya_api.app.services.layanan_service import LayananService


class TestPublicServices:

    def test_seeded_on_startup(self, client):
        services = client.get("/api/services").json()["services"]
        assert len(services) == len(SEED_SERVICES) == 31
        assert services[0]["title"] == "UI Designer"
        assert services[0]["slug"] == "ui_designer"
        assert [service["order"] for service in services] == list(range(1, 32))

    def test_seed_only_when_empty(self, client):
        assert LayananService.seed_if_empty() == 0
        assert len(client.get("/api/services").json()["services"]) == 31

    def test_closed_services_still_listed(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        response = client.post("/api/admin/services/close", json={"id": first["id"], "closed": True}, headers=admin_headers)
        assert response.json() == {"ok": True, "closed": True}
        services = client.get("/api/services").json()["services"]
        assert services[0]["closed"] is True
        assert len(services) == 31


class TestAdminServices:

    def test_add_appends_at_end(self, client, admin_headers):
        response = client.post(
            "/api/admin/services",
            json={"title": "Game Developer", "desc": "Game 2D", "price_awal": "3 jt"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        service = response.json()["service"]
        assert service["order"] == 32
        assert service["tag"] == "Lain-lain"
        assert service["slug"] is None

    def test_add_requires_title(self, client, admin_headers):
        response = client.post("/api/admin/services", json={"title": "  "}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "title required"

    def test_tag_normalised_on_add(self, client, admin_headers):
        known = client.post("/api/admin/services", json={"title": "A", "tag": " design "}, headers=admin_headers)
        assert known.json()["service"]["tag"] == "Design"
        unknown = client.post("/api/admin/services", json={"title": "B", "tag": "Musik"}, headers=admin_headers)
        assert unknown.json()["service"]["tag"] == "Lain-lain"

    def test_tag_normalised_on_update(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        update = {"id": first["id"], "title": first["title"], "price_awal": first["price_awal"]}
        changed = client.put("/api/admin/services", json=dict(update, tag="web & digital"), headers=admin_headers)
        assert changed.json()["service"]["tag"] == "Web & Digital"
        kept = client.put("/api/admin/services", json=dict(update, tag="Musik"), headers=admin_headers)
        assert kept.json()["service"]["tag"] == "Web & Digital"
        blank = client.put("/api/admin/services", json=dict(update, tag=" "), headers=admin_headers)
        assert blank.json()["service"]["tag"] == "Web & Digital"

    def test_discount_computes_price(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        response = client.put(
            "/api/admin/services",
            json={
                "id": first["id"],
                "title": first["title"],
                "price_awal": "400 ribu (harga awal)",
                "discount_percent": 10,
                "desc": first["desc"],
            },
            headers=admin_headers,
        )
        service = response.json()["service"]
        assert service["discount_percent"] == 10
        assert service["price_after_discount"] == "360 ribu"
        assert service["title"] == "UI Designer"

    def test_explicit_discounted_price_kept(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        response = client.put(
            "/api/admin/services",
            json={
                "id": first["id"],
                "title": first["title"],
                "price_awal": "400 ribu",
                "discount_percent": 25,
                "price_after_discount": "299 ribu",
            },
            headers=admin_headers,
        )
        assert response.json()["service"]["price_after_discount"] == "299 ribu"

    def test_out_of_range_discount_ignored(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        response = client.put(
            "/api/admin/services",
            json={"id": first["id"], "title": first["title"], "price_awal": "400 ribu", "discount_percent": 150},
            headers=admin_headers,
        )
        assert response.json()["service"]["discount_percent"] == 0

    def test_update_unknown_id(self, client, admin_headers):
        response = client.put("/api/admin/services", json={"id": "missing", "title": "X"}, headers=admin_headers)
        assert response.status_code == 404

    def test_update_requires_id(self, client, admin_headers):
        response = client.put("/api/admin/services", json={"title": "X"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "id required"

    def test_update_requires_title(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        response = client.put("/api/admin/services", json={"id": first["id"], "title": " "}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "title required"

    def test_delete(self, client, admin_headers):
        first = client.get("/api/services").json()["services"][0]
        response = client.delete(f"/api/admin/services?id={first['id']}", headers=admin_headers)
        assert response.json() == {"ok": True}
        assert len(client.get("/api/services").json()["services"]) == 30
        assert client.delete(f"/api/admin/services?id={first['id']}", headers=admin_headers).status_code == 404

    def test_mutations_are_audited(self, client, admin_headers):
        created = client.post("/api/admin/services", json={"title": "Game Developer"}, headers=admin_headers).json()
        logs = client.get("/api/admin/audit?object_type=service", headers=admin_headers).json()["logs"]
        assert logs[0]["action"] == "create"
        assert logs[0]["object_id"] == created["service"]["id"]
        assert logs[0]["actor"] == "admin@example.com"
        assert logs[0]["details"] == {"title": "Game Developer"}

    def test_requires_admin(self, client):
        assert client.post("/api/admin/services", json={"title": "X"}).status_code == 401
