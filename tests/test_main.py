"""
Tests for the application shell: root routes, crawler files, the error
envelope and the audit log
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from rasya_api.app.core.config import Settings
from rasya_api.app.main import app


class TestRootRoutes:

    def test_root(self, client):
        assert client.get("/").json() == {"message": "Rasya Production API", "docs": "/health"}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "service": "rasya-production-api"}

    def test_robots(self, client):
        response = client.get("/robots.txt")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "User-agent: *" in response.text

    def test_sitemap(self, client):
        response = client.get("/sitemap.xml")
        assert response.headers["content-type"].startswith("application/xml")
        assert "<urlset" in response.text


class TestErrorEnvelope:

    def test_unknown_route(self, client):
        response = client.get("/api/tidak-ada")
        assert response.status_code == 404
        assert response.json()["ok"] is False

    def test_malformed_json(self, client):
        response = client.post("/api/donate", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"ok": False, "message": "invalid JSON"}

    def test_unexpected_error(self, client):
        with patch(
            "rasya_api.app.api.v1.endpoints.donations.DonationService.list_reviews",
            side_effect=RuntimeError("boom"),
        ):
            with TestClient(app, raise_server_exceptions=False) as quiet_client:
                response = quiet_client.get("/api/reviews")
        assert response.status_code == 500
        assert response.json() == {"ok": False, "message": "internal error"}


class TestAuditLog:

    def test_filter_and_limit(self, client, admin_headers):
        client.post("/api/admin/orders", json={"layanan": "UI Designer"}, headers=admin_headers)
        client.post("/api/admin/analitik", json={"name": "Figma"}, headers=admin_headers)
        client.post("/api/admin/analitik", json={"name": "Canva"}, headers=admin_headers)

        logs = client.get("/api/admin/audit", headers=admin_headers).json()["logs"]
        assert [log["object_type"] for log in logs] == ["analitik", "analitik", "order"]

        orders_only = client.get("/api/admin/audit?object_type=order", headers=admin_headers).json()["logs"]
        assert len(orders_only) == 1
        assert orders_only[0]["details"] == {"layanan": "UI Designer"}

        limited = client.get("/api/admin/audit?limit=1", headers=admin_headers).json()
        assert limited["ok"] is True
        assert len(limited["logs"]) == 1

    def test_limit_out_of_range(self, client, admin_headers):
        response = client.get("/api/admin/audit?limit=0", headers=admin_headers)
        assert response.status_code == 400


class TestCors:

    def test_preflight(self, client):
        response = client.options(
            "/api/donate",
            headers={
                "Origin": "https://raspro.co.id",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://raspro.co.id"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_preflight_admin_headers(self, client):
        response = client.options(
            "/api/admin/services",
            headers={
                "Origin": "https://raspro.co.id",
                "Access-Control-Request-Method": "PUT",
                "Access-Control-Request-Headers": "Authorization, X-Admin-Key",
            },
        )
        assert response.status_code == 200

    def test_simple_request(self, client):
        response = client.get("/api/services", headers={"Origin": "https://raspro.co.id"})
        assert response.headers["access-control-allow-origin"] == "https://raspro.co.id"

    def test_unknown_origin(self, client):
        response = client.get("/api/services", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in response.headers

    def test_origins_setting(self):
        assert Settings(site_url="https://raspro.co.id/", cors_origins="").allowed_cors_origins() == [
            "https://raspro.co.id"
        ]
        configured = Settings(cors_origins="http://localhost:3000, https://raspro.co.id/")
        assert configured.allowed_cors_origins() == ["http://localhost:3000", "https://raspro.co.id"]
