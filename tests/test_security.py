"""
Tests for token helpers and the admin guard
"""

import time

from rasya_api.app.core.security import (
    create_admin_token,
    create_taper_token,
    decode_token,
    encode_token,
    taper_secret,
)


class TestTokens:

    def test_round_trip(self):
        token = encode_token({"email": "a@b.c", "exp": int(time.time()) + 60}, "secret")
        claims = decode_token(token, "secret")
        assert claims["email"] == "a@b.c"

    def test_token_has_three_unpadded_parts(self):
        token = encode_token({"exp": int(time.time()) + 60}, "secret")
        parts = token.split(".")
        assert len(parts) == 3
        assert not any(part.endswith("=") for part in parts)

    def test_wrong_secret_rejected(self):
        token = encode_token({"exp": int(time.time()) + 60}, "secret")
        assert decode_token(token, "other") is None

    def test_expired_token_rejected(self):
        token = encode_token({"exp": int(time.time()) - 1}, "secret")
        assert decode_token(token, "secret") is None

    def test_malformed_token_rejected(self):
        assert decode_token("not-a-token", "secret") is None
        assert decode_token("a.b.c", "secret") is None

    def test_tampered_payload_rejected(self):
        token = encode_token({"email": "a@b.c", "exp": int(time.time()) + 60}, "secret")
        header, _, signature = token.split(".")
        forged = encode_token({"email": "evil@b.c", "exp": int(time.time()) + 60}, "secret").split(".")[1]
        assert decode_token(f"{header}.{forged}.{signature}", "secret") is None

    def test_admin_token_claims(self):
        claims = decode_token(create_admin_token("admin@example.com"), "test-secret")
        assert claims["email"] == "admin@example.com"
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

    def test_taper_token_carries_code(self):
        claims = decode_token(create_taper_token("123456"), taper_secret())
        assert claims["code"] == "123456"


class TestAdminGuard:
    """Every /api/admin route requires a valid admin token"""

    def test_missing_token(self, client):
        response = client.get("/api/admin/orders")
        assert response.status_code == 401
        assert response.json() == {"ok": False, "message": "unauthorized"}

    def test_invalid_token(self, client):
        response = client.get("/api/admin/orders", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_bearer_token(self, client, admin_headers):
        response = client.get("/api/admin/orders", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"ok": True, "orders": []}

    def test_x_admin_key_header(self, client):
        token = create_admin_token("admin@example.com")
        response = client.get("/api/admin/orders", headers={"X-Admin-Key": token})
        assert response.status_code == 200

    def test_taper_token_is_not_an_admin_token(self, client):
        token = create_taper_token("123456")
        response = client.get("/api/admin/orders", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
