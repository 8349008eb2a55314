"""
Tests for OTP-gated signing of agreement PDFs
"""

import io
from datetime import timedelta
from pathlib import Path

import pytest
from PIL import Image
from pypdf import PdfReader

from rasya_api.app.api.v1.endpoints.taper import content_disposition
from rasya_api.app.core.config import settings
from rasya_api.app.core.db import get_connection, utcnow
from rasya_api.app.core.errors import SigningError
from rasya_api.app.services.taper_service import (
    SignaturePlacement,
    overlay_signature,
    parse_bool,
    process_signature,
    signed_base_name,
)


@pytest.fixture
def otp(client, admin_headers):
    """A fresh OTP issued by the admin"""
    response = client.post("/api/admin/taper/otp", json={"label": "RP-2025-001"}, headers=admin_headers)
    return response.json()["otp"]


@pytest.fixture
def taper_headers(client, otp):
    """Authorization header with a verified taper token"""
    token = client.post("/api/taper/verify", json={"otp": otp}).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def _sign(client, headers, pdf_bytes, signature_bytes, **fields):
    files = {
        "pdf": ("perjanjian.pdf", pdf_bytes, "application/pdf"),
        "signature": ("ttd.png", signature_bytes, "image/png"),
    }
    return client.post("/api/taper/sign", files=files, data=fields, headers=headers)


class TestHelpers:

    def test_placement_defaults(self):
        placement = SignaturePlacement.from_form(None, "", "abc")
        assert (placement.x_ratio, placement.y_ratio, placement.scale_ratio) == (0.72, 0.82, 0.20)

    def test_placement_clamped(self):
        placement = SignaturePlacement.from_form("1.5", "-0.2", "0.01")
        assert (placement.x_ratio, placement.y_ratio, placement.scale_ratio) == (1.0, 0.0, 0.08)
        assert SignaturePlacement.from_form(None, None, "0.9").scale_ratio == 0.5

    def test_parse_bool(self):
        assert parse_bool("true") and parse_bool("1") and parse_bool("Yes")
        assert not parse_bool("") and not parse_bool(None) and not parse_bool("0")

    def test_signed_base_name(self):
        assert signed_base_name("perjanjian.pdf") == "perjanjian-ditandatangani"
        assert signed_base_name(None) == "perjanjian-ditandatangani"
        assert signed_base_name("") == "perjanjian-ditandatangani"

    def test_process_signature_background_transparent(self, signature_png_bytes):
        image = process_signature(signature_png_bytes)
        assert image.mode == "RGBA"
        assert image.getpixel((0, 0))[3] == 0
        r, g, b, a = image.getpixel((60, 30))
        assert a == 255
        assert r == g == b < 100

    def test_process_signature_keeps_tinted_pixels(self):
        source = Image.new("RGB", (3, 1))
        source.putpixel((0, 0), (255, 255, 255))
        source.putpixel((1, 0), (250, 250, 230))
        source.putpixel((2, 0), (30, 60, 90))
        buffer = io.BytesIO()
        source.save(buffer, format="PNG")
        image = process_signature(buffer.getvalue())
        assert image.getpixel((0, 0))[3] == 0
        assert image.getpixel((1, 0))[3] == 255
        r, g, b, a = image.getpixel((2, 0))
        assert r == g == b and abs(r - 60) <= 1
        assert a == 255

    def test_content_disposition(self):
        assert content_disposition("inline", "a-b_c.pdf") == 'inline; filename="a-b_c.pdf"'
        assert content_disposition("attachment", 'kontrak "baru".pdf') == (
            "attachment; filename=\"kontrak__baru_.pdf\"; filename*=UTF-8''kontrak%20%22baru%22.pdf"
        )

    def test_process_signature_invalid(self):
        with pytest.raises(ValueError, match="tidak valid"):
            process_signature(b"not an image")

    def test_overlay_keeps_pages(self, sample_pdf_bytes, signature_png_bytes):
        signed = overlay_signature(sample_pdf_bytes, process_signature(signature_png_bytes), SignaturePlacement())
        reader = PdfReader(io.BytesIO(signed))
        assert len(reader.pages) == 2
        assert "Halaman 2" in reader.pages[-1].extract_text()
        assert "/XObject" in reader.pages[-1]["/Resources"]

    def test_overlay_rejects_garbage(self, signature_png_bytes):
        with pytest.raises(SigningError):
            overlay_signature(b"%PDF-broken", process_signature(signature_png_bytes), SignaturePlacement())


class TestOtp:

    def test_issue(self, client, admin_headers):
        response = client.post("/api/admin/taper/otp", json={"label": "RP-1"}, headers=admin_headers)
        data = response.json()
        assert data["ok"] is True
        assert len(data["otp"]) == 6 and data["otp"].isdigit()
        assert data["url"] == "http://testserver/taper"

    def test_issue_without_body(self, client, admin_headers):
        response = client.post("/api/admin/taper/otp", headers=admin_headers)
        assert response.status_code == 200

    def test_issue_behind_proxy(self, client, admin_headers):
        headers = dict(admin_headers, **{"X-Forwarded-Host": "raspro.co.id", "X-Forwarded-Proto": "https"})
        response = client.post("/api/admin/taper/otp", headers=headers)
        assert response.json()["url"] == "https://raspro.co.id/taper"

    def test_issue_requires_admin(self, client):
        assert client.post("/api/admin/taper/otp").status_code == 401

    def test_verify(self, client, otp):
        response = client.post("/api/taper/verify", json={"otp": f" {otp} "})
        assert response.status_code == 200
        assert response.json()["token"]

    def test_verify_wrong_code(self, client, otp):
        wrong = "000000" if otp != "000000" else "111111"
        response = client.post("/api/taper/verify", json={"otp": wrong})
        assert response.status_code == 401
        assert response.json()["message"] == "OTP tidak valid atau sudah kedaluwarsa"

    def test_verify_empty(self, client):
        response = client.post("/api/taper/verify", json={"otp": ""})
        assert response.status_code == 400
        assert response.json()["message"] == "OTP wajib diisi"

    def test_expired_code(self, client, otp):
        conn = get_connection()
        try:
            conn.execute(
                "UPDATE taper_otps SET expires_at = ? WHERE code = ?",
                ((utcnow() - timedelta(minutes=1)).isoformat(), otp),
            )
            conn.commit()
        finally:
            conn.close()
        assert client.post("/api/taper/verify", json={"otp": otp}).status_code == 401


class TestSign:

    def test_requires_token(self, client, sample_pdf_bytes, signature_png_bytes):
        response = _sign(client, {}, sample_pdf_bytes, signature_png_bytes)
        assert response.status_code == 401

    def test_preview(self, client, taper_headers, sample_pdf_bytes, signature_png_bytes, admin_headers):
        response = _sign(client, taper_headers, sample_pdf_bytes, signature_png_bytes, preview_only="true")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == 'inline; filename="preview-perjanjian-ditandatangani.pdf"'
        assert response.content.startswith(b"%PDF")
        docs = client.get("/api/admin/taper/signed", headers=admin_headers).json()["docs"]
        assert docs == []

    def test_sign_and_archive(self, client, otp, taper_headers, sample_pdf_bytes, signature_png_bytes, admin_headers):
        response = _sign(
            client, taper_headers, sample_pdf_bytes, signature_png_bytes, x_ratio="0.1", y_ratio="0.9", scale_ratio="0.3"
        )
        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="perjanjian-ditandatangani.pdf"'
        assert len(PdfReader(io.BytesIO(response.content)).pages) == 2

        docs = client.get("/api/admin/taper/signed", headers=admin_headers).json()["docs"]
        assert len(docs) == 1
        doc = docs[0]
        assert doc["otp_code"] == otp
        assert doc["label"] == "RP-2025-001"
        assert doc["filename"].endswith("-perjanjian-ditandatangani.pdf")
        assert doc["download_url"] == f"http://testserver/uploads/signed/{doc['filename']}"
        assert len(doc["created_at"]) == len("2025-01-01 00:00:00")
        stored = Path(settings.upload_dir) / "signed" / doc["filename"]
        assert stored.read_bytes() == response.content

    def test_files_found_by_extension(self, client, taper_headers, sample_pdf_bytes, signature_png_bytes):
        files = {
            "file1": ("kontrak.pdf", sample_pdf_bytes, "application/pdf"),
            "file2": ("ttd.jpg", _jpeg(signature_png_bytes), "image/jpeg"),
        }
        response = client.post("/api/taper/sign", files=files, data={"preview_only": "1"}, headers=taper_headers)
        assert response.status_code == 200
        assert 'filename="preview-kontrak-ditandatangani.pdf"' in response.headers["content-disposition"]

    def test_non_ascii_filename(self, client, taper_headers, sample_pdf_bytes, signature_png_bytes, admin_headers):
        files = {
            "pdf": ("perjanjian—klien.pdf", sample_pdf_bytes, "application/pdf"),
            "signature": ("ttd.png", signature_png_bytes, "image/png"),
        }
        response = client.post("/api/taper/sign", files=files, headers=taper_headers)
        assert response.status_code == 200
        assert response.headers["content-disposition"] == (
            'attachment; filename="perjanjian_klien-ditandatangani.pdf"; '
            "filename*=UTF-8''perjanjian%E2%80%94klien-ditandatangani.pdf"
        )
        docs = client.get("/api/admin/taper/signed", headers=admin_headers).json()["docs"]
        assert len(docs) == 1
        assert docs[0]["filename"].endswith("-perjanjian—klien-ditandatangani.pdf")

    def test_missing_signature(self, client, taper_headers, sample_pdf_bytes):
        files = {"pdf": ("perjanjian.pdf", sample_pdf_bytes, "application/pdf")}
        response = client.post("/api/taper/sign", files=files, headers=taper_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Butuh file PDF dan gambar tanda tangan"

    def test_invalid_signature_image(self, client, taper_headers, sample_pdf_bytes):
        response = _sign(client, taper_headers, sample_pdf_bytes, b"not an image")
        assert response.status_code == 400
        assert response.json()["message"] == "Gambar tanda tangan tidak valid"

    def test_broken_pdf(self, client, taper_headers, signature_png_bytes):
        response = _sign(client, taper_headers, b"%PDF-1.4 broken", signature_png_bytes)
        assert response.status_code == 500
        assert response.json()["message"].startswith("Gagal menempatkan tanda tangan")


def _jpeg(png_bytes):
    buffer = io.BytesIO()
    Image.open(io.BytesIO(png_bytes)).convert("RGB").save(buffer, format="JPEG")
    return buffer.getvalue()
