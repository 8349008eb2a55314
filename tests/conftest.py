"""
Test configuration and fixtures
"""

import io
import os
import tempfile

# Settings are read from the environment when the package is imported,
# so the test configuration has to be in place before that.
_TEST_ROOT = tempfile.mkdtemp(prefix="rasya-tests-")
os.environ["DATABASE_URL"] = os.path.join(_TEST_ROOT, "bootstrap.db")
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_ALLOWED_EMAIL"] = "admin@example.com"
os.environ["BANK_NAME"] = "BCA"
os.environ["BANK_NUMBER"] = "1234567890"
os.environ["BANK_ACCOUNT"] = "Rasya Production"
os.environ["MIDTRANS_SERVER_KEY"] = ""
os.environ["MIDTRANS_CLIENT_KEY"] = ""
os.environ["SITE_URL"] = "https://raspro.co.id"
os.environ["CORS_ORIGINS"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from fpdf import FPDF  # noqa: E402
from PIL import Image, ImageDraw  # noqa: E402

from rasya_api.app.core.config import settings  # noqa: E402
from rasya_api.app.core.db import init_db  # noqa: E402
from rasya_api.app.core.security import create_admin_token  # noqa: E402
from rasya_api.app.main import app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """Point the database and the upload directory at a fresh temp dir"""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "rasya.db"))
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))
    init_db()
    yield tmp_path


@pytest.fixture(scope="function")
def client():
    """Test client with startup events (migrations, service seeding) run"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    """Authorization header carrying a valid admin token"""
    return {"Authorization": f"Bearer {create_admin_token(ADMIN_EMAIL)}"}


@pytest.fixture
def sample_pdf_bytes():
    """Two page A4 document standing in for an agreement"""
    pdf = FPDF()
    pdf.set_font("Helvetica", size=12)
    for page in range(2):
        pdf.add_page()
        pdf.cell(0, 10, f"Halaman {page + 1}")
    return bytes(pdf.output())


@pytest.fixture
def signature_png_bytes():
    """Dark stroke on a white background, as a photographed signature"""
    image = Image.new("RGB", (120, 60), (255, 255, 255))
    draw = ImageDraw.Draw(image)
    draw.line((10, 40, 110, 20), fill=(20, 20, 20), width=4)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
