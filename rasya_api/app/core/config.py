"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API boots in development without any setup; production deployments
override them through the environment (bank details, Midtrans keys,
the admin allow-list and the JWT secret).
"""

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Rasya Production API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    service_name: str = "rasya-production-api"
    env: str = os.getenv("ENV", "development")
    port: int = _env_int("PORT", 8080)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # All REST routes are mounted under this prefix (``/api/services`` etc.).
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Manual bank transfer details shown after a donation.
    bank_name: str = os.getenv("BANK_NAME", "")
    bank_number: str = os.getenv("BANK_NUMBER", "")
    bank_account: str = os.getenv("BANK_ACCOUNT", "")

    # Donations at or above this amount (IDR) are highlighted instead of
    # being listed as public reviews.
    donate_highlight_idr: int = _env_int("DONATE_HIGHLIGHT_IDR", 50000)

    midtrans_server_key: str = os.getenv("MIDTRANS_SERVER_KEY", "")
    midtrans_client_key: str = os.getenv("MIDTRANS_CLIENT_KEY", "")
    midtrans_is_production: bool = os.getenv("MIDTRANS_IS_PRODUCTION", "").lower() in {"1", "true"}

    # Comma‑separated list of Google accounts allowed to sign in as admin.
    admin_allowed_email: str = os.getenv("ADMIN_ALLOWED_EMAIL", "")
    jwt_secret: str = os.getenv("JWT_SECRET", "")
    google_tokeninfo_url: str = "https://oauth2.googleapis.com/tokeninfo"

    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")

    # Path of the SQLite database file.  Relative paths are resolved
    # against the working directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "rasya_production.db")

    site_url: str = os.getenv("SITE_URL", "https://raspro.co.id")

    # Comma‑separated origins allowed to call the API from a browser;
    # empty means only ``site_url``.
    cors_origins: str = os.getenv("CORS_ORIGINS", "")

    def highlight_threshold(self) -> int:
        """Donation amount from which a donation counts as highlighted."""
        return self.donate_highlight_idr if self.donate_highlight_idr > 0 else 50000

    def allowed_admin_emails(self) -> set[str]:
        return {e.strip().lower() for e in self.admin_allowed_email.split(",") if e.strip()}

    def allowed_cors_origins(self) -> list[str]:
        origins = [o.strip().rstrip("/") for o in self.cors_origins.split(",") if o.strip()]
        return origins or [self.site_url.rstrip("/")]

    def midtrans_snap_url(self) -> str:
        if self.midtrans_is_production:
            return "https://app.midtrans.com/snap/v1/transactions"
        return "https://app.sandbox.midtrans.com/snap/v1/transactions"


# Instantiate settings once so other modules can import it.  Environment
# variables must be set before this module is imported.
settings = Settings()
