"""
Admin sign‑in through Google Identity Services.

The admin panel obtains a Google ID token in the browser and posts it
here.  The token is checked against Google's ``tokeninfo`` endpoint; if
it belongs to a verified e‑mail listed in ``ADMIN_ALLOWED_EMAIL`` an
admin JWT is issued.
"""

import logging

import requests

from ..core.config import settings
from ..core.security import create_admin_token

logger = logging.getLogger(__name__)

TOKENINFO_TIMEOUT = 10


class AdminLoginError(ValueError):
    """Sign‑in refused; ``status_code`` is the HTTP status to answer with."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthService:

    @classmethod
    def fetch_token_info(cls, id_token: str) -> dict:
        """Ask Google to validate ``id_token`` and return the token claims."""
        try:
            response = requests.get(
                settings.google_tokeninfo_url,
                params={"id_token": id_token},
                timeout=TOKENINFO_TIMEOUT,
            )
        except requests.RequestException as exc:
            logger.warning("Google tokeninfo request failed: %s", exc)
            raise AdminLoginError(401, "invalid token") from exc
        if response.status_code != 200:
            raise AdminLoginError(401, "invalid token")
        try:
            info = response.json()
        except ValueError as exc:
            raise AdminLoginError(401, "invalid token") from exc
        return info if isinstance(info, dict) else {}

    @classmethod
    async def login(cls, id_token: str) -> str:
        """Exchange a Google ID token for an admin JWT.

        Raises ``AdminLoginError`` with 503 when admin login is not
        configured, 400 for an empty token, 401 for an invalid token or
        unverified e‑mail, 403 for an e‑mail that is not allowed and 500
        when no signing secret is set.
        """
        allowed = settings.allowed_admin_emails()
        if not allowed:
            raise AdminLoginError(503, "admin login not configured (set ADMIN_ALLOWED_EMAIL)")
        id_token = (id_token or "").strip()
        if not id_token:
            raise AdminLoginError(400, "id_token required")
        info = cls.fetch_token_info(id_token)
        email = str(info.get("email") or "").strip().lower()
        if not email:
            raise AdminLoginError(401, "invalid token")
        if str(info.get("email_verified", "")).lower() != "true":
            raise AdminLoginError(401, "email not verified")
        if email not in allowed:
            logger.warning("Admin login refused for %s", email)
            raise AdminLoginError(403, "unauthorized")
        if not settings.jwt_secret:
            raise AdminLoginError(500, "auth not configured")
        logger.info("Admin login for %s", email)
        return create_admin_token(email)
