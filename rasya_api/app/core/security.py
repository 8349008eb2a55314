"""
Token helpers and authentication dependencies.

Two kinds of HS256 JSON Web Tokens are issued by the API:

* **admin tokens** (claims ``email``, ``iat``, ``exp``), returned by the
  Google sign‑in exchange and valid for 24 hours;
* **taper tokens** (claims ``code``, ``exp``), returned after an OTP is
  verified and valid for 20 minutes; they authorise a single client to
  upload a signed agreement.

Tokens are ``header.payload.signature`` with every part base64url
encoded without padding, signed with HMAC‑SHA256.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

ADMIN_TOKEN_TTL_SECONDS = 24 * 60 * 60
TAPER_TOKEN_TTL_SECONDS = 20 * 60
TAPER_DEFAULT_SECRET = "taper-default-secret-change-in-production"

_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def encode_token(claims: Dict[str, Any], secret: str) -> str:
    """Serialise and sign ``claims`` as an HS256 JWT."""
    header_b64 = _b64_url_encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(_sign(signing_input, secret))}"


def decode_token(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Verify a JWT and return its claims.

    Returns ``None`` when the token is malformed, the signature does not
    match or ``exp`` is not in the future.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        actual_sig = _b64_url_decode(signature_b64)
        expected_sig = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), secret)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        # binascii.Error and json.JSONDecodeError are ValueError subclasses
        return None
    if not isinstance(data, dict):
        return None
    try:
        if int(data.get("exp", 0)) <= int(time.time()):
            return None
    except (TypeError, ValueError):
        return None
    return data


def create_admin_token(email: str) -> str:
    """Issue a 24 hour admin token for ``email`` signed with ``JWT_SECRET``."""
    now = int(time.time())
    claims = {"email": email, "exp": now + ADMIN_TOKEN_TTL_SECONDS, "iat": now}
    return encode_token(claims, settings.jwt_secret)


def taper_secret() -> str:
    return settings.jwt_secret or TAPER_DEFAULT_SECRET


def create_taper_token(otp_code: str) -> str:
    """Issue a short‑lived token bound to a verified OTP."""
    claims = {"code": otp_code, "exp": int(time.time()) + TAPER_TOKEN_TTL_SECONDS}
    return encode_token(claims, taper_secret())


security = HTTPBearer(auto_error=False)


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_admin_key: Optional[str] = Header(None, alias="X-Admin-Key"),
) -> Dict[str, Any]:
    """Dependency guarding every ``/admin`` route.

    The token is taken from ``Authorization: Bearer`` and, when that is
    absent, from the ``X-Admin-Key`` header.  Only a valid admin JWT is
    accepted (one carrying an ``email`` claim); the decoded claims are
    returned to the endpoint.
    """
    token = credentials.credentials.strip() if credentials else ""
    if not token:
        token = (x_admin_key or "").strip()
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token or not settings.jwt_secret:
        raise unauthorized
    claims = decode_token(token, settings.jwt_secret)
    if not claims or not claims.get("email"):
        raise unauthorized
    return claims


def require_taper_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Return the OTP code embedded in a valid taper token, else 401."""
    claims = decode_token(credentials.credentials, taper_secret()) if credentials else None
    code = claims.get("code") if claims else None
    if not code:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token tidak valid atau kedaluwarsa",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return str(code)
