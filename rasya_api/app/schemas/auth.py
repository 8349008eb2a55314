"""Pydantic models for the admin sign‑in exchange."""

from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    id_token: str = Field("", description="Google ID token dari Google Identity Services")


class AdminLoginResponse(BaseModel):
    token: str
