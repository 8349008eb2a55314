"""
Pydantic models for the taper (OTP‑gated e‑signature) flow.

The admin issues a one‑time code for a client, the client exchanges it
for a short‑lived token and uploads the agreement together with an
image of their signature.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from .common import OkResponse


class OtpCreate(BaseModel):
    label: str = Field("", examples=["RP/2025/001"], description="Penanda opsional, mis. nomor perjanjian")


class OtpResponse(OkResponse):
    otp: str
    expires_at: datetime
    url: str


class OtpVerifyRequest(BaseModel):
    otp: str = ""


class OtpVerifyResponse(OkResponse):
    token: str


class SignedDocRead(BaseModel):
    id: str
    otp_code: str
    label: str = ""
    filename: str
    created_at: str
    download_url: str


class SignedDocListResponse(OkResponse):
    docs: List[SignedDocRead]
