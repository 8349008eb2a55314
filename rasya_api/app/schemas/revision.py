"""
Pydantic models for revision tickets.

Each completed order gets two single‑use ticket codes (``RV-`` followed
by ten hex characters).  A client redeems a code to claim one revision
round.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import OkResponse


class RevisionTicketRead(BaseModel):
    id: str
    order_id: str
    code: str
    sequence: int
    status: str = Field("unused", description="unused | used")
    used_at: Optional[datetime] = None
    note: str = ""
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class RevisiKlaimRequest(BaseModel):
    code: str = Field("", examples=["RV-3FA9C0B12E"])
    note: str = ""


class RevisiKlaimResponse(OkResponse):
    message: str
    order_id: str
    revisi_ke: int
    sisa_revisi: int
