"""
Pydantic models for orders.

Orders are internal records kept by the admin.  All fields are free
text; ``deadline`` is additionally interpreted as a date to compute the
remaining time shown in the admin queue.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import OkResponse
from .revision import RevisionTicketRead


class OrderCreate(BaseModel):
    layanan: str = Field("", examples=["Frontend Developer"])
    pemesan: str = ""
    deskripsi_pekerjaan: str = ""
    deadline: str = Field("", examples=["2025-04-30"])
    mulai_tanggal: str = ""
    kesepakatan_brief_uang: str = ""
    kapan_uang_masuk: str = ""


class OrderRead(OrderCreate):
    id: str
    completed: bool = False
    completed_at: Optional[datetime] = None
    created_at: datetime
    sisa_waktu: Optional[str] = Field(None, description="Sisa waktu menuju deadline")
    revision_tickets: List[RevisionTicketRead] = []

    model_config = {
        "from_attributes": True,
    }


class OrderCompleteRequest(BaseModel):
    id: str = ""


class OrderListResponse(OkResponse):
    orders: List[OrderRead]


class OrderResponse(OkResponse):
    order: OrderRead


class OrderCompleteResponse(OkResponse):
    order: OrderRead
    tickets: List[RevisionTicketRead]


class AntrianResponse(OkResponse):
    antrian: List[str]
