"""
Pydantic models for services (layanan).

Prices are free text ("400 ribu (harga awal)", "Sesuai brief") so the
admin can phrase them freely; ``discount_percent`` is 0 for no
discount and ``price_after_discount`` is the text shown on the card
while a discount is active.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import OkResponse


class ServiceCreate(BaseModel):
    title: str = Field("", examples=["UI Designer"])
    tag: str = Field("", examples=["Design"], description="Design | Web & Digital | Konten & Kreatif | Lain-lain")
    desc: str = ""
    price_awal: str = Field("", examples=["400 ribu (harga awal)"])


class ServiceUpdate(ServiceCreate):
    id: str = ""
    discount_percent: int = Field(0, description="0-100; nilai di luar rentang diabaikan")
    price_after_discount: str = ""


class ServiceRead(BaseModel):
    id: str
    title: str
    tag: str
    desc: str
    price_awal: str
    discount_percent: int = 0
    price_after_discount: str = ""
    order: int
    closed: bool = False
    created_at: datetime
    slug: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class ServiceListResponse(OkResponse):
    services: List[ServiceRead]


class ServiceResponse(OkResponse):
    service: ServiceRead
