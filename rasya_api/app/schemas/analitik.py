"""Pydantic models for analytics items (skill/price cards per category)."""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field

from .common import OkResponse


class AnalitikCreate(BaseModel):
    category: str = Field("", examples=["Web & Digital"], description="Label atau slug kategori")
    name: str = ""
    desc: str = ""


class AnalitikUpdate(AnalitikCreate):
    id: str = ""


class AnalitikRead(BaseModel):
    id: str
    category: str
    name: str
    desc: str = ""
    order: int
    closed: bool = False
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class AnalitikGroupedResponse(OkResponse):
    items: Dict[str, List[AnalitikRead]]


class AnalitikListResponse(OkResponse):
    items: List[AnalitikRead]


class AnalitikResponse(OkResponse):
    item: AnalitikRead
